"""Default / highlight colour scheme for chart markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from matplotlib import colors as mcolors

DEFAULT_COLOR = "#2e86c1"
HIGHLIGHT_COLOR = "#922b21"


def normalize_color(color: str) -> str:
    """Return *color* (a hex string or a named colour) as ``'#rrggbb'``.

    Raises
    ------
    ValueError
        If matplotlib does not recognise the colour.
    """
    return mcolors.to_hex(color)


@dataclass(frozen=True)
class ColorScheme:
    """The two marker colours used by the explorer.

    Every point or bin carries ``default`` unless it is implicated by the
    current hover event, in which case it carries ``highlight``.
    """

    default: str = DEFAULT_COLOR
    highlight: str = HIGHLIGHT_COLOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "default", normalize_color(self.default))
        object.__setattr__(self, "highlight", normalize_color(self.highlight))

    def fill(self, n: int) -> Tuple[str, ...]:
        """Return *n* copies of the default colour."""
        return (self.default,) * max(n, 0)

    def highlighted(self, n: int, indices: Iterable[int]) -> Tuple[str, ...]:
        """Return a default-coloured array of length *n* with *indices* highlighted.

        Indices outside ``[0, n)`` are ignored.
        """
        colors = list(self.fill(n))
        for idx in indices:
            if 0 <= idx < n:
                colors[idx] = self.highlight
        return tuple(colors)
