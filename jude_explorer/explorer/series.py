"""Chart series derived from the subject records.

A series is positionally aligned with the record frame it was built
from: ``series.x[i]`` (and ``series.y[i]`` for scatter) belongs to
``records.iloc[i]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

import pandas as pd

from ..visualization.colors import ColorScheme


class PlotType(str, Enum):
    HISTOGRAM = "hist"
    SCATTER = "scatter"

    @property
    def axes(self) -> Tuple[str, ...]:
        """Axis roles that need a variable for this plot type."""
        if self is PlotType.HISTOGRAM:
            return ("x",)
        return ("x", "y")

    @property
    def label(self) -> str:
        return "Histogram" if self is PlotType.HISTOGRAM else "Scatter plot"


@dataclass(frozen=True)
class BinConfig:
    start: float
    end: float
    size: float
    count: int

    def to_plotly(self) -> dict:
        return {"start": self.start, "end": self.end, "size": self.size}


# Fixed histogram bins; any other field falls back to Plotly's auto-binning.
BIN_CONFIGS: dict[str, BinConfig] = {
    "latitude": BinConfig(start=-70, end=70, size=5, count=28),
    "longitude": BinConfig(start=-180, end=180, size=10, count=36),
    "perijove": BinConfig(start=13, end=36, size=1, count=24),
}


@dataclass(frozen=True)
class PlotSpec:
    """Plot type plus the record field chosen for each axis role."""

    plot_type: PlotType
    variables: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_form(
        cls, plot_type: str, x: Optional[str], y: Optional[str] = None
    ) -> Optional["PlotSpec"]:
        """Build a spec from the form values, or ``None`` if an axis is unset.

        Raises
        ------
        ValueError
            If *plot_type* is not a known plot type.
        """
        ptype = PlotType(plot_type)
        chosen = {"x": x, "y": y}
        variables = {}
        for axis in ptype.axes:
            if not chosen[axis]:
                return None
            variables[axis] = chosen[axis]
        return cls(plot_type=ptype, variables=variables)

    @property
    def x(self) -> str:
        return self.variables["x"]

    @property
    def y(self) -> Optional[str]:
        return self.variables.get("y")


@dataclass(frozen=True)
class HistogramSeries:
    x: Tuple[Any, ...]
    bins: Optional[BinConfig]
    colors: Tuple[str, ...]

    @property
    def bin_count(self) -> int:
        return self.bins.count if self.bins is not None else 0

    def __len__(self) -> int:
        return len(self.x)


@dataclass(frozen=True)
class ScatterSeries:
    x: Tuple[Any, ...]
    y: Tuple[Any, ...]
    colors: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError(
                f"Scatter x/y length mismatch: {len(self.x)} != {len(self.y)}"
            )

    def __len__(self) -> int:
        return len(self.x)


ChartSeries = Union[HistogramSeries, ScatterSeries]


def extract_values(records: pd.DataFrame, field_name: str) -> Tuple[Any, ...]:
    """Return one value per record for *field_name*, missing values included."""
    if field_name not in records.columns:
        return (None,) * len(records)
    return tuple(records[field_name].tolist())


def build_series(
    spec: PlotSpec,
    records: pd.DataFrame,
    scheme: ColorScheme = ColorScheme(),
) -> ChartSeries:
    """Derive the unfiltered chart series for *spec* from *records*.

    Parameters
    ----------
    spec : PlotSpec
        Complete plot specification (see :meth:`PlotSpec.from_form`).
    records : pd.DataFrame
        The full record table; its row order defines the point order.
    scheme : ColorScheme
        Supplies the default colour used to initialise the colour array.

    Returns
    -------
    HistogramSeries or ScatterSeries
    """
    if spec.plot_type is PlotType.HISTOGRAM:
        bins = BIN_CONFIGS.get(spec.x)
        return HistogramSeries(
            x=extract_values(records, spec.x),
            bins=bins,
            colors=scheme.fill(bins.count if bins is not None else 0),
        )
    if spec.plot_type is PlotType.SCATTER:
        x = extract_values(records, spec.x)
        return ScatterSeries(
            x=x,
            y=extract_values(records, spec.y),
            colors=scheme.fill(len(x)),
        )
    raise ValueError(f"Unsupported plot type: {spec.plot_type!r}")
