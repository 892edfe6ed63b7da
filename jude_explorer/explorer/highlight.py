"""Map Plotly hover/select events onto colours and records.

Events are the ``hoverData`` / ``selectedData`` dicts that ``dcc.Graph``
delivers: ``{"points": [...]}``. A scatter point carries its sample
index in ``pointNumber`` (``pointIndex`` on some trace types); a
histogram point carries ``binNumber`` plus the sample indices that fell
into that bin in ``pointNumbers``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from ..visualization.colors import ColorScheme
from .filters import ExplorerView
from .series import HistogramSeries, ScatterSeries


@dataclass(frozen=True, eq=False)
class HoverResult:
    colors: Tuple[str, ...]
    records: pd.DataFrame
    # bins for a histogram, points for a scatter
    highlighted: Tuple[int, ...]


def event_points(event: Optional[Mapping[str, Any]]) -> List[dict]:
    """Return the event's point list; ``None`` or a point-less event gives ``[]``."""
    if not event:
        return []
    return list(event.get("points") or [])


def _unique(values: Iterable[Any]) -> List[int]:
    seen: set[int] = set()
    out = []
    for v in values:
        if v is None:
            continue
        v = int(v)
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def _point_number(point: Mapping[str, Any]) -> Optional[int]:
    number = point.get("pointNumber")
    return number if number is not None else point.get("pointIndex")


def sample_indices(view: ExplorerView, points: List[dict]) -> List[int]:
    """Record positions implicated by *points*, in event order, de-duplicated."""
    if isinstance(view.series, HistogramSeries):
        raw = (n for p in points for n in (p.get("pointNumbers") or []))
    elif isinstance(view.series, ScatterSeries):
        raw = (_point_number(p) for p in points)
    else:
        raise ValueError(f"Unsupported series type: {type(view.series).__name__}")
    return [i for i in _unique(raw) if 0 <= i < len(view)]


def bin_indices(points: List[dict]) -> List[int]:
    """Hovered bin numbers; a bin reported more than once counts once."""
    return sorted(_unique(p.get("binNumber") for p in points))


def auto_bin_limit(n_samples: int) -> int:
    """Upper bound on the bins Plotly's auto-binning draws for *n_samples* values.

    Plotly makes auto bins at least ``2 * stdev / n**0.4`` wide, which keeps
    the count below the sample count; two more cover the edge bins.
    """
    return n_samples + 2


def take_records(records: pd.DataFrame, positions: List[int]) -> pd.DataFrame:
    return records.iloc[positions].reset_index(drop=True)


def highlight_hover(
    view: ExplorerView,
    event: Optional[Mapping[str, Any]],
    scheme: ColorScheme = ColorScheme(),
) -> HoverResult:
    """Recolour the hovered bins/points and collect their records.

    The colour array is rebuilt from the default colour on every call, so
    exactly the implicated entries carry the highlight colour.
    """
    points = event_points(event)
    series = view.series

    if isinstance(series, HistogramSeries):
        bins = bin_indices(points)
        n_bins = series.bin_count
        if series.bins is None:
            # auto-binned: cover every bin the renderer can draw
            n_bins = max(
                [len(series.colors), auto_bin_limit(len(view))] + [b + 1 for b in bins]
            )
        highlighted = tuple(b for b in bins if 0 <= b < n_bins)
        colors = scheme.highlighted(n_bins, highlighted)
    elif isinstance(series, ScatterSeries):
        highlighted = tuple(sample_indices(view, points))
        colors = scheme.highlighted(len(series), highlighted)
    else:
        raise ValueError(f"Unsupported series type: {type(series).__name__}")

    records = take_records(view.records, sample_indices(view, points))
    return HoverResult(colors=colors, records=records, highlighted=highlighted)


def resolve_selection(
    view: ExplorerView, event: Optional[Mapping[str, Any]]
) -> pd.DataFrame:
    """Records for a box/lasso selection.

    An empty selection or a deselect (``None``) yields every record in
    *view*.
    """
    points = event_points(event)
    if not points:
        return view.records
    return take_records(view.records, sample_indices(view, points))
