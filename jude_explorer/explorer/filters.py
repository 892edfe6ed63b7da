"""Perijove-range and vortex filtering of an aligned series/record view."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from ..visualization.colors import ColorScheme
from .series import ChartSeries, HistogramSeries, ScatterSeries

PERIJOVE_MIN = 13
PERIJOVE_MAX = 36


@dataclass(frozen=True)
class FilterState:
    epoch_min: int = PERIJOVE_MIN
    epoch_max: int = PERIJOVE_MAX
    vortex_only: bool = True


@dataclass(frozen=True, eq=False)
class ExplorerView:
    """A chart series together with the records its points refer to."""

    series: ChartSeries
    records: pd.DataFrame

    def __post_init__(self) -> None:
        if len(self.series) != len(self.records):
            raise ValueError(
                f"Series has {len(self.series)} points but view has "
                f"{len(self.records)} records"
            )

    def __len__(self) -> int:
        return len(self.records)


def filter_mask(records: pd.DataFrame, state: FilterState) -> np.ndarray:
    """Boolean array marking the records that pass *state*.

    Records with a missing ``perijove`` never pass; with ``vortex_only``
    only records whose ``is_vortex`` is exactly ``True`` pass.
    """
    if records.empty:
        return np.zeros(0, dtype=bool)

    perijove = pd.to_numeric(records["perijove"], errors="coerce").to_numpy(
        dtype=float, na_value=np.nan
    )
    with np.errstate(invalid="ignore"):
        in_range = np.logical_and(perijove >= state.epoch_min, perijove <= state.epoch_max)

    if not state.vortex_only:
        return in_range
    is_vortex = records["is_vortex"].eq(True).fillna(False).to_numpy(dtype=bool)
    return np.logical_and(in_range, is_vortex)


def take_series(
    series: ChartSeries, positions: np.ndarray, scheme: ColorScheme = ColorScheme()
) -> ChartSeries:
    """Copy the points at *positions* into a new series with reset colours."""
    x = tuple(series.x[i] for i in positions)
    if isinstance(series, HistogramSeries):
        return HistogramSeries(x=x, bins=series.bins, colors=scheme.fill(series.bin_count))
    if isinstance(series, ScatterSeries):
        return ScatterSeries(
            x=x,
            y=tuple(series.y[i] for i in positions),
            colors=scheme.fill(len(x)),
        )
    raise ValueError(f"Unsupported series type: {type(series).__name__}")


def apply_filter(
    base: ExplorerView,
    state: FilterState,
    scheme: ColorScheme = ColorScheme(),
) -> ExplorerView:
    """Filter *base* by perijove range and vortex flag.

    *base* must be the unfiltered view built at the last submit; filters
    never stack on a previously filtered view. Relative order is kept,
    and the returned records carry a fresh ``RangeIndex`` so that
    position ``i`` in the series is ``records.iloc[i]``.
    """
    positions = np.flatnonzero(filter_mask(base.records, state))
    records = base.records.iloc[positions].reset_index(drop=True)
    return ExplorerView(series=take_series(base.series, positions, scheme), records=records)
