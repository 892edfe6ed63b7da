"""Explorer state, kept separate from the Dash UI.

The state only ever holds values returned by the pipeline functions;
each update replaces them wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import pandas as pd

from ..io import DatasetStore
from ..utils.logging import get_logger
from ..visualization.colors import ColorScheme
from .filters import ExplorerView, FilterState, apply_filter
from .highlight import HoverResult, highlight_hover, resolve_selection
from .series import PlotSpec, build_series

logger = get_logger(__name__)

SELECTION_PANEL = "selection"
HOVER_PANEL = "hover"
PANELS = (SELECTION_PANEL, HOVER_PANEL)


@dataclass
class ExplorerState:
    """Pure-data state for the explorer.

    ``base_view`` is the unfiltered view from the last submit; ``view`` is
    the current filtered view derived from it. ``panels`` holds the record
    frame shown by each image panel.
    """

    dataset: DatasetStore
    scheme: ColorScheme = field(default_factory=ColorScheme)
    filter_state: FilterState = field(default_factory=FilterState)

    spec: Optional[PlotSpec] = field(default=None, init=False)
    base_view: Optional[ExplorerView] = field(default=None, init=False)
    view: Optional[ExplorerView] = field(default=None, init=False)
    panels: Dict[str, pd.DataFrame] = field(init=False)

    def __post_init__(self) -> None:
        self._clear_panels()

    def _clear_panels(self) -> None:
        empty = self.dataset.subject_data.iloc[0:0]
        self.panels = {name: empty for name in PANELS}

    def _reset_panels(self) -> None:
        records = self.view.records
        self.panels = {
            SELECTION_PANEL: records,
            HOVER_PANEL: records.iloc[0:1],
        }

    def submit(self, spec: PlotSpec, filter_state: Optional[FilterState] = None) -> ExplorerView:
        """Build a new base series for *spec* and filter it."""
        if filter_state is not None:
            self.filter_state = filter_state
        self.spec = spec
        self.base_view = ExplorerView(
            series=build_series(spec, self.dataset.subject_data, self.scheme),
            records=self.dataset.subject_data,
        )
        logger.info(
            "Plotting %s of %s over %s subjects",
            spec.plot_type.label, dict(spec.variables), len(self.base_view),
        )
        return self._refilter()

    def update_filter(self, filter_state: FilterState) -> Optional[ExplorerView]:
        """Store *filter_state* and re-filter the base view, if any."""
        self.filter_state = filter_state
        if self.base_view is None:
            return None
        return self._refilter()

    def _refilter(self) -> ExplorerView:
        self.view = apply_filter(self.base_view, self.filter_state, self.scheme)
        self._reset_panels()
        fs = self.filter_state
        logger.info(
            "Filter perijove [%s, %s]%s: %s / %s subjects",
            fs.epoch_min, fs.epoch_max, " vortices only" if fs.vortex_only else "",
            len(self.view), len(self.base_view),
        )
        return self.view

    def hover(self, event: Optional[Mapping[str, Any]]) -> Optional[HoverResult]:
        if self.view is None:
            return None
        result = highlight_hover(self.view, event, self.scheme)
        self.panels = {**self.panels, HOVER_PANEL: result.records}
        logger.debug("Hover on %s -> %s subjects", result.highlighted, len(result.records))
        return result

    def select(self, event: Optional[Mapping[str, Any]]) -> Optional[pd.DataFrame]:
        if self.view is None:
            return None
        records = resolve_selection(self.view, event)
        self.panels = {**self.panels, SELECTION_PANEL: records}
        logger.debug("Selection -> %s subjects", len(records))
        return records

    def reload(self, dataset: DatasetStore) -> None:
        """Swap in a freshly fetched dataset and drop all derived state."""
        self.dataset = dataset
        self.spec = None
        self.base_view = None
        self.view = None
        self._clear_panels()
