"""Client-side data pipeline: series, filters, highlighting, paging."""

from .filters import ExplorerView, FilterState, apply_filter
from .highlight import HoverResult, highlight_hover, resolve_selection
from .pagination import PAGE_SIZE, Pager, page_count, paginate
from .series import BIN_CONFIGS, BinConfig, PlotSpec, PlotType, build_series
from .state import ExplorerState

__all__ = [
    "BIN_CONFIGS",
    "BinConfig",
    "PlotSpec",
    "PlotType",
    "build_series",
    "ExplorerView",
    "FilterState",
    "apply_filter",
    "HoverResult",
    "highlight_hover",
    "resolve_selection",
    "PAGE_SIZE",
    "Pager",
    "page_count",
    "paginate",
    "ExplorerState",
]
