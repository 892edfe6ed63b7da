"""jude_explorer: interactive exploration of JuDE subjects by histogram and scatter plot."""

from .client import BackendClient, ExportError, ExportFile
from .explorer import (
    BIN_CONFIGS,
    BinConfig,
    ExplorerState,
    ExplorerView,
    FilterState,
    HoverResult,
    PAGE_SIZE,
    Pager,
    PlotSpec,
    PlotType,
    apply_filter,
    build_series,
    highlight_hover,
    page_count,
    paginate,
    resolve_selection,
)
from .io import DatasetStore, load_exploration_data, prepare_subject_dataframe
from .visualization.colors import ColorScheme

__all__ = [
    # io
    "DatasetStore",
    "load_exploration_data",
    "prepare_subject_dataframe",
    # client
    "BackendClient",
    "ExportError",
    "ExportFile",
    # pipeline
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
    # visualization
    "ColorScheme",
]
