"""Dash app factory and server-side state."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..client import BackendClient
from ..explorer.state import ExplorerState
from ..io import DatasetStore
from ..visualization.colors import ColorScheme


@dataclass
class ServerState:
    """Mutable server-side state for the single-user Dash app."""

    explorer: ExplorerState
    client: Optional[BackendClient] = None


# Module-level singleton, set by create_app()
state: ServerState | None = None


def create_app(
    dataset: DatasetStore,
    *,
    client: Optional[BackendClient] = None,
    scheme: Optional[ColorScheme] = None,
) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    dataset : DatasetStore
        Already-fetched subject records and variable catalogue.
    client : BackendClient, optional
        Backend used for export and reload. Without it both are disabled.
    scheme : ColorScheme, optional
        Default/highlight marker colours.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global state
    state = ServerState(
        explorer=ExplorerState(dataset=dataset, scheme=scheme or ColorScheme()),
        client=client,
    )

    assets_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")

    app = dash.Dash(
        __name__,
        title="JuDE explorer",
        assets_folder=assets_dir,
        suppress_callback_exceptions=True,
    )
    app.layout = build_layout(state)
    callbacks.register(app)

    return app
