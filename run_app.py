#!/usr/bin/env python
"""Entry point for the Dash JuDE explorer.

Usage
-----
    python run_app.py [--backend-url http://host/backend/]

Or offline, from a saved exploration-data JSON file (reload and export disabled):
    python run_app.py --data path/to/exploration_data.json
"""

from __future__ import annotations

import argparse
import sys

import requests

from jude_explorer.client import BackendClient, default_backend_url
from jude_explorer.io import load_exploration_data
from jude_explorer.utils.logging import configure_logging, get_logger
from jude_explorer.visualization.colors import DEFAULT_COLOR, HIGHLIGHT_COLOR, ColorScheme

logger = get_logger("jude_explorer.run_app")


def main() -> None:
    parser = argparse.ArgumentParser(description="Launch the JuDE explorer web app")
    parser.add_argument(
        "--backend-url", default=default_backend_url(),
        help="Backend base path (default: $JUDE_BACKEND_URL or %(default)s)",
    )
    parser.add_argument(
        "--data", default=None,
        help="Load exploration data from a local JSON file instead of the backend",
    )
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=8050,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Run Dash in debug mode",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Logging level (default: $JUDE_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--default-color", default=DEFAULT_COLOR, help="Marker colour")
    parser.add_argument("--highlight-color", default=HIGHLIGHT_COLOR, help="Hover colour")
    args = parser.parse_args()

    configure_logging(args.log_level)

    try:
        scheme = ColorScheme(default=args.default_color, highlight=args.highlight_color)
    except ValueError as exc:
        parser.error(str(exc))

    # Load data
    client = None
    try:
        if args.data:
            dataset = load_exploration_data(args.data)
        else:
            client = BackendClient(args.backend_url)
            dataset = client.fetch_exploration_data()
    except (OSError, ValueError, requests.RequestException) as exc:
        logger.error("Could not load exploration data: %s", exc)
        sys.exit(1)

    logger.info("Starting Dash app on http://%s:%s/", args.host, args.port)

    from jude_explorer.app import create_app
    app = create_app(dataset, client=client, scheme=scheme)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
