"""Dash front end for the explorer."""

from .app import create_app

__all__ = ["create_app"]
