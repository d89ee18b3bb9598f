"""Command line interface."""

from lathe.cli.main import app

__all__ = ["app"]
