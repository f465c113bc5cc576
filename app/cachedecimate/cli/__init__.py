"""CLI package for cache-decimate.

This package contains the Typer application and all subcommands.
"""

from cachedecimate.cli.main import app

__all__ = ["app"]
