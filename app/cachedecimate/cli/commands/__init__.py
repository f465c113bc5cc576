"""CLI commands for cache-decimate.

This package contains all subcommand implementations.
"""

from cachedecimate.cli.commands import check, config, plan, run

__all__ = ["check", "config", "plan", "run"]
