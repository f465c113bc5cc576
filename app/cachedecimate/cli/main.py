"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from cachedecimate import __version__
from cachedecimate.cli.commands import check, config, plan, run
from cachedecimate.core.log import configure_logging, teardown_logging

# Create main Typer app
app = typer.Typer(
    name="cache-decimate",
    help="Evict the least-recently-accessed cache files when disk space runs low.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cache-decimate version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to config file (default: ~/.config/cache-decimate/config.toml).",
        ),
    ] = None,
) -> None:
    """cache-decimate - Disk-space guardian for file caches.

    When free space on the cache volume drops to the threshold, the
    least-recently-accessed 10% of cached files are removed.
    """
    configure_logging(verbose=verbose, quiet=quiet)
    ctx.call_on_close(teardown_logging)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(check.app, name="check")
app.add_typer(plan.app, name="plan")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
