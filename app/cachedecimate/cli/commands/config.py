"""Config command implementation.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from cachedecimate.cli.types import resolve_config
from cachedecimate.core.config import ConfigError, DecimateConfig, config_to_dict, save_config
from cachedecimate.core.paths import get_config_path
from cachedecimate.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = resolve_config(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="info")
    table.add_column("Value")

    for key, value in config_to_dict(config).items():
        table.add_row(key, str(value))

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    obj = ctx.obj or {}
    path = obj.get("config_path") or get_config_path()

    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(DecimateConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
