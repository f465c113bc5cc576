"""Check command implementation.

Reports free space on the cache volume and whether eviction would run.
Never scans or deletes anything.
"""

from pathlib import Path
from typing import Annotated

import typer

from cachedecimate.cache.errors import FilesystemAccessError
from cachedecimate.cache.space import check_pressure
from cachedecimate.cli.display import create_reading_table
from cachedecimate.cli.types import resolve_config
from cachedecimate.core.log import get_logger
from cachedecimate.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show free space of the cache volume.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def check(
    ctx: typer.Context,
    cache: Annotated[
        Path | None,
        typer.Option("--cache", "-c", help="Where the cached files are stored."),
    ] = None,
    free: Annotated[
        float | None,
        typer.Option("--free", "-f", help="Free-space threshold (percent)."),
    ] = None,
) -> None:
    """Show free space of the cache volume against the threshold."""
    config = resolve_config(ctx, cache_path=cache, free_threshold_percent=free)

    try:
        reading, under_pressure = check_pressure(
            config.cache_path,
            config.free_threshold_percent,
            log=get_logger(),
        )
    except FilesystemAccessError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(create_reading_table(reading, config.free_threshold_percent))

    if under_pressure:
        print_warning("Free space is at or below the threshold. Eviction would run.")
    else:
        print_success("Free space is above the threshold. No eviction needed.")
