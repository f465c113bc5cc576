"""Run command implementation.

Checks free space on the cache volume and, under pressure, evicts the
least-recently-accessed share of the cached files.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.progress import track

from cachedecimate.cache.errors import FilesystemAccessError
from cachedecimate.cache.guard import guard
from cachedecimate.cache.models import FileRecord
from cachedecimate.cli.display import create_victims_table, print_decimation_summary
from cachedecimate.cli.types import is_quiet, resolve_config
from cachedecimate.core.log import get_logger
from cachedecimate.utils.formatting import console, err_console, print_error, print_success

app = typer.Typer(
    help="Evict old cache files if free space is low.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    cache: Annotated[
        Path | None,
        typer.Option(
            "--cache",
            "-c",
            help="Where the cached files are stored.",
        ),
    ] = None,
    free: Annotated[
        float | None,
        typer.Option(
            "--free",
            "-f",
            help="Delete files if we have this much free space (percent) or less.",
        ),
    ] = None,
    delete: Annotated[
        bool | None,
        typer.Option(
            "--delete/--dry-run",
            "-d",
            help="Delete files for real (otherwise just print what would be deleted).",
        ),
    ] = None,
    percent: Annotated[
        int | None,
        typer.Option(
            "--percent",
            "-p",
            help="Share of files to evict under pressure (1-100).",
        ),
    ] = None,
) -> None:
    """Check free space and evict the oldest-accessed cache files.

    Nothing is deleted unless --delete is given (or commit = true is
    set in the config file).

    Examples:
        cache-decimate run -c /data/cache            # Dry-run
        cache-decimate run -c /data/cache -f 15 -d   # Delete below 15% free
    """
    config = resolve_config(
        ctx,
        cache_path=cache,
        free_threshold_percent=free,
        commit=delete,
        evict_percent=percent,
    )
    quiet = is_quiet(ctx)

    def progress(victims: Sequence[FileRecord]) -> Iterable[FileRecord]:
        return track(
            victims,
            description="Evicting...",
            console=err_console,
            transient=True,
            disable=quiet,
        )

    try:
        report = guard(
            config.cache_path,
            config.free_threshold_percent,
            config.commit,
            evict_percent=config.evict_percent,
            log=get_logger(),
            progress=progress,
        )
    except FilesystemAccessError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if report.decimation is None:
        print_success(
            f"{report.reading.free_percent:.2f}% free is above the "
            f"{report.threshold:.2f}% threshold. Nothing to evict."
        )
        return

    decimation = report.decimation
    if decimation.plan.victims and not quiet:
        console.print(create_victims_table(decimation.plan.victims, commit=decimation.commit))
    print_decimation_summary(decimation)
