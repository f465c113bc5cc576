"""Plan command implementation.

Scans the cache and shows which files would be evicted, without
consulting the free-space threshold and without deleting anything.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from cachedecimate.cache.decimator import scan_and_plan
from cachedecimate.cache.errors import FilesystemAccessError
from cachedecimate.cache.models import EvictionPlan
from cachedecimate.cli.display import create_victims_table
from cachedecimate.cli.types import OutputFormat, resolve_config
from cachedecimate.core.log import get_logger
from cachedecimate.utils.formatting import console, print_error, print_info

app = typer.Typer(
    help="Show the eviction plan for the cache.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def plan(
    ctx: typer.Context,
    cache: Annotated[
        Path | None,
        typer.Option("--cache", "-c", help="Where the cached files are stored."),
    ] = None,
    percent: Annotated[
        int | None,
        typer.Option("--percent", "-p", help="Share of files to evict (1-100)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of victims shown."),
    ] = None,
) -> None:
    """Scan the cache and list the files that would be evicted."""
    config = resolve_config(ctx, cache_path=cache, evict_percent=percent)

    try:
        eviction_plan, skipped = scan_and_plan(
            config.cache_path,
            config.evict_percent,
            log=get_logger(),
        )
    except FilesystemAccessError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    victims = eviction_plan.victims[:limit] if limit is not None else eviction_plan.victims

    if output_format == OutputFormat.JSON:
        _print_json(eviction_plan, skipped, limit)
        return

    if not victims:
        print_info(f"{eviction_plan.total_files} file(s) found - nothing to evict.")
        return

    console.print(create_victims_table(victims))
    console.print(
        f"\n[dim]{eviction_plan.total_files} files found - "
        f"{eviction_plan.victim_count} would be removed[/dim]"
    )
    if limit is not None and len(victims) < eviction_plan.victim_count:
        console.print(
            f"[dim](showing {len(victims)} of {eviction_plan.victim_count}, "
            f"limited to {limit})[/dim]"
        )


def _print_json(eviction_plan: EvictionPlan, skipped: int, limit: int | None) -> None:
    """Display the eviction plan as JSON."""
    victims = eviction_plan.victims[:limit] if limit is not None else eviction_plan.victims
    data = {
        "total_files": eviction_plan.total_files,
        "evict_percent": eviction_plan.evict_percent,
        "victim_count": eviction_plan.victim_count,
        "skipped": skipped,
        "victims": [
            {
                "path": r.path,
                "atime": r.atime,
                "accessed_at": r.accessed_at.isoformat(),
            }
            for r in victims
        ],
    }
    console.print_json(json.dumps(data))
