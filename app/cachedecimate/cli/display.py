"""Shared Rich display functions for readings, plans and results.

Provides reusable table builders and summary printers used by the
run, check and plan commands.
"""

from rich.table import Table

from cachedecimate.cache.models import DecimationReport, EvictionResult, FileRecord, SpaceReading
from cachedecimate.utils.formatting import console, format_size, print_info, print_success, print_warning


def create_reading_table(reading: SpaceReading, threshold: float) -> Table:
    """Create a Rich table describing a free-space reading.

    Args:
        reading: Free-space reading of the cache volume.
        threshold: Configured free-space threshold percentage.

    Returns:
        Rich Table configured for reading display.
    """
    table = Table(
        title="Cache Volume",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", overflow="fold")
    table.add_column("Free", justify="right", style="info")
    table.add_column("Total", justify="right", style="muted")
    table.add_column("Free %", justify="right")
    table.add_column("Threshold", justify="right", style="muted")

    style = "removed" if reading.free_percent <= threshold else "kept"
    table.add_row(
        reading.path,
        format_size(reading.free_bytes),
        format_size(reading.total_bytes),
        f"[{style}]{reading.free_percent:.2f}%[/{style}]",
        f"{threshold:.2f}%",
    )
    return table


def create_victims_table(victims: tuple[FileRecord, ...], commit: bool = False) -> Table:
    """Create a Rich table listing files selected for eviction.

    Args:
        victims: Files selected for eviction, oldest first.
        commit: Whether the files are really being deleted.

    Returns:
        Rich Table configured for victim display.
    """
    title = "Evicted Files" if commit else "Eviction Plan (Dry Run)"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Path", no_wrap=True)
    table.add_column("Last Accessed", style="muted")

    for index, record in enumerate(victims, start=1):
        table.add_row(
            str(index),
            f"[removed]{record.path}[/removed]",
            record.accessed_at.strftime("%Y-%m-%d %H:%M:%S"),
        )

    return table


def create_failures_table(results: tuple[EvictionResult, ...]) -> Table:
    """Create a Rich table listing evictions that failed."""
    table = Table(
        title="Failed Evictions",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Error")

    for result in results:
        if not result.success:
            table.add_row(result.path, f"[error]{result.error or 'Unknown error'}[/error]")

    return table


def print_decimation_summary(report: DecimationReport) -> None:
    """Print a summary of a decimation pass.

    Args:
        report: Outcome of the decimation.
    """
    plan = report.plan
    if plan.victim_count == 0:
        print_info(f"{plan.total_files} file(s) found - nothing to evict.")
    elif not report.commit:
        print_info(
            f"Dry-run: {plan.victim_count} of {plan.total_files} file(s) would be removed."
        )
    elif report.failed_count:
        console.print(f"\n[error]{report.failed_count} eviction(s) failed[/error]")
        console.print(create_failures_table(report.results))
        print_warning(f"{report.removed_count} removed, {report.failed_count} failed")
    else:
        print_success(f"Removed {report.removed_count} of {plan.total_files} file(s).")

    if report.skipped:
        print_warning(f"Skipped {report.skipped} unreadable entry(ies) during scan.")
