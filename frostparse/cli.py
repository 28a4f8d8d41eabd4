#!/usr/bin/env python3
"""
Command-line interface for the WoW combat log parser.
"""

import sys
import json
import click
from pathlib import Path
from datetime import datetime, timedelta
from collections import Counter
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler

from .config.loader import load_and_apply_config
from .config.settings import get_settings, reload_settings
from .parser.errors import CombatLogParseError
from .parser.parser import CombatLogParser
from .processing.parallel_parser import ParallelLineParser
from .segmentation.aggregator import Collector, SummaryStats


# Set up rich console for pretty output
console = Console()
err_console = Console(stderr=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "config_path", type=click.Path(exists=True), help="YAML file with boss names and ID prefixes")
def cli(verbose, config_path):
    """Frostparse - WoW combat log parser and raid summary"""
    try:
        settings = reload_settings()
        settings.validate()
    except ValueError as e:
        raise click.ClickException(str(e))

    settings.setup_logging(verbose, handlers=[RichHandler(console=err_console, rich_tracebacks=True)])
    if verbose:
        settings.log_configuration()
    load_and_apply_config(config_path or settings.config_path)


def _resolve_log_file(log_file) -> Path:
    """Use the LOG_FILE argument, falling back to FROSTPARSE_LOG_FILE."""
    log_file = log_file or get_settings().log_file
    if not log_file:
        raise click.UsageError("Missing argument 'LOG_FILE' (or set FROSTPARSE_LOG_FILE).")
    path = Path(log_file)
    if not path.exists():
        raise click.BadParameter(f"File '{path}' does not exist.", param_hint="'LOG_FILE'")
    return path


def _parse(log_file, year, skip_malformed, threads):
    """Parse a log file, exiting with a message on structural errors."""
    try:
        if threads and threads > 1:
            if skip_malformed:
                err_console.print("[yellow]--skip-malformed is ignored with --threads[/yellow]")
            parser = ParallelLineParser(reference_year=year, max_workers=threads)
            records = parser.parse_file(log_file)
            return records, 0

        parser = CombatLogParser(reference_year=year, skip_malformed=skip_malformed)
        records = parser.parse_file(log_file)
        return records, len(parser.parse_errors)
    except CombatLogParseError as e:
        err_console.print(f"[red]Parse failed on line {e.line_number}: {e.reason}[/red]")
        sys.exit(1)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True), required=False)
@click.option("--year", type=int, default=None, help="Year of the log (default: current year)")
@click.option("--resolution", type=float, default=None, help="Time bucket size in seconds (default: 30)")
@click.option("--skip-malformed", is_flag=True, help="Skip malformed lines instead of aborting")
@click.option("--strict-overlays", is_flag=True, help="Count only real interrupts and dispels")
@click.option("--threads", type=int, default=None, help="Parse with this many threads")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.option("--output", "-o", type=click.Path(), help="Write JSON output to this file")
def summary(log_file, year, resolution, skip_malformed, strict_overlays, threads, output_format, output):
    """Parse a combat log and summarize damage, healing and encounters."""
    settings = get_settings()
    year = year or settings.reference_year
    resolution = resolution if resolution is not None else settings.time_resolution_seconds
    if timedelta(seconds=resolution) <= timedelta(0):
        raise click.BadParameter("must be positive", param_hint="--resolution")

    log_path = _resolve_log_file(log_file)
    start_time = datetime.now()
    records, error_count = _parse(log_path, year, skip_malformed or settings.skip_malformed, threads)

    collector = Collector(
        time_resolution=timedelta(seconds=resolution),
        legacy_overlay_counts=not strict_overlays,
    )
    stats = collector.run(records)
    processing_time = (datetime.now() - start_time).total_seconds()

    if output_format == "json":
        payload = json.dumps(stats.to_dict(), indent=2)
        if output:
            Path(output).write_text(payload)
            console.print(f"[green]Summary written to {output}[/green]")
        else:
            click.echo(payload)
        return

    display_summary(log_path, stats, error_count, processing_time)


def display_summary(log_path: Path, stats: SummaryStats, error_count: int, processing_time: float):
    """Display summary tables."""
    console.print(f"\n[bold cyan]═══ {log_path.name} ═══[/bold cyan]")

    stats_table = Table(title="Parsing Statistics", show_header=False)
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="white")
    stats_table.add_row("Records", f"{stats.records_processed:,}")
    stats_table.add_row("Processing Time", f"{processing_time:.2f}s")
    stats_table.add_row("Skipped Lines", str(error_count))
    stats_table.add_row("Boss Encounters", str(len(stats.encounters)))
    console.print(stats_table)

    if stats.encounters:
        enc_table = Table(title="Encounters")
        enc_table.add_column("Boss", style="red")
        enc_table.add_column("Start")
        enc_table.add_column("End")
        enc_table.add_column("Duration", justify="right")
        for name, encounter in sorted(stats.encounters.items(), key=lambda kv: kv[1].start_time):
            enc_table.add_row(
                name,
                encounter.start_time.strftime("%H:%M:%S"),
                encounter.end_time.strftime("%H:%M:%S"),
                f"{encounter.duration:.0f}s",
            )
        console.print(enc_table)

    _print_ranking("Damage Done", stats.damage_by_source, "red")
    _print_ranking("Healing Done", stats.healing_by_source, "green")
    _print_ranking("Damage Taken by Source", stats.damage_taken_by_source, "yellow")
    _print_ranking("Damage Taken by Spell", stats.damage_taken_by_spell, "yellow")
    _print_ranking("Interrupts", stats.interrupts_by_source, "cyan")
    _print_ranking("Dispels", stats.dispels_by_source, "cyan")


def _print_ranking(title, values, style, limit=10):
    if not values:
        return
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Name", style=style)
    table.add_column("Total", justify="right")
    ranked = sorted(values.items(), key=lambda kv: kv[1], reverse=True)[:limit]
    for i, (name, total) in enumerate(ranked, 1):
        table.add_row(str(i), name, f"{total:,}")
    console.print(table)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True), required=False)
@click.option("--year", type=int, default=None, help="Year of the log (default: current year)")
@click.option("--skip-malformed", is_flag=True, help="Skip malformed lines instead of aborting")
def events(log_file, year, skip_malformed):
    """Count events by type."""
    records, error_count = _parse(_resolve_log_file(log_file), year or get_settings().reference_year, skip_malformed, None)
    counts = Counter(record.event_type for record in records)

    table = Table(title=f"Event Types ({len(records):,} records)")
    table.add_column("Event Type", style="cyan")
    table.add_column("Count", justify="right")
    for event_type, count in counts.most_common():
        table.add_row(event_type, f"{count:,}")
    console.print(table)

    if error_count:
        console.print(f"[yellow]{error_count} malformed lines skipped[/yellow]")


if __name__ == "__main__":
    cli()
