"""Main CLI application."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape

from time_tally import __version__
from time_tally.analysis.reports import ReportGenerator
from time_tally.cli.config_commands import config
from time_tally.cli.console import console, disable_color, error_console
from time_tally.cli.session import TallySession
from time_tally.core.config import ConfigManager
from time_tally.core.store import SubjectStore

_log_handler: Optional[logging.Handler] = None


def setup_logging(level_name: str, log_file: Optional[str] = None) -> None:
    """Configure root logging for the CLI.

    Args:
        level_name: Logging level name (e.g. 'INFO')
        log_file: Write to this file instead of stderr when set
    """
    global _log_handler

    log_level = getattr(logging, level_name.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace the handler from a previous invocation
    if _log_handler is not None:
        root_logger.removeHandler(_log_handler)
        _log_handler.close()

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root_logger.addHandler(handler)
    _log_handler = handler


def parse_seed(seed: str) -> tuple[str, int, int]:
    """Parse a NAME or NAME=H:M seed.

    Args:
        seed: Seed string

    Returns:
        Tuple of (name, hours, minutes)

    Raises:
        ValueError: If the duration part is malformed
    """
    name, sep, duration = seed.rpartition("=")
    if not sep:
        return seed, 0, 0

    try:
        hours_str, minutes_str = duration.split(":")
        hours, minutes = int(hours_str), int(minutes_str)
    except ValueError:
        raise ValueError(f"Invalid seed: {seed}. Use 'NAME' or 'NAME=H:M'")

    if hours < 0 or minutes < 0:
        raise ValueError(f"Invalid seed: {seed}. Hours and minutes must not be negative")

    return name, hours, minutes


def build_store(seeds: tuple[str, ...]) -> SubjectStore:
    """Create a store pre-populated from seeds.

    Raises:
        ValueError: If a seed is malformed or has a blank name
    """
    store = SubjectStore()
    for seed in seeds:
        name, hours, minutes = parse_seed(seed)
        subject = store.add_subject(name)
        if subject is None:
            raise ValueError(f"Invalid seed: {seed}. Subject name cannot be empty")
        if hours or minutes:
            store.log_time(subject.id, hours, minutes)
    return store


def get_report_generator(config_mgr: ConfigManager) -> ReportGenerator:
    """Get ReportGenerator configured from display settings."""
    return ReportGenerator(
        console,
        show_bars=config_mgr.get("display.show_bars", True),
        bar_width=config_mgr.get("display.bar_width", 25),
    )


seed_option = click.option(
    "-s",
    "--seed",
    "seeds",
    multiple=True,
    help="Pre-populate a subject as NAME or NAME=H:M (repeatable)",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", help="Custom config file", type=click.Path())
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], no_color: bool, verbose: bool) -> None:
    """TimeTally - tally the time you spend on each subject.

    Add subjects, log hours and minutes against them, and view reports.
    Everything lives in memory for the length of a session.
    """
    ctx.ensure_object(dict)

    path = Path(config_path) if config_path else None
    try:
        config_mgr = ConfigManager(path)
    except ValueError as e:
        # The broken file has been backed up and defaults written in its place
        error_console.print(f"[yellow]Warning:[/yellow] {escape(str(e))}")
        config_mgr = ConfigManager(path)
    ctx.obj["config"] = config_mgr

    level = "DEBUG" if verbose else config_mgr.get("general.log_level", "WARNING")
    setup_logging(level, config_mgr.get("general.log_file"))

    if no_color:
        disable_color()


@cli.command()
@seed_option
@click.pass_context
def session(ctx: click.Context, seeds: tuple[str, ...]) -> None:
    """Start an interactive tally session.

    Example:
        time-tally session
        time-tally session -s Math -s "History=2:45"
    """
    config_mgr: ConfigManager = ctx.obj["config"]

    try:
        store = build_store(seeds)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    tally = TallySession(
        store,
        get_report_generator(config_mgr),
        console,
        error_console,
        auto_refresh=config_mgr.get("display.auto_refresh", True),
        export_format=config_mgr.get("export.default_format", "json"),
        include_metadata=config_mgr.get("export.include_metadata", True),
    )
    tally.run()


@cli.command()
@seed_option
@click.option("-m", "--monthly", is_flag=True, help="Show the monthly report instead")
@click.pass_context
def report(ctx: click.Context, seeds: tuple[str, ...], monthly: bool) -> None:
    """Print a report for the given subjects.

    Example:
        time-tally report -s "Math=1:50" -s "Art=0:20"
        time-tally report -s "Math=1:50" --monthly
    """
    config_mgr: ConfigManager = ctx.obj["config"]

    try:
        store = build_store(seeds)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    report_gen = get_report_generator(config_mgr)
    if monthly:
        report_gen.monthly_report(store.subjects)
    else:
        report_gen.subject_report(store.subjects)


cli.add_command(config)


if __name__ == "__main__":
    cli(obj={})
