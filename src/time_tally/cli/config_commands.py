"""`time-tally config` subcommands."""

import json
import shutil
import sys
from typing import Any

import click
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from time_tally.cli.console import console, error_console
from time_tally.core.config import ConfigManager


def convert_value(value: str) -> Any:
    """Convert a command-line string to a bool, None, int or str."""
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if lowered == "null":
        return None
    try:
        return int(value)
    except ValueError:
        return value


def fail(message: str) -> None:
    error_console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


@click.group()
def config() -> None:
    """Inspect and change display, export and logging settings.

    Settings live in ~/.time-tally/config.yml unless --config is given.
    """


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """List every setting.

    Example:
        time-tally config show --json
    """
    config_mgr: ConfigManager = ctx.obj["config"]

    if as_json:
        print(json.dumps(config_mgr.to_dict(), indent=2))
        return

    table = Table(title="TimeTally Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key in config_mgr.get_all_keys():
        table.add_row(key, Text(str(config_mgr.get(key))))

    console.print(table)
    console.print(Text(f"\nConfig file: {config_mgr.config_path}"))


@config.command("get")
@click.argument("key")
@click.pass_context
def config_get(ctx: click.Context, key: str) -> None:
    """Print one setting, e.g. `time-tally config get display.bar_width`."""
    value = ctx.obj["config"].get(key)
    if value is None:
        fail(f"Configuration key '{key}' not found")

    if isinstance(value, dict):
        console.print(json.dumps(value, indent=2), markup=False)
    else:
        console.print(str(value), markup=False)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Change one setting.

    true/false become booleans and digits become integers.

    Example:
        time-tally config set display.bar_width 40
        time-tally config set export.default_format markdown
    """
    converted_value = convert_value(value)
    try:
        ctx.obj["config"].set(key, converted_value)
    except ValueError as e:
        fail(str(e))
    console.print(f"[green]✓[/green] Set {escape(key)} = {escape(str(converted_value))}")


@config.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def config_reset(ctx: click.Context, yes: bool) -> None:
    """Restore default settings, keeping a copy of the old file."""
    config_mgr: ConfigManager = ctx.obj["config"]

    if not yes and not click.confirm("Reset all settings to defaults?"):
        console.print("Cancelled")
        return

    if config_mgr.config_path.exists():
        backup_path = config_mgr.config_path.with_suffix(".yml.backup")
        shutil.copy(config_mgr.config_path, backup_path)
        console.print(Text(f"Previous settings saved to {backup_path}"))

    config_mgr.reset()
    console.print("[green]✓[/green] Settings reset to defaults")


@config.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Check the settings file against the schema."""
    try:
        ctx.obj["config"].validate()
    except ValueError as e:
        fail(str(e))
    console.print("[green]✓[/green] Configuration is valid")


@config.command("path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Print where settings are stored."""
    console.print(str(ctx.obj["config"].config_path), markup=False)
