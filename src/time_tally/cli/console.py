"""Consoles shared by the CLI commands."""

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def disable_color() -> None:
    """Turn off colored output on every CLI console."""
    for output in (console, error_console):
        output.no_color = True
