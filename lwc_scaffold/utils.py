"""Rich-based console output helpers.

Every operator-facing line goes through a rich ``Console`` so output styling
stays consistent.  Helpers default to the shared module-level ``console``;
pass *console* to direct a line elsewhere (e.g. a recording console).
"""

from __future__ import annotations

from rich.console import Console

console = Console()
_default_console = console


def _target(console: Console | None) -> Console:
    return _default_console if console is None else console


def print_success(message: str, *, console: Console | None = None) -> None:
    """Print a green success message."""
    _target(console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, *, console: Console | None = None) -> None:
    """Print a red error message."""
    _target(console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, *, console: Console | None = None) -> None:
    """Print a yellow warning message."""
    _target(console).print(f"[bold yellow]{message}[/bold yellow]")


def print_detail(message: str, *, verbose: bool, console: Console | None = None) -> None:
    """Print a dim detail line, only when *verbose* is set."""
    if verbose:
        _target(console).print(f"[dim]{message}[/dim]")