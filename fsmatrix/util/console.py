# fsmatrix/util/console.py

from __future__ import annotations

from rich.console import Console

# Messages go to stderr so they never land inside the rain grid on stdout
console = Console(stderr=True, highlight=False)

_VERBOSE = False


def set_verbose(enabled: bool) -> None:
    global _VERBOSE
    _VERBOSE = bool(enabled)


def is_verbose() -> bool:
    return _VERBOSE


def info(msg: str) -> None:
    console.print(f"[cyan]ℹ[/] {msg}")


def success(msg: str) -> None:
    console.print(f"[green]✓[/] {msg}")


def warn(msg: str) -> None:
    console.print(f"[yellow]![/] {msg}")


def error(msg: str) -> None:
    console.print(f"[bold red]✗[/] {msg}")


def debug(msg: str) -> None:
    """Only shown with --verbose."""
    if _VERBOSE:
        console.print(f"[dim][fsmatrix] {msg}[/]")
