"""
Console helpers for refolder.

All user-facing output goes through the shared rich console so tests and the
CLI can redirect it in one place.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

# Global console instances; errors go to stderr
console = Console()
err_console = Console(stderr=True)


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{escape(title)}[/bold blue]\n[italic]{escape(subtitle)}[/italic]", expand=False))


def print_info(msg: str):
    console.print(f"[INFO] {msg}", markup=False)


def print_error(msg: str):
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}")
