"""Shared helpers for CLI commands."""

from rich.console import Console
from rich.panel import Panel

from tradetherapy.config import Settings, load_settings

console = Console()


def get_settings() -> Settings:
    """Load application settings."""
    return load_settings()


def get_journal():
    """Open the trade journal configured in settings."""
    from tradetherapy.db.store import DataStore
    from tradetherapy.journal import Journal

    settings = get_settings()
    return Journal(DataStore(settings.storage.db_path))


def print_error(message: str, title: str = "Error") -> None:
    """Print an error panel."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def format_profit(profit: float | None) -> str:
    """Format a profit percentage with sign and color markup."""
    if profit is None:
        return "-"
    color = "green" if profit >= 0 else "red"
    sign = "+" if profit > 0 else ""
    return f"[{color}]{sign}{profit:.2f}%[/{color}]"
