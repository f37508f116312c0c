"""
CLI utility functions.

This module provides helper functions for console output, config loading
and store access.

Example:
    >>> from backend.postboard.cli.utils import get_console, print_success
    >>> print_success("Indexes created")
"""

from typing import Any, Dict, List, Optional

import rich_click as click
from rich.console import Console
from rich.table import Table

from backend.postboard.core.data.store import PostStore
from backend.postboard.core.utils.config import ConfigManager

# Singleton console instance
_console: Optional[Console] = None


def get_console() -> Console:
    """
    Get the singleton Rich Console instance.

    Returns:
        Console: Rich Console instance for styled output
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_success(message: str) -> None:
    """Print a success message in green."""
    get_console().print(f"[bold green]✓[/bold green] {message}", style="green")


def print_error(message: str) -> None:
    """Print an error message in red."""
    get_console().print(f"[bold red]✗[/bold red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    get_console().print(f"[bold yellow]⚠[/bold yellow] {message}", style="yellow")


def print_info(message: str) -> None:
    """Print an info message in blue."""
    get_console().print(f"[bold cyan]ℹ[/bold cyan] {message}", style="cyan")


def print_table(
    data: List[Dict[str, Any]],
    title: Optional[str] = None,
    columns: Optional[List[str]] = None
) -> None:
    """
    Display data in a Rich table.

    Args:
        data: List of dictionaries containing row data
        title: Optional table title
        columns: Optional list of column names (uses dict keys if not provided)

    Example:
        >>> print_table([{"category": "Tech", "count": 3}], title="Categories")
    """
    if not data:
        print_warning("No data to display")
        return

    if columns is None:
        columns = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold cyan")
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in data:
        table.add_row(*[str(row.get(col, "")) for col in columns])

    get_console().print(table)


def load_config(config_path: Optional[str] = None) -> ConfigManager:
    """
    Load configuration, turning load failures into a CLI error.

    Args:
        config_path: Optional explicit path to a TOML file

    Returns:
        ConfigManager: Loaded configuration

    Raises:
        click.ClickException: If the file is missing or invalid
    """
    try:
        return ConfigManager(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))


def get_store(config: ConfigManager) -> PostStore:
    """
    Open a PostStore from configuration.

    Args:
        config: ConfigManager with the [database] section

    Returns:
        PostStore: Connected store (caller closes it)

    Raises:
        StoreConnectionError: If MongoDB is unreachable
    """
    return PostStore.from_config(config)
