"""
Main CLI entry point for Postboard.

This module defines the root Click command group and registers all subcommands.

Example:
    $ postboard --help
    $ postboard db stats
    $ postboard serve
"""

import sys
from pathlib import Path
from typing import Optional

import rich_click as click
from dotenv import load_dotenv
from rich.panel import Panel
from rich.table import Table

from backend.postboard import __version__
from backend.postboard.cli.utils import get_console


def load_env_files() -> Optional[Path]:
    """Load the first .env file found in standard locations."""
    cwd = Path.cwd()
    project_root = Path(__file__).resolve().parents[3]

    env_paths = [
        cwd / 'config' / '.env',
        cwd / '.env',
        project_root / 'config' / '.env',
        project_root / '.env',
    ]

    for env_path in env_paths:
        if env_path.exists():
            # Don't override existing env vars
            load_dotenv(env_path.resolve(), override=False)
            return env_path.resolve()
    return None


# Load environment variables on module import
_loaded_env = load_env_files()

# Configure rich-click help output
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.SHOW_METAVARS_COLUMN = False
click.rich_click.APPEND_METAVARS_HELP = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running the '--help' flag for more information."
click.rich_click.ERRORS_EPILOGUE = ""
click.rich_click.MAX_WIDTH = 100
click.rich_click.STYLE_OPTION = "bold cyan"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_METAVAR = "bold yellow"
click.rich_click.STYLE_HEADER_TEXT = "bold magenta"
click.rich_click.STYLE_USAGE = "yellow"
click.rich_click.STYLE_USAGE_COMMAND = "bold cyan"
click.rich_click.ALIGN_OPTIONS_PANEL = "left"
click.rich_click.ALIGN_COMMANDS_PANEL = "left"

click.rich_click.COMMAND_GROUPS = {
    "postboard": [
        {
            "name": "Core Commands",
            "commands": ["stats", "info"],
        },
        {
            "name": "System",
            "commands": ["serve", "db"],
        },
    ]
}


@click.group()
@click.option('--config', type=click.Path(exists=True), help='Path to config file')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
@click.option('--quiet', is_flag=True, help='Suppress non-essential output')
@click.version_option(version=__version__, prog_name='postboard')
@click.pass_context
def cli(ctx, config, verbose, quiet):
    """
    Postboard - blog post REST API backed by MongoDB.

    Serve the API and maintain the post collection.
    """
    ctx.ensure_object(dict)

    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet
    ctx.obj['console'] = get_console()


@cli.command()
def info():
    """ℹ️  Show installation and version info."""
    from importlib.metadata import version, PackageNotFoundError

    def get_version(package_name: str) -> str:
        """Get package version using importlib.metadata."""
        try:
            return version(package_name)
        except PackageNotFoundError:
            return "[dim]Not installed[/dim]"

    console = get_console()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True, width=18)
    table.add_column("Value", style="green")

    table.add_row("📦 Version", __version__)
    table.add_row("🐍 Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("⚡ FastAPI", get_version("fastapi"))
    table.add_row("🍃 PyMongo", get_version("pymongo"))
    table.add_row("🖱️  Click", get_version("click"))
    table.add_row("✨ Rich", get_version("rich"))

    console.print()
    console.print(Panel(
        table,
        title="[bold cyan]Postboard Installation Info[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    ))
    console.print()


# Register subcommands
from backend.postboard.cli import db, serve  # noqa: E402

cli.add_command(serve.serve)
cli.add_command(db.db)

# Add stats as a top-level alias for convenience
cli.add_command(db.stats, name='stats')


if __name__ == '__main__':
    cli()
