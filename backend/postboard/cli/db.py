"""
Database commands for Postboard CLI.

This module provides commands for MongoDB connectivity checks, index setup
and statistics.

Example:
    $ postboard db ping
    $ postboard db init
    $ postboard db stats
"""

import rich_click as click
from rich.panel import Panel
from rich.table import Table

from backend.postboard.cli.utils import (
    get_console,
    get_store,
    load_config,
    print_error,
    print_info,
    print_success,
    print_table,
)
from backend.postboard.core.exceptions import StoreError


@click.group()
def db():
    """💾 Database operations."""
    pass


@db.command()
@click.pass_context
def ping(ctx):
    """🔌 Check that MongoDB is reachable."""
    config = load_config(ctx.obj.get('config'))

    try:
        store = get_store(config)
    except StoreError as e:
        print_error(f"MongoDB unreachable: {e}")
        raise click.Abort()

    try:
        print_success(f"Connected to database '{store.database_name}'")
    finally:
        store.close()


@db.command()
@click.pass_context
def init(ctx):
    """🗂️  Create the text search and ordering indexes."""
    config = load_config(ctx.obj.get('config'))

    try:
        store = get_store(config)
        try:
            names = store.ensure_indexes()
        finally:
            store.close()
    except StoreError as e:
        print_error(f"Failed to create indexes: {e}")
        raise click.Abort()

    for name in names:
        print_success(f"Index ready: {name}")


@db.command()
@click.option('--top', type=int, default=10, show_default=True, help='Number of categories to show')
@click.pass_context
def stats(ctx, top):
    """📊 Show post counts and top categories."""
    console = get_console()
    config = load_config(ctx.obj.get('config'))

    try:
        store = get_store(config)
        try:
            total = store.count_posts()
            created_range = store.created_at_range() if total else None
            categories = store.category_counts(limit=top) if total else []
        finally:
            store.close()
    except StoreError as e:
        print_error(f"Failed to read statistics: {e}")
        raise click.Abort()

    if total == 0 or created_range is None:
        print_info("No posts stored yet. Create one with POST /posts.")
        return

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("Metric", style="cyan", width=16)
    summary.add_column("Value", style="green", justify="right")
    summary.add_row("Total posts", f"{total:,}")
    oldest, newest = created_range
    summary.add_row("Newest post", newest.isoformat())
    summary.add_row("Oldest post", oldest.isoformat())

    console.print(Panel(
        summary,
        title="[bold cyan]📊 Post Overview[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    ))
    print_table(categories, title="Top categories", columns=["category", "count"])
