"""
Browse Commands - Home feed, search, quick search and track details.

Each command calls the matching plugin capability the way the host would and
renders the result.
"""

import typer

from kisskh.cli.context import CLIState, create_plugin, get_state, run_async
from kisskh.core.models import Track
from kisskh.ui import UIComponents, display_warning, get_console


def home(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Catalog page number"),
) -> None:
    """📺 Show the popular catalog."""
    state = get_state(ctx)
    run_async(state, _home(state, page), "While loading the home feed")


async def _home(state: CLIState, page: int) -> None:
    async with create_plugin(state) as plugin:
        shelves = await plugin.get_home_feed(page=page)

    components = UIComponents()
    for shelf in shelves:
        get_console().print(components.create_shelf_table(shelf))


def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Drama title to search for"),
) -> None:
    """🔍 Search dramas by title."""
    state = get_state(ctx)
    run_async(state, _search(state, query), "During search")


def quick_search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Partial title"),
) -> None:
    """⚡ Show quick-search suggestions."""
    state = get_state(ctx)
    run_async(state, _quick_search(state, query), "During quick search")


async def _search(state: CLIState, query: str) -> None:
    async with create_plugin(state) as plugin:
        shelves = await plugin.search_feed(query)

    if not shelves or not any(shelf.items for shelf in shelves):
        display_warning(f"No results found for '{query}'.", "🔍 No Results Found")
        return

    components = UIComponents()
    for shelf in shelves:
        get_console().print(components.create_shelf_table(shelf))


async def _quick_search(state: CLIState, query: str) -> None:
    async with create_plugin(state) as plugin:
        items = await plugin.quick_search(query)

    if not items:
        display_warning(f"No suggestions for '{query}'.", "⚡ No Suggestions")
        return

    get_console().print(UIComponents().create_quick_search_table(items))


def track(
    ctx: typer.Context,
    drama_id: str = typer.Argument(..., help="Drama id from the catalog"),
) -> None:
    """ℹ️  Show drama details and episode ids."""
    state = get_state(ctx)
    run_async(state, _track(state, drama_id), "While loading drama details")


async def _track(state: CLIState, drama_id: str) -> None:
    async with create_plugin(state) as plugin:
        loaded = await plugin.load_track(Track(id=drama_id, title=drama_id))

    get_console().print(UIComponents().create_track_panel(loaded))


__all__ = ["home", "search", "quick_search", "track"]
