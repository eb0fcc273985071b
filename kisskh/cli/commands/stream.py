"""
Stream Command - Resolve an episode to playable sources.
"""

from typing import Optional

import typer

from kisskh.cli.context import CLIState, create_plugin, get_state, run_async
from kisskh.ui import UIComponents, get_console


def resolve(
    ctx: typer.Context,
    episode_id: str = typer.Argument(..., help="Episode id from the drama details"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail instead of falling back when the manifest cannot be used",
        is_flag=True,
    ),
    headers: Optional[bool] = typer.Option(
        None,
        "--headers/--no-headers",
        help="Attach Referer/Origin headers to the sources (overrides config)",
    ),
) -> None:
    """
    ▶️  Resolve an episode to playable sources.

    Examples:

        kisskh resolve 123456

        kisskh resolve 123456 --strict --headers
    """
    state = get_state(ctx)

    overrides = {}
    if strict:
        overrides["strict_manifest"] = True
    if headers is not None:
        overrides["send_playback_headers"] = headers

    run_async(state, _resolve(state, episode_id, overrides), "While resolving the episode")


async def _resolve(state: CLIState, episode_id: str, overrides: dict) -> None:
    async with create_plugin(state, **overrides) as plugin:
        media = await plugin.load_streamable_media(episode_id)

    console = get_console()
    console.print(UIComponents().create_sources_table(media.sources))

    sent_headers = media.sources[0].headers
    if sent_headers:
        for name, value in sent_headers.items():
            console.print(f"[dim]{name}:[/dim] {value}")


__all__ = ["resolve"]
