"""
Prefect flow for building the weather page.

Looks up every predefined city (and optionally one searched city) and
writes the rendered board to ``<site_dir>/index.html``.

Run locally:
    python -m city_weather.flows.build
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from city_weather.board import SearchState, SlotState, WeatherBoard
from city_weather.config import get_settings
from city_weather.renderers.cards import build_board_html
from city_weather.schemas import City


@task(name="build-html", cache_policy=NO_CACHE)
def build_html(
    cities: tuple[City, ...],
    slots: tuple[SlotState, ...],
    search: SearchState,
    updated: str,
) -> str:
    """Render display state as a full page."""
    return build_board_html(
        cities,
        slots,
        search,
        title=get_settings().app_name,
        updated=updated,
    )


@task(name="write-site", cache_policy=NO_CACHE)
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
async def build_site(
    query: str | None = None,
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Build the static weather page.

    Lookup failures don't fail the flow; they show up as error cards and are
    counted in the returned summary.
    """
    board = WeatherBoard()
    site_dir = site_dir or get_settings().site_dir

    print(f"Fetching current conditions for {len(board.cities)} cities...")
    lookups: list[Coroutine[Any, Any, object]] = [board.load_cities()]
    if query and query.strip():
        print(f"Searching for {query.strip()!r}...")
        lookups.append(board.search(query))
    try:
        await asyncio.gather(*lookups)
    finally:
        await board.close()

    failed = sum(1 for slot in board.slots if slot.has_error)
    if failed:
        print(f"Warning: {failed} city lookup(s) failed.")

    print("Building HTML...")
    updated = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M")
    html = build_html(board.cities, board.slots, board.search_state, updated)

    print("Writing site...")
    output_path = write_site(html, site_dir)

    print(f"Site built: {output_path}")
    return {
        "pages": 1,
        "output": str(output_path),
        "cities_ok": len(board.slots) - failed,
        "cities_failed": failed,
        "search_status": str(board.search_state.status),
    }


if __name__ == "__main__":
    result = asyncio.run(build_site())
    print(f"Flow complete: {result}")
