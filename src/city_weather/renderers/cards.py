"""Weather card renderers.

One card per predefined city slot, one for a resolved search, plus the full
board page and plain-text variants for the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from city_weather.renderers import render_template
from city_weather.renderers.weather_utils import classify
from city_weather.schemas import SearchStatus

if TYPE_CHECKING:
    from city_weather.board import SearchState, SlotState
    from city_weather.schemas import City, CurrentConditions, SearchResult

LOADING_TEXT = "Loading..."
ERROR_TEXT = "Error"
NO_DATA_TEXT = "No data"


def _conditions_context(conditions: CurrentConditions) -> dict[str, Any]:
    return {
        "temperature": f"{conditions.temperature_2m}°C",
        "precipitation": f"{conditions.precipitation_probability}%",
        "category": classify(conditions.weather_code),
    }


def _card_state(
    conditions: CurrentConditions | None, *, is_loading: bool, has_error: bool
) -> str:
    """Which body a card shows; loading wins over error, error over data."""
    if is_loading:
        return "loading"
    if has_error:
        return "error"
    if conditions is not None:
        return "data"
    return "empty"


def _render_card(
    title: str,
    conditions: CurrentConditions | None,
    *,
    subtitle: str | None = None,
    is_loading: bool = False,
    has_error: bool = False,
) -> str:
    state = _card_state(conditions, is_loading=is_loading, has_error=has_error)
    context: dict[str, Any] = {}
    if state == "data" and conditions is not None:
        context = _conditions_context(conditions)
    return render_template(
        "weather_card.html.j2",
        title=title,
        subtitle=subtitle,
        state=state,
        loading_text=LOADING_TEXT,
        error_text=ERROR_TEXT,
        no_data_text=NO_DATA_TEXT,
        **context,
    )


def build_weather_card_html(name: str, slot: SlotState) -> str:
    """Build the card for one predefined city slot."""
    return _render_card(name, slot.data, is_loading=slot.is_loading, has_error=slot.has_error)


def build_result_card_html(result: SearchResult) -> str:
    """Build the card for a resolved search, titled with the provider's name."""
    return _render_card(result.display_name, result.conditions, subtitle=result.country)


def build_search_html(state: SearchState) -> str:
    """Build the search section body. Idle renders nothing."""
    if state.status is SearchStatus.IDLE:
        return ""
    if state.status is SearchStatus.LOADING:
        return render_template("search_status.html.j2", kind="loading", text=LOADING_TEXT)
    if state.status is SearchStatus.RESOLVED and state.result is not None:
        return build_result_card_html(state.result)
    return render_template("search_status.html.j2", kind="error", text=state.message or "")


def build_board_html(
    cities: Sequence[City],
    slots: Sequence[SlotState],
    search: SearchState,
    *,
    title: str = "City Weather",
    updated: str | None = None,
) -> str:
    """Build the full page: search section then one card per city."""
    cards = [
        build_weather_card_html(city.name, slot)
        for city, slot in zip(cities, slots, strict=True)
    ]
    return render_template(
        "base.html.j2",
        title=title,
        updated=updated,
        search_html=Markup(build_search_html(search)),
        cards=[Markup(card) for card in cards],
    )


# =============================================================================
# Plain text (CLI)
# =============================================================================


def _conditions_text(conditions: CurrentConditions) -> str:
    ctx = _conditions_context(conditions)
    return f"{ctx['temperature']}  |  Rain Prob. {ctx['precipitation']}  |  {ctx['category']}"


def format_card_text(name: str, slot: SlotState) -> str:
    """One-line text card for a city slot."""
    state = _card_state(slot.data, is_loading=slot.is_loading, has_error=slot.has_error)
    if state == "data" and slot.data is not None:
        body = _conditions_text(slot.data)
    else:
        body = {"loading": LOADING_TEXT, "error": ERROR_TEXT}.get(state, NO_DATA_TEXT)
    return f"{name}: {body}"


def format_search_text(state: SearchState) -> str:
    """Text for the search outcome; empty while idle."""
    if state.status is SearchStatus.RESOLVED and state.result is not None:
        result = state.result
        name = f"{result.display_name}, {result.country}" if result.country else result.display_name
        return f"{name}: {_conditions_text(result.conditions)}"
    if state.status is SearchStatus.LOADING:
        return LOADING_TEXT
    return state.message or ""
