"""Presentation controller: display state for the predefined cities and the search.

Two independent pieces of state:

* one ``SlotState`` per predefined city, keyed by position in the city list;
* one ``SearchState`` for the ad-hoc city search.

State records are immutable.  Every transition replaces a whole record, and a
city lookup only ever replaces its own slot, so lookups may settle in any
order.  Blocking HTTP calls run in worker threads (``asyncio.to_thread``);
all state writes happen on the event loop.

Lookup failures never escape: they become ``has_error`` on a slot or the
``errored`` search status.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine, Iterable
from dataclasses import dataclass
from typing import Any

from city_weather.datasources.openmeteo import (
    LookupFailure,
    fetch_current_conditions,
    resolve_city,
)
from city_weather.reference.cities import PREDEFINED_CITIES
from city_weather.schemas import City, CityMatch, CurrentConditions, SearchResult, SearchStatus

logger = logging.getLogger(__name__)

CITY_NOT_FOUND = "City not found"
SEARCH_FAILED = "Error fetching weather"

FetchConditions = Callable[[float, float], CurrentConditions]
ResolveCity = Callable[[str], CityMatch | None]


# =============================================================================
# Display state
# =============================================================================


@dataclass(frozen=True)
class SlotState:
    """Display state of one predefined city."""

    data: CurrentConditions | None = None
    is_loading: bool = False
    has_error: bool = False

    @classmethod
    def loading(cls) -> SlotState:
        return cls(is_loading=True)

    @classmethod
    def succeeded(cls, data: CurrentConditions) -> SlotState:
        return cls(data=data)

    @classmethod
    def failed(cls) -> SlotState:
        return cls(has_error=True)


@dataclass(frozen=True)
class SearchState:
    """Display state of the city search."""

    status: SearchStatus = SearchStatus.IDLE
    result: SearchResult | None = None
    message: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is SearchStatus.LOADING


# =============================================================================
# Controller
# =============================================================================


class WeatherBoard:
    """Orchestrates weather lookups and holds their display state.

    Args:
        cities: Cities to show, in display order.
        fetch_conditions: Coordinates → current conditions.  Called in a
            worker thread; must raise ``LookupFailure`` on failure.
        resolve: City name → first match or None.  Same contract.
    """

    def __init__(
        self,
        cities: Iterable[City] = PREDEFINED_CITIES,
        *,
        fetch_conditions: FetchConditions | None = None,
        resolve: ResolveCity | None = None,
    ) -> None:
        self.cities: tuple[City, ...] = tuple(cities)
        self._fetch = fetch_conditions or fetch_current_conditions
        self._resolve = resolve or resolve_city
        self._slots: list[SlotState] = [SlotState() for _ in self.cities]
        self._search = SearchState()
        self._search_seq = 0
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def slots(self) -> tuple[SlotState, ...]:
        """Snapshot of every city slot, in city order."""
        return tuple(self._slots)

    @property
    def search_state(self) -> SearchState:
        return self._search

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    # -------------------------------------------------------------------------
    # Predefined cities
    # -------------------------------------------------------------------------

    async def load_cities(self) -> tuple[SlotState, ...]:
        """Look up every city concurrently; return the settled slots."""
        tasks = [self._spawn(self._load_slot(i, city)) for i, city in enumerate(self.cities)]
        await asyncio.gather(*tasks)
        return self.slots

    async def _load_slot(self, index: int, city: City) -> None:
        self._slots[index] = SlotState.loading()
        try:
            data = await asyncio.to_thread(self._fetch, city.latitude, city.longitude)
        except LookupFailure as e:
            logger.debug("Lookup for %s failed: %s", city.name, e)
            self._slots[index] = SlotState.failed()
        else:
            self._slots[index] = SlotState.succeeded(data)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def submit_search(self, query: str) -> asyncio.Task[SearchState]:
        """Start a search without waiting for it; ``close()`` cancels it."""
        return self._spawn(self.search(query))

    async def search(self, query: str) -> SearchState:
        """Resolve ``query`` to a city and fetch its conditions.

        A blank query is ignored.  If a newer search is submitted while this
        one is in flight, this one's outcome is discarded.
        """
        query = query.strip()
        if not query:
            return self._search

        self._search_seq += 1
        seq = self._search_seq
        self._search = SearchState(status=SearchStatus.LOADING)

        try:
            match = await asyncio.to_thread(self._resolve, query)
            if match is None:
                return self._settle_search(
                    seq, SearchState(status=SearchStatus.NOT_FOUND, message=CITY_NOT_FOUND)
                )
            if seq != self._search_seq:
                return self._search
            conditions = await asyncio.to_thread(self._fetch, match.latitude, match.longitude)
        except LookupFailure as e:
            logger.debug("Search for %r failed: %s", query, e)
            return self._settle_search(
                seq, SearchState(status=SearchStatus.ERRORED, message=SEARCH_FAILED)
            )

        result = SearchResult(display_name=match.name, country=match.country, conditions=conditions)
        return self._settle_search(seq, SearchState(status=SearchStatus.RESOLVED, result=result))

    def _settle_search(self, seq: int, state: SearchState) -> SearchState:
        if seq == self._search_seq:
            self._search = state
        else:
            logger.debug("Discarding stale search #%d (latest is #%d)", seq, self._search_seq)
        return self._search

    # -------------------------------------------------------------------------
    # Teardown
    # -------------------------------------------------------------------------

    async def close(self) -> None:
        """Cancel lookups still in flight."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
