"""Listing state, view building and the controller that owns them."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

import httpx

from ..schemas.listings import (
    FilterButton,
    ListingView,
    Property,
    RoomFilter,
    SearchDates,
    SortKey,
)
from . import render
from .loader import PropertyLoadError, load_properties
from .notifications import NotificationCenter
from .pipeline import property_types, run_pipeline
from .search import SearchValidationError, default_search_dates, validate_search

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load properties. Please try again later."
RESULTS_REGION = "properties"

FILTER_LABELS: dict[RoomFilter, str] = {
    RoomFilter.ALL: "All",
    RoomFilter.TWO: "2 Rooms",
    RoomFilter.THREE: "3 Rooms",
    RoomFilter.FOUR_PLUS: "4+ Rooms",
}


@dataclass(frozen=True, slots=True)
class ListingState:
    """Snapshot of the listings view. Transitions build a new snapshot."""

    all_properties: tuple[Property, ...] = ()
    filtered: tuple[Property, ...] = ()
    room_filter: RoomFilter = RoomFilter.ALL
    type_filter: Optional[str] = None
    sort_key: SortKey = SortKey.DEFAULT
    search: Optional[SearchDates] = None
    markers: render.MarkerIndex = field(default_factory=render.MarkerIndex)
    loaded: bool = False


def with_properties(state: ListingState, properties: tuple[Property, ...]) -> ListingState:
    """Install a freshly loaded baseline and run the identity filter once."""

    baseline = tuple(properties)
    return apply_selection(
        replace(
            state,
            all_properties=baseline,
            room_filter=RoomFilter.ALL,
            type_filter=None,
            sort_key=SortKey.DEFAULT,
            markers=render.MarkerIndex.from_properties(baseline),
            loaded=True,
        )
    )


def apply_selection(
    state: ListingState,
    *,
    room_filter: Optional[RoomFilter] = None,
    type_filter: Optional[str] = None,
    sort_key: Optional[SortKey] = None,
    clear_type: bool = False,
) -> ListingState:
    """Recompute the subset from the baseline with any changed selection applied."""

    rooms = RoomFilter(room_filter) if room_filter is not None else state.room_filter
    sort = SortKey(sort_key) if sort_key is not None else state.sort_key
    if clear_type:
        kind = None
    else:
        kind = type_filter if type_filter is not None else state.type_filter
    kind = kind or None

    filtered = run_pipeline(state.all_properties, room_filter=rooms, type_filter=kind, sort_key=sort)
    return replace(
        state,
        filtered=filtered,
        room_filter=rooms,
        type_filter=kind,
        sort_key=sort,
        markers=state.markers.sync(filtered),
    )


def with_search(state: ListingState, dates: SearchDates, today: Optional[date] = None) -> ListingState:
    """Record validated stay dates and refresh the subset. Dates do not filter listings."""

    if dates.check_in_min is None:
        dates = dates.model_copy(update={"check_in_min": default_search_dates(today).check_in_min})
    return apply_selection(replace(state, search=dates))


def build_view(
    state: ListingState,
    *,
    notifications: Optional[NotificationCenter] = None,
    scroll_to: Optional[str] = None,
    today: Optional[date] = None,
) -> ListingView:
    """Project the state into cards first, then marker states.

    Without a recorded search the form defaults are taken from ``today`` at build time.
    """

    cards = render.render_cards(state.filtered)
    markers = state.markers.views()
    return ListingView(
        cards=cards,
        empty_message=None if cards else render.EMPTY_MESSAGE,
        filters=[
            FilterButton(value=option, label=label, active=option == state.room_filter)
            for option, label in FILTER_LABELS.items()
        ],
        room_filter=state.room_filter,
        type_filter=state.type_filter,
        sort_key=state.sort_key,
        types=property_types(state.all_properties),
        markers=markers,
        map=render.map_config() if state.loaded else None,
        notifications=notifications.active() if notifications is not None else [],
        search=state.search or default_search_dates(today),
        scroll_to=scroll_to,
        total=len(state.all_properties),
        shown=len(state.filtered),
    )


class UnknownEventError(KeyError):
    """Raised when dispatching an event that has no registered handler."""


class ListingController:
    """Owns the listing state and routes user events to the pipeline."""

    def __init__(
        self,
        notifications: Optional[NotificationCenter] = None,
        today: Optional[date] = None,
    ) -> None:
        self.notifications = notifications or NotificationCenter()
        self.state = ListingState()
        self._today = today
        self.load_attempted = False
        self._load_lock = asyncio.Lock()
        self._bindings: dict[str, Callable[..., ListingView]] = {
            "filter": self.on_filter,
            "type": self.on_type,
            "sort": self.on_sort,
            "search": self.on_search,
            "select": self.on_select,
        }

    @property
    def events(self) -> tuple[str, ...]:
        return tuple(self._bindings)

    def dispatch(self, event: str, **payload: Any) -> ListingView:
        handler = self._bindings.get(event)
        if handler is None:
            raise UnknownEventError(event)
        return handler(**payload)

    async def load(
        self,
        source: str | Path | None = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ListingView:
        """Load the baseline. Failures become a notification and leave the store empty."""

        self.load_attempted = True
        try:
            properties = await load_properties(source, client=client)
        except PropertyLoadError as exc:
            logger.error("Error loading properties: %s", exc)
            self.notifications.push(LOAD_FAILED_MESSAGE)
            return self.view()

        self.state = with_properties(self.state, properties)
        logger.info("Map initialised with %d markers", len(self.state.markers))
        return self.view()

    async def ensure_loaded(
        self,
        source: str | Path | None = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Run ``load`` the first time only; a failed load is not retried."""

        async with self._load_lock:
            if not self.load_attempted:
                await self.load(source, client=client)

    def view(self, scroll_to: Optional[str] = None) -> ListingView:
        return build_view(
            self.state, notifications=self.notifications, scroll_to=scroll_to, today=self._today
        )

    def on_filter(self, room_filter: RoomFilter | str = RoomFilter.ALL) -> ListingView:
        self.state = apply_selection(self.state, room_filter=RoomFilter(room_filter))
        return self.view()

    def on_type(self, type_filter: Optional[str] = None) -> ListingView:
        self.state = apply_selection(self.state, type_filter=type_filter, clear_type=not type_filter)
        return self.view()

    def on_sort(self, sort_key: SortKey | str = SortKey.DEFAULT) -> ListingView:
        self.state = apply_selection(self.state, sort_key=SortKey(sort_key))
        return self.view()

    def on_search(
        self,
        check_in: date | str | None = None,
        check_out: date | str | None = None,
    ) -> ListingView:
        try:
            dates = validate_search(check_in, check_out)
        except SearchValidationError as exc:
            self.notifications.push(str(exc))
            return self.view()

        logger.info("Search: check-in %s, check-out %s", dates.check_in, dates.check_out)
        self.state = with_search(self.state, dates, today=self._today)
        return self.view(scroll_to=RESULTS_REGION)

    def on_select(self, property_id: int) -> ListingView:
        message = render.selection_message(self.state.all_properties, int(property_id))
        if message is not None:
            logger.info("Selected property %s", property_id)
            self.notifications.push(message, level="info")
        return self.view()
