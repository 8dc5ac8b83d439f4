"""Controller wiring: load, event dispatch, state rebuilds."""
from __future__ import annotations

from datetime import date

import httpx
import pytest

from prague_flats.schemas.listings import Property, RoomFilter, SortKey
from prague_flats.services import listings as listings_service
from prague_flats.services.notifications import NotificationCenter
from prague_flats.services import search as search_service
from prague_flats.services.search import ORDER_MESSAGE


def make_property(id: int, *, rooms: int, price: float, type: str = "Apartment") -> Property:
    return Property(
        id=id,
        title=f"Listing {id}",
        address="Prague",
        type=type,
        price=price,
        size=50,
        rooms=rooms,
        image="/a.jpg",
        latitude=50.0,
        longitude=14.4,
    )


BASELINE = (
    make_property(1, rooms=2, price=20000),
    make_property(2, rooms=3, price=25000, type="Loft"),
    make_property(3, rooms=4, price=40000),
    make_property(4, rooms=5, price=30000, type="Loft"),
)


def loaded_controller() -> listings_service.ListingController:
    controller = listings_service.ListingController(notifications=NotificationCenter(ttl_seconds=60))
    controller.state = listings_service.with_properties(controller.state, BASELINE)
    return controller


@pytest.mark.asyncio
async def test_load_failure_leaves_store_empty_with_one_notification() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    controller = listings_service.ListingController()
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as client:
        view = await controller.load("/data/properties.json", client=client)

    assert controller.state.all_properties == ()
    assert controller.state.filtered == ()
    assert [note.message for note in view.notifications] == [listings_service.LOAD_FAILED_MESSAGE]
    assert view.cards == []
    assert view.empty_message is not None
    assert view.map is None


@pytest.mark.asyncio
async def test_failed_load_is_not_retried() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(500)

    controller = listings_service.ListingController()
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as client:
        await controller.ensure_loaded(client=client)
        await controller.ensure_loaded(client=client)

    assert calls == 1
    assert len(controller.notifications) == 1


@pytest.mark.asyncio
async def test_successful_load_runs_identity_pipeline_and_initialises_map() -> None:
    controller = listings_service.ListingController()

    view = await controller.load()

    assert view.total == view.shown == 10
    assert [card.id for card in view.cards] == [prop.id for prop in controller.state.all_properties]
    assert {marker.state for marker in view.markers} == {"highlighted"}
    assert view.map is not None
    assert view.notifications == []


def test_filter_event_rebuilds_from_baseline() -> None:
    controller = loaded_controller()

    narrowed = controller.dispatch("filter", room_filter="3-rooms")
    widened = controller.dispatch("filter", room_filter=RoomFilter.FOUR_PLUS)

    assert [card.id for card in narrowed.cards] == [2]
    assert [card.id for card in widened.cards] == [3, 4]
    assert controller.state.all_properties == BASELINE
    assert [button.value for button in widened.filters if button.active] == [RoomFilter.FOUR_PLUS]


def test_filter_then_marker_states_follow_subset() -> None:
    controller = loaded_controller()

    view = controller.dispatch("filter", room_filter="2-rooms")

    states = {marker.property_id: marker.state for marker in view.markers}
    assert states == {1: "highlighted", 2: "dimmed", 3: "dimmed", 4: "dimmed"}


def test_type_and_sort_events_compose() -> None:
    controller = loaded_controller()

    controller.dispatch("type", type_filter="Loft")
    view = controller.dispatch("sort", sort_key="price-high")

    assert [card.id for card in view.cards] == [4, 2]
    assert view.type_filter == "Loft"
    assert view.sort_key == SortKey.PRICE_HIGH

    cleared = controller.dispatch("type", type_filter="")
    assert [card.id for card in cleared.cards] == [3, 4, 2, 1]
    assert cleared.type_filter is None


def test_no_match_renders_placeholder() -> None:
    controller = loaded_controller()

    view = controller.dispatch("type", type_filter="Castle")

    assert view.cards == []
    assert view.empty_message == "No properties match your criteria. Try adjusting your filters."
    assert {marker.state for marker in view.markers} == {"dimmed"}


def test_empty_baseline_renders_placeholder() -> None:
    controller = listings_service.ListingController()

    view = controller.view()

    assert view.cards == []
    assert view.empty_message is not None


def test_invalid_search_notifies_and_keeps_state() -> None:
    controller = loaded_controller()
    controller.dispatch("filter", room_filter="4plus-rooms")
    before = controller.state

    view = controller.dispatch("search", check_in="2025-06-15", check_out="2025-06-10")

    assert controller.state is before
    assert [note.message for note in view.notifications] == [ORDER_MESSAGE]
    assert view.scroll_to is None


def test_valid_search_refreshes_and_scrolls() -> None:
    controller = listings_service.ListingController(today=date(2025, 6, 1))
    controller.state = listings_service.with_properties(controller.state, BASELINE)

    view = controller.dispatch("search", check_in="2025-06-10", check_out="2025-06-11")

    assert view.scroll_to == listings_service.RESULTS_REGION
    assert view.search is not None
    assert view.search.check_in == date(2025, 6, 10)
    assert view.search.check_in_min == date(2025, 6, 1)
    assert view.shown == len(BASELINE)


def test_select_known_and_unknown_property() -> None:
    controller = loaded_controller()

    view = controller.dispatch("select", property_id=3)
    assert view.notifications[-1].message.startswith("You've selected: Listing 3")
    assert view.notifications[-1].level == "info"

    count = len(controller.notifications)
    controller.dispatch("select", property_id=999)
    assert len(controller.notifications) == count


def test_unknown_event_raises() -> None:
    controller = loaded_controller()

    with pytest.raises(listings_service.UnknownEventError):
        controller.dispatch("scroll")

    assert set(controller.events) == {"filter", "type", "sort", "search", "select"}


def test_default_dates_on_new_controller() -> None:
    controller = listings_service.ListingController(today=date(2025, 1, 1))

    assert controller.state.search is None
    assert controller.view().search.check_out == date(2025, 6, 30)


def test_default_dates_follow_the_clock(monkeypatch) -> None:
    controller = listings_service.ListingController()
    monkeypatch.setattr(search_service, "current_date", lambda: date(2025, 3, 1))
    first = controller.view().search
    monkeypatch.setattr(search_service, "current_date", lambda: date(2025, 3, 2))
    second = controller.view().search

    assert first.check_in == first.check_in_min == date(2025, 3, 1)
    assert second.check_in == second.check_in_min == date(2025, 3, 2)
    assert second.check_out == date(2025, 8, 29)
