"""Filter and sort pipeline for the listings view.

Every call derives the displayed subset from the full baseline. Nothing here
keeps state between calls, so a filter change can never leave stale entries.
"""
from __future__ import annotations

from typing import Callable, Iterable, Sequence

from ..schemas.listings import Property, RoomFilter, SortKey

_ROOM_PREDICATES: dict[RoomFilter, Callable[[Property], bool]] = {
    RoomFilter.TWO: lambda prop: prop.rooms == 2,
    RoomFilter.THREE: lambda prop: prop.rooms == 3,
    RoomFilter.FOUR_PLUS: lambda prop: prop.rooms >= 4,
}

# (key, reverse). Python's sort is stable, including with reverse=True.
_SORT_ORDERS: dict[SortKey, tuple[Callable[[Property], float], bool]] = {
    SortKey.PRICE_LOW: (lambda prop: prop.price, False),
    SortKey.PRICE_HIGH: (lambda prop: prop.price, True),
    SortKey.ROOMS_MOST: (lambda prop: prop.rooms, True),
}


def filter_by_rooms(properties: Iterable[Property], room_filter: RoomFilter) -> list[Property]:
    predicate = _ROOM_PREDICATES.get(room_filter)
    if predicate is None:
        return list(properties)
    return [prop for prop in properties if predicate(prop)]


def filter_by_type(properties: Iterable[Property], type_filter: str | None) -> list[Property]:
    """Exact match on the property type; an empty selection means no constraint."""

    if not type_filter:
        return list(properties)
    return [prop for prop in properties if prop.type == type_filter]


def sort_properties(properties: Iterable[Property], sort_key: SortKey) -> list[Property]:
    order = _SORT_ORDERS.get(sort_key)
    if order is None:
        return list(properties)
    key, reverse = order
    return sorted(properties, key=key, reverse=reverse)


def run_pipeline(
    properties: Sequence[Property],
    *,
    room_filter: RoomFilter = RoomFilter.ALL,
    type_filter: str | None = None,
    sort_key: SortKey = SortKey.DEFAULT,
) -> tuple[Property, ...]:
    """Return the ordered subset for the given selection without touching ``properties``."""

    filtered = filter_by_rooms(properties, room_filter)
    filtered = filter_by_type(filtered, type_filter)
    return tuple(sort_properties(filtered, sort_key))


def property_types(properties: Iterable[Property]) -> list[str]:
    """Distinct property types in first-seen order, for the type selector."""

    seen: dict[str, None] = {}
    for prop in properties:
        seen.setdefault(prop.type, None)
    return list(seen)
