"""Schemas for the property listings view."""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Property(BaseModel):
    """Flattened record for a single listed unit."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    address: str
    type: str
    price: float
    size: float
    rooms: int
    image: str
    latitude: float
    longitude: float


class RoomFilter(str, Enum):
    ALL = "all"
    TWO = "2-rooms"
    THREE = "3-rooms"
    FOUR_PLUS = "4plus-rooms"


class SortKey(str, Enum):
    DEFAULT = "default"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    ROOMS_MOST = "rooms-most"


MarkerState = Literal["dimmed", "highlighted"]


class PropertyCard(BaseModel):
    """Display-ready card. Text fields are HTML-escaped, raw numbers are kept alongside."""

    id: int
    title: str
    address: str
    type: str
    image: str
    image_fallback: str
    rooms: int
    size: float
    price: float
    price_display: str
    price_per_area: int | None = None
    price_per_area_display: str
    animation_delay_ms: int = 0
    action: str


class MarkerView(BaseModel):
    property_id: int
    latitude: float
    longitude: float
    state: MarkerState
    opacity: float
    popup_html: str


class MapConfig(BaseModel):
    center: tuple[float, float]
    zoom: int
    tile_url: str
    attribution: str


class NotificationOut(BaseModel):
    message: str
    level: str = "error"
    dismiss_after_seconds: float


class FilterButton(BaseModel):
    value: RoomFilter
    label: str
    active: bool


class SearchDates(BaseModel):
    check_in: date
    check_out: date
    check_in_min: date | None = None


class ListingView(BaseModel):
    cards: list[PropertyCard] = Field(default_factory=list)
    empty_message: str | None = None
    filters: list[FilterButton] = Field(default_factory=list)
    room_filter: RoomFilter = RoomFilter.ALL
    type_filter: str | None = None
    sort_key: SortKey = SortKey.DEFAULT
    types: list[str] = Field(default_factory=list)
    markers: list[MarkerView] = Field(default_factory=list)
    map: MapConfig | None = None
    notifications: list[NotificationOut] = Field(default_factory=list)
    search: SearchDates | None = None
    scroll_to: str | None = None
    total: int = 0
    shown: int = 0


class SearchRequest(BaseModel):
    check_in: str | None = None
    check_out: str | None = None
    rooms: RoomFilter = RoomFilter.ALL
    type: str | None = None
    sort: SortKey = SortKey.DEFAULT


class SelectionResponse(BaseModel):
    success: Literal[True] = True
    message: str
