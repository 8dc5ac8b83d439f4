"""Projection of the current subset into card view-models and map marker states."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from html import escape
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from ..core.config import settings
from ..schemas.listings import MapConfig, MarkerState, MarkerView, Property, PropertyCard

EMPTY_MESSAGE = "No properties match your criteria. Try adjusting your filters."
CARD_ANIMATION_STEP_MS = 50
MARKER_OPACITY: dict[str, float] = {"dimmed": 0.3, "highlighted": 1.0}


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def price_per_area(price: float, size: float) -> int | None:
    """Rounded price per square metre, or ``None`` when the size cannot be divided by."""

    if size <= 0:
        return None
    return round_half_up(price / size)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_price(price: float, currency: str | None = None) -> str:
    symbol = settings.currency_symbol if currency is None else currency
    return f"{symbol}{format_number(price)} / month"


def build_card(prop: Property, index: int = 0) -> PropertyCard:
    ratio = price_per_area(prop.price, prop.size)
    symbol = settings.currency_symbol
    return PropertyCard(
        id=prop.id,
        title=escape(prop.title),
        address=escape(prop.address),
        type=escape(prop.type),
        image=escape(prop.image),
        image_fallback=settings.placeholder_image_url,
        rooms=prop.rooms,
        size=prop.size,
        price=prop.price,
        price_display=format_price(prop.price, symbol),
        price_per_area=ratio,
        price_per_area_display=f"{symbol}{ratio:,}" if ratio is not None else "n/a",
        animation_delay_ms=index * CARD_ANIMATION_STEP_MS,
        action=f"select:{prop.id}",
    )


def render_cards(subset: Sequence[Property]) -> list[PropertyCard]:
    """Rebuild the whole card list for ``subset``; callers show EMPTY_MESSAGE when it is empty."""

    return [build_card(prop, index) for index, prop in enumerate(subset)]


def selection_message(properties: Iterable[Property], property_id: int) -> str | None:
    for prop in properties:
        if prop.id == property_id:
            return f"You've selected: {prop.title}\nPrice: {settings.currency_symbol}{format_number(prop.price)}/month"
    return None


@dataclass(frozen=True, slots=True)
class Marker:
    property_id: int
    latitude: float
    longitude: float
    popup_html: str
    state: MarkerState = "highlighted"


def _popup_html(prop: Property) -> str:
    return (
        f"<strong>{escape(prop.title)}</strong><br>"
        f"{escape(prop.address)}<br>"
        f"<strong>{settings.currency_symbol}{format_number(prop.price)}/month</strong><br>"
        f'<a href="#" data-property-id="{prop.id}">View Details →</a>'
    )


class MarkerIndex:
    """Immutable property-id to marker mapping."""

    __slots__ = ("_markers",)

    def __init__(self, markers: Mapping[int, Marker] | None = None) -> None:
        self._markers: Mapping[int, Marker] = MappingProxyType(dict(markers or {}))

    @classmethod
    def from_properties(cls, properties: Iterable[Property]) -> "MarkerIndex":
        return cls(
            {
                prop.id: Marker(
                    property_id=prop.id,
                    latitude=prop.latitude,
                    longitude=prop.longitude,
                    popup_html=_popup_html(prop),
                )
                for prop in properties
            }
        )

    def __len__(self) -> int:
        return len(self._markers)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._markers

    def get(self, property_id: int) -> Marker | None:
        return self._markers.get(property_id)

    def state_of(self, property_id: int) -> MarkerState | None:
        marker = self._markers.get(property_id)
        return marker.state if marker else None

    def sync(self, subset: Iterable[Property]) -> "MarkerIndex":
        """Dim every marker, then highlight the ones whose property is in ``subset``."""

        visible = {prop.id for prop in subset}
        return MarkerIndex(
            {
                property_id: _with_state(marker, "highlighted" if property_id in visible else "dimmed")
                for property_id, marker in self._markers.items()
            }
        )

    def views(self) -> list[MarkerView]:
        return [
            MarkerView(
                property_id=marker.property_id,
                latitude=marker.latitude,
                longitude=marker.longitude,
                state=marker.state,
                opacity=MARKER_OPACITY[marker.state],
                popup_html=marker.popup_html,
            )
            for marker in self._markers.values()
        ]


def _with_state(marker: Marker, state: MarkerState) -> Marker:
    return marker if marker.state == state else replace(marker, state=state)


def map_config() -> MapConfig:
    return MapConfig(
        center=(settings.map_center_lat, settings.map_center_lng),
        zoom=settings.map_zoom,
        tile_url=settings.map_tile_url,
        attribution=settings.map_attribution,
    )
