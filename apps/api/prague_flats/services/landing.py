"""Server-rendered landing page for the residence catalog and the listings view."""
from __future__ import annotations

import json
from html import escape
from typing import Sequence
from urllib.parse import urlencode

from ..schemas.listings import ListingView, SortKey
from ..schemas.residences import Residence

SORT_LABELS: dict[SortKey, str] = {
    SortKey.DEFAULT: "Recommended",
    SortKey.PRICE_LOW: "Price: low to high",
    SortKey.PRICE_HIGH: "Price: high to low",
    SortKey.ROOMS_MOST: "Most rooms",
}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Prague Shared Flats</title>
    <script src="https://cdn.tailwindcss.com"></script>
    <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" />
</head>
<body class="min-h-screen bg-slate-50 text-slate-900">
    <header class="bg-white shadow-sm">
        <div class="mx-auto flex max-w-6xl items-center justify-between px-6 py-6">
            <div>
                <h1 class="text-3xl font-bold">Prague Shared Flats</h1>
                <p class="mt-1 text-slate-600">Find your perfect home in Prague</p>
            </div>
            <nav class="flex gap-6 text-sm font-medium text-slate-700">
                <a href="#residences">Residences</a>
                <a href="#properties">Properties</a>
            </nav>
        </div>
    </header>
{notifications}
    <main class="mx-auto max-w-6xl px-6 py-10">
        <section id="residences">
            <h2 class="text-3xl font-bold">Our Residences</h2>
            <p class="mt-2 text-slate-600">Explore our available properties across Prague</p>
            <div class="mt-8 grid gap-8 md:grid-cols-2 lg:grid-cols-3">
{residences}
            </div>
        </section>

        <section id="properties" class="mt-16 properties">
            <h2 class="text-3xl font-bold">Properties</h2>
            <form method="get" action="/#properties" class="mt-6 flex flex-wrap items-end gap-4">
                <input type="hidden" name="rooms" value="{room_filter}" />
                <label class="text-sm">Check-in
                    <input type="date" name="check-in" value="{check_in}" min="{check_in_min}" class="block rounded border px-3 py-2" />
                </label>
                <label class="text-sm">Check-out
                    <input type="date" name="check-out" value="{check_out}" class="block rounded border px-3 py-2" />
                </label>
                <label class="text-sm">Type
                    <select name="type" class="block rounded border px-3 py-2">{type_options}</select>
                </label>
                <label class="text-sm">Sort
                    <select name="sort" class="block rounded border px-3 py-2">{sort_options}</select>
                </label>
                <button type="submit" class="rounded bg-indigo-600 px-6 py-2 font-semibold text-white">Search</button>
            </form>
            <div class="mt-6 flex gap-2">
{filter_buttons}
            </div>
            <p class="mt-4 text-sm text-slate-500">Showing {shown} of {total}</p>
            <div class="properties-grid mt-6 grid gap-8 md:grid-cols-2 lg:grid-cols-3">
{cards}
            </div>
            <div id="map" class="map-container mt-10 h-96 rounded-xl"></div>
        </section>
    </main>

    <script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
    <script>
        const mapConfig = {map_json};
        const markers = {markers_json};
        if (mapConfig && typeof L !== 'undefined') {{
            const map = L.map('map').setView(mapConfig.center, mapConfig.zoom);
            L.tileLayer(mapConfig.tile_url, {{ attribution: mapConfig.attribution, maxZoom: 19 }}).addTo(map);
            markers.forEach((m) => {{
                L.marker([m.latitude, m.longitude], {{ opacity: m.opacity }}).bindPopup(m.popup_html).addTo(map);
            }});
        }}
    </script>
</body>
</html>
"""


def _residence_card(residence: Residence) -> str:
    rooms = len(residence.flats)
    rooms_label = "Room" if rooms == 1 else "Rooms"
    price_block = ""
    if residence.flats:
        lowest = min(flat.price for flat in residence.flats)
        price_block = (
            '<div class="mt-4 border-t pt-4">'
            '<p class="text-sm text-slate-500">From</p>'
            f'<p class="text-2xl font-bold text-indigo-600">{lowest:,} CZK</p>'
            '<p class="text-xs text-slate-500">per month</p>'
            "</div>"
        )
    return (
        '                <a href="/api/residences/{id}" class="block rounded-xl bg-white p-6 shadow-md">'
        '<span class="float-right rounded-full bg-indigo-50 px-3 py-1 text-sm font-semibold text-indigo-600">'
        "{rooms} {rooms_label}</span>"
        '<h3 class="text-2xl font-bold">{name}</h3>'
        '<p class="mt-2 text-slate-600">{district}</p>'
        '<p class="mt-3 text-slate-700">{description}</p>'
        "{price_block}</a>"
    ).format(
        id=residence.id,
        rooms=rooms,
        rooms_label=rooms_label,
        name=escape(residence.name),
        district=escape(residence.district),
        description=escape(residence.description),
        price_block=price_block,
    )


def _property_cards(view: ListingView) -> str:
    if not view.cards:
        return (
            '                <div class="empty-state col-span-full py-16 text-center text-lg text-slate-500">'
            f"{escape(view.empty_message or '')}</div>"
        )
    # Card fields arrive already escaped.
    return "\n".join(
        '                <article class="property-card rounded-xl bg-white shadow-md" '
        f'style="animation-delay: {card.animation_delay_ms}ms">'
        f'<img src="{card.image}" alt="{card.title}" onerror="this.src=\'{escape(card.image_fallback)}\'" />'
        f'<div class="p-6"><span class="property-badge text-xs uppercase">{card.type}</span>'
        f'<h3 class="property-title text-xl font-bold">{card.title}</h3>'
        f'<p class="property-location text-slate-600">📍 {card.address}</p>'
        f'<p class="mt-2 text-sm">{card.rooms} Rooms · {card.size:g} m² · {card.price_per_area_display} per m²</p>'
        f'<p class="property-price mt-3 text-lg font-semibold">{card.price_display}</p>'
        f'<a class="property-button mt-4 inline-block rounded bg-indigo-600 px-4 py-2 text-white" '
        f'href="/api/listings/{card.id}/select">Reserve Now</a></div></article>'
        for card in view.cards
    )


def _filter_buttons(view: ListingView) -> str:
    buttons = []
    for button in view.filters:
        query = {"rooms": button.value.value, "sort": view.sort_key.value}
        if view.type_filter:
            query["type"] = view.type_filter
        css = "bg-indigo-600 text-white" if button.active else "bg-white text-slate-700"
        buttons.append(
            f'                <a class="filter-btn rounded-full px-4 py-2 {css}" '
            f'href="/?{escape(urlencode(query))}#properties">{escape(button.label)}</a>'
        )
    return "\n".join(buttons)


def _options(values: Sequence[tuple[str, str]], selected: str) -> str:
    return "".join(
        f'<option value="{escape(value)}"{" selected" if value == selected else ""}>{escape(label)}</option>'
        for value, label in values
    )


def _notifications(view: ListingView) -> str:
    if not view.notifications:
        return ""
    items = "".join(
        f'<div class="notification rounded-lg bg-red-500 px-6 py-4 text-white shadow-lg" '
        f'data-dismiss-after="{note.dismiss_after_seconds:g}">{escape(note.message)}</div>'
        for note in view.notifications
    )
    return f'    <div class="fixed right-5 top-20 z-50 space-y-2">{items}</div>\n'


def _script_json(value: object) -> str:
    return json.dumps(value).replace("</", "<\\/")


def render_landing(residences: Sequence[Residence], view: ListingView) -> str:
    """Render the full landing page HTML."""

    types = [("", "All types")] + [(kind, kind) for kind in view.types]
    sorts = [(key.value, label) for key, label in SORT_LABELS.items()]
    search = view.search
    return PAGE_TEMPLATE.format(
        notifications=_notifications(view),
        residences="\n".join(_residence_card(residence) for residence in residences),
        room_filter=escape(view.room_filter.value),
        check_in=search.check_in.isoformat() if search else "",
        check_in_min=search.check_in_min.isoformat() if search and search.check_in_min else "",
        check_out=search.check_out.isoformat() if search else "",
        type_options=_options(types, view.type_filter or ""),
        sort_options=_options(sorts, view.sort_key.value),
        filter_buttons=_filter_buttons(view),
        shown=view.shown,
        total=view.total,
        cards=_property_cards(view),
        map_json=_script_json(view.map.model_dump() if view.map else None),
        markers_json=_script_json([marker.model_dump() for marker in view.markers]),
    )
