"""Data access helpers for the residence catalog."""
from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Sequence

from ..data.residences import DISTRICT_ALIASES, RESIDENCES, Flat, Residence


def list_residences(catalog: Sequence[Residence] = RESIDENCES) -> list[Residence]:
    return list(catalog)


def get_residence_by_id(residence_id: int, catalog: Sequence[Residence] = RESIDENCES) -> Residence | None:
    return next((residence for residence in catalog if residence.id == residence_id), None)


def get_all_flats(catalog: Sequence[Residence] = RESIDENCES) -> list[Flat]:
    """Every flat across all residences, in catalog order."""

    return [flat for residence in catalog for flat in residence.flats]


def search_residences(
    *,
    filters: "ResidenceFiltersProtocol",
    catalog: Sequence[Residence] = RESIDENCES,
) -> list[Residence]:
    """Return residences with at least one matching flat, narrowed to those flats.

    District matching is case-insensitive and accepts the aliases in ``DISTRICT_ALIASES``.
    """

    district = _normalise_district(filters.district) if filters.district else None

    results: list[Residence] = []
    for residence in catalog:
        if district and residence.district.lower() != district.lower():
            continue
        flats = [flat for flat in residence.flats if _flat_matches(flat, filters)]
        if flats:
            results.append(replace(residence, flats=flats))
    return results


def _normalise_district(value: str) -> str:
    key = value.strip().lower()
    return DISTRICT_ALIASES.get(key, value.strip())


def _flat_matches(flat: Flat, filters: "ResidenceFiltersProtocol") -> bool:
    if filters.price_min is not None and flat.price < filters.price_min:
        return False
    if filters.price_max is not None and flat.price > filters.price_max:
        return False
    if filters.furnished is not None and flat.furnished is not filters.furnished:
        return False
    if filters.available_from is not None:
        if not flat.available:
            return False
        if flat.available_from is not None and flat.available_from > filters.available_from:
            return False
    return True


def has_filters(filters: "ResidenceFiltersProtocol") -> bool:
    values: Iterable[object] = (
        filters.district,
        filters.price_min,
        filters.price_max,
        filters.available_from,
        filters.furnished,
    )
    return any(value is not None and value != "" for value in values)


class ResidenceFiltersProtocol:
    """Protocol-like duck-type to avoid pydantic dependency at repo layer."""

    district: str | None
    price_min: int | None
    price_max: int | None
    available_from: date | None
    furnished: bool | None
