"""Business logic for the residence catalog endpoints."""
from __future__ import annotations

from ..repositories import residences as residences_repo
from ..schemas import residences as schemas


def list_residences(filters: schemas.SearchFilters | None = None) -> schemas.ResidenceListResponse:
    """Return the catalog, optionally narrowed by search filters."""

    if filters is not None and residences_repo.has_filters(filters):
        rows = residences_repo.search_residences(filters=filters)
    else:
        rows = residences_repo.list_residences()

    data = [schemas.Residence.model_validate(row) for row in rows]
    return schemas.ResidenceListResponse(data=data, count=len(data))


def get_residence(residence_id: int) -> schemas.ResidenceDetailResponse | None:
    row = residences_repo.get_residence_by_id(residence_id)
    if row is None:
        return None
    return schemas.ResidenceDetailResponse(data=schemas.Residence.model_validate(row))


def list_flats() -> schemas.FlatListResponse:
    data = [schemas.Flat.model_validate(flat) for flat in residences_repo.get_all_flats()]
    return schemas.FlatListResponse(data=data, count=len(data))


def parse_residence_id(raw: str) -> int | None:
    """Integer id from a path segment, or ``None`` when it is not a number."""

    try:
        return int(raw.strip())
    except ValueError:
        return None
