"""Read-only residence catalog endpoints."""
from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from ..schemas import residences as residences_schema
from ..services import residences as residences_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(message: str, status_code: int) -> JSONResponse:
    body = residences_schema.ErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get(
    "/residences",
    response_model=residences_schema.ResidenceListResponse,
    responses={500: {"model": residences_schema.ErrorResponse}},
)
async def list_residences(
    district: str | None = None,
    price_min: int | None = Query(default=None, ge=0),
    price_max: int | None = Query(default=None, ge=0),
    furnished: bool | None = None,
    available_from: date | None = None,
):
    """Return every residence, or those with flats matching the optional filters."""

    filters = residences_schema.SearchFilters(
        district=district,
        price_min=price_min,
        price_max=price_max,
        furnished=furnished,
        available_from=available_from,
    )
    try:
        return residences_service.list_residences(filters)
    except Exception as exc:  # noqa: BLE001 - API contract is a JSON error envelope
        logger.exception("Failed to fetch residences: %s", exc)
        return _error("Failed to fetch residences", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get(
    "/residences/{residence_id}",
    response_model=residences_schema.ResidenceDetailResponse,
    responses={
        404: {"model": residences_schema.ErrorResponse},
        500: {"model": residences_schema.ErrorResponse},
    },
)
async def get_residence(residence_id: str):
    """Return a single residence by numeric id."""

    try:
        parsed_id = residences_service.parse_residence_id(residence_id)
        result = residences_service.get_residence(parsed_id) if parsed_id is not None else None
    except Exception as exc:  # noqa: BLE001 - API contract is a JSON error envelope
        logger.exception("Failed to fetch residence %s: %s", residence_id, exc)
        return _error("Failed to fetch residence", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if result is None:
        return _error("Residence not found", status.HTTP_404_NOT_FOUND)
    return result


@router.get(
    "/flats",
    response_model=residences_schema.FlatListResponse,
    responses={500: {"model": residences_schema.ErrorResponse}},
)
async def list_flats():
    """Return every flat across all residences."""

    try:
        return residences_service.list_flats()
    except Exception as exc:  # noqa: BLE001 - API contract is a JSON error envelope
        logger.exception("Failed to fetch flats: %s", exc)
        return _error("Failed to fetch flats", status.HTTP_500_INTERNAL_SERVER_ERROR)
