"""Listings view endpoints and the dataset the listings loader reads."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse, JSONResponse

from ..core.config import settings
from ..schemas import listings as listings_schema
from ..schemas.residences import ErrorResponse
from ..services import listings as listings_service
from ..services import render
from ..services.loader import DEFAULT_PROPERTIES_PATH, PROPERTIES_ROUTE
from ..services.search import SearchValidationError, validate_search

router = APIRouter()
data_router = APIRouter()


async def get_listing_controller(request: Request) -> listings_service.ListingController:
    """FastAPI dependency returning the app's controller, loading it on first use."""

    controller: listings_service.ListingController = request.app.state.listings
    await controller.ensure_loaded(settings.properties_source or None)
    return controller


def _selected_state(
    controller: listings_service.ListingController,
    rooms: listings_schema.RoomFilter,
    type_: str | None,
    sort: listings_schema.SortKey,
) -> listings_service.ListingState:
    return listings_service.apply_selection(
        controller.state,
        room_filter=rooms,
        type_filter=type_,
        sort_key=sort,
        clear_type=not type_,
    )


@data_router.get(PROPERTIES_ROUTE, include_in_schema=False)
async def properties_dataset() -> FileResponse:
    """Serve the bundled property dataset."""

    return FileResponse(DEFAULT_PROPERTIES_PATH, media_type="application/json")


@router.get("/listings", response_model=listings_schema.ListingView)
async def list_properties(
    rooms: listings_schema.RoomFilter = listings_schema.RoomFilter.ALL,
    type: str | None = None,
    sort: listings_schema.SortKey = listings_schema.SortKey.DEFAULT,
    controller: listings_service.ListingController = Depends(get_listing_controller),
) -> listings_schema.ListingView:
    """Return cards and marker states for the requested filter and sort."""

    state = _selected_state(controller, rooms, type, sort)
    return listings_service.build_view(state, notifications=controller.notifications)


@router.post(
    "/listings/search",
    response_model=listings_schema.ListingView,
    responses={400: {"model": ErrorResponse}},
)
async def search_properties(
    payload: listings_schema.SearchRequest,
    controller: listings_service.ListingController = Depends(get_listing_controller),
):
    """Validate the stay dates, then return the refreshed listings."""

    try:
        dates = validate_search(payload.check_in, payload.check_out)
    except SearchValidationError as exc:
        body = ErrorResponse(error=str(exc))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

    state = _selected_state(controller, payload.rooms, payload.type, payload.sort)
    state = listings_service.with_search(state, dates)
    return listings_service.build_view(
        state,
        notifications=controller.notifications,
        scroll_to=listings_service.RESULTS_REGION,
    )


@router.get("/listings/{property_id}/select", response_model=listings_schema.SelectionResponse)
async def select_property(
    property_id: int,
    controller: listings_service.ListingController = Depends(get_listing_controller),
) -> listings_schema.SelectionResponse:
    """Return the placeholder detail message for a listed property."""

    message = render.selection_message(controller.state.all_properties, property_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return listings_schema.SelectionResponse(message=message)
