"""FastAPI application for the Prague Shared Flats listings site."""
from __future__ import annotations

import base64
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from .core.config import settings
from .routers import listings as listings_router
from .routers import residences as residences_router
from .schemas.listings import NotificationOut, RoomFilter, SortKey
from .services import landing
from .services import listings as listings_service
from .services import residences as residences_service
from .services.search import SearchValidationError, validate_search

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await app.state.listings.ensure_loaded(settings.properties_source or None)
    yield


app = FastAPI(title="Prague Shared Flats API", version="0.1.0", lifespan=lifespan)
app.state.listings = listings_service.ListingController()

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(residences_router.router, prefix="/api", tags=["residences"])
app.include_router(listings_router.router, prefix="/api", tags=["listings"])
app.include_router(listings_router.data_router)


@app.get("/", response_class=HTMLResponse, tags=["meta"])
async def index(
    rooms: RoomFilter = RoomFilter.ALL,
    type: str | None = None,
    sort: SortKey = SortKey.DEFAULT,
    check_in: str | None = Query(default=None, alias="check-in"),
    check_out: str | None = Query(default=None, alias="check-out"),
    controller: listings_service.ListingController = Depends(listings_router.get_listing_controller),
) -> HTMLResponse:
    """Serve the landing page with the catalog and the filtered listings."""

    state = listings_service.apply_selection(
        controller.state,
        room_filter=rooms,
        type_filter=type,
        sort_key=sort,
        clear_type=not type,
    )
    search_error: str | None = None
    if check_in is not None or check_out is not None:
        try:
            state = listings_service.with_search(state, validate_search(check_in, check_out))
        except SearchValidationError as exc:
            search_error = str(exc)

    view = listings_service.build_view(state, notifications=controller.notifications)
    if search_error:
        view.notifications.append(
            NotificationOut(message=search_error, dismiss_after_seconds=settings.notification_ttl_seconds)
        )

    catalog = residences_service.list_residences().data
    return HTMLResponse(content=landing.render_landing(catalog, view))


@app.head("/", tags=["meta"])
async def index_head() -> Response:
    """Fast health checks issue HEAD /; answer with 200 to avoid noisy 405s."""

    return Response(status_code=200)


FAVICON_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGMAAQAABQABDQottAAAAABJRU5ErkJggg=="
)


@app.get("/api/health", tags=["meta"])
async def health() -> dict[str, str]:
    """Simple liveness probe."""

    return {"status": "ok"}


@app.head("/api/health", tags=["meta"])
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)


@app.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
async def robots() -> PlainTextResponse:
    """Serve a minimal robots.txt to avoid 404 noise."""

    return PlainTextResponse("User-agent: *\nDisallow:")


@app.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    """Return a tiny placeholder favicon."""

    return Response(content=FAVICON_BYTES, media_type="image/png")
