"""One-shot loader for the listings dataset."""
from __future__ import annotations

import logging
from pathlib import Path

import httpx
from pydantic import TypeAdapter, ValidationError

from ..schemas.listings import Property

logger = logging.getLogger(__name__)

DEFAULT_PROPERTIES_PATH = Path(__file__).resolve().parent.parent / "data" / "properties.json"
PROPERTIES_ROUTE = "/data/properties.json"
LOAD_TIMEOUT_SECONDS = 10.0

_PROPERTY_LIST = TypeAdapter(list[Property])


class PropertyLoadError(RuntimeError):
    """Raised when the dataset cannot be fetched or is not a property array."""


def _parse(payload: bytes | str, source: str) -> tuple[Property, ...]:
    try:
        properties = tuple(_PROPERTY_LIST.validate_json(payload))
    except ValidationError as exc:
        raise PropertyLoadError(f"Malformed property data from {source}") from exc
    if len({prop.id for prop in properties}) != len(properties):
        raise PropertyLoadError(f"Duplicate property ids in {source}")
    return properties


async def fetch_properties(client: httpx.AsyncClient, url: str) -> tuple[Property, ...]:
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise PropertyLoadError(f"Failed to load properties from {url}") from exc
    if not response.is_success:
        raise PropertyLoadError(f"Failed to load properties from {url}: HTTP {response.status_code}")
    return _parse(response.content, url)


def read_properties(path: Path) -> tuple[Property, ...]:
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise PropertyLoadError(f"Failed to read properties from {path}") from exc
    return _parse(payload, str(path))


async def load_properties(
    source: str | Path | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> tuple[Property, ...]:
    """Load the full property set once.

    With a ``client`` the source is fetched through it (relative paths resolve against its
    base URL). Without one, ``http(s)`` sources are fetched with a short-lived client and
    anything else is read from disk. An empty source means the bundled dataset.
    """

    if client is not None:
        properties = await fetch_properties(client, str(source or PROPERTIES_ROUTE))
    elif isinstance(source, str) and source.startswith(("http://", "https://")):
        async with httpx.AsyncClient(timeout=LOAD_TIMEOUT_SECONDS) as http:
            properties = await fetch_properties(http, source)
    else:
        properties = read_properties(Path(source) if source else DEFAULT_PROPERTIES_PATH)

    logger.info("Loaded %d properties", len(properties))
    return properties
