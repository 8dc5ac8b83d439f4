"""Schemas for the residence catalog API."""
from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for catalog payloads: camelCase on the wire, built from dataclasses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Flat(CatalogModel):
    id: int
    residence_id: int
    name: str
    room: str
    price: int
    deposit: int
    utilities: int
    available: bool
    available_from: date | None = None
    floor: int | None = None
    furnished: bool
    photos: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    description: str | None = None


class Transport(CatalogModel):
    metro: str | None = None
    tram: list[str] = Field(default_factory=list)
    bus: list[str] = Field(default_factory=list)


class Coordinates(CatalogModel):
    lat: float
    lng: float


class Residence(CatalogModel):
    id: int
    name: str
    address: str
    district: str
    description: str
    main_image: str
    photos: list[str] = Field(default_factory=list)
    flats: list[Flat] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    transport: Transport = Field(default_factory=Transport)
    coordinates: Coordinates | None = None


class User(CatalogModel):
    id: int
    email: str
    name: str
    phone: str | None = None
    created_at: datetime


BookingStatus = Literal["pending", "confirmed", "cancelled"]


class Booking(CatalogModel):
    """A flat reservation. Nothing in the site creates or transitions bookings yet."""

    id: int
    flat_id: int
    user_id: int
    start_date: date
    end_date: date
    status: BookingStatus = "pending"
    total_price: int = Field(ge=0)
    created_at: datetime


class SearchFilters(CatalogModel):
    district: str | None = None
    price_min: int | None = Field(default=None, ge=0)
    price_max: int | None = Field(default=None, ge=0)
    available_from: date | None = None
    furnished: bool | None = None


class ResidenceListResponse(BaseModel):
    success: Literal[True] = True
    data: list[Residence]
    count: int


class ResidenceDetailResponse(BaseModel):
    success: Literal[True] = True
    data: Residence


class FlatListResponse(BaseModel):
    success: Literal[True] = True
    data: list[Flat]
    count: int


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
