"""Static residence catalog for Prague Shared Flats.

Seed data collected from the prague-shared-flats.eu residences.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(slots=True)
class Flat:
    """An individual rentable room within a residence. Prices are CZK per month."""

    id: int
    residence_id: int
    name: str
    room: str
    price: int
    deposit: int
    utilities: int
    available: bool = True
    furnished: bool = True
    available_from: Optional[date] = None
    floor: Optional[int] = None
    photos: List[str] = field(default_factory=list)
    amenities: List[str] = field(default_factory=list)
    description: Optional[str] = None


@dataclass(slots=True)
class Transport:
    metro: Optional[str] = None
    tram: List[str] = field(default_factory=list)
    bus: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(slots=True)
class Residence:
    """A building containing one or more rentable flats."""

    id: int
    name: str
    address: str
    district: str
    description: str
    main_image: str
    photos: List[str] = field(default_factory=list)
    flats: List[Flat] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
    transport: Transport = field(default_factory=Transport)
    coordinates: Optional[Coordinates] = None


RESIDENCES: list[Residence] = [
    Residence(
        id=1,
        name="Balbínova Residence",
        address="Balbínova, Prague 2 - Vinohrady",
        district="Vinohrady",
        description=(
            "Modern shared accommodation in the heart of Vinohrady district. Close to IP Pavlova "
            "metro station with excellent transport connections."
        ),
        main_image="/images/residences/balbinova/main.jpg",
        photos=[
            "/images/residences/balbinova/main.jpg",
            "/images/residences/balbinova/kitchen.jpg",
            "/images/residences/balbinova/room.jpg",
        ],
        features=[
            "Fully equipped kitchen",
            "High-speed WiFi",
            "Washing machine",
            "Close to metro",
            "Shared living room",
        ],
        transport=Transport(metro="IP Pavlova (Line C)", tram=["6", "11", "13"], bus=["135"]),
        flats=[
            Flat(
                id=101,
                residence_id=1,
                name="Room 1",
                room="Single Room",
                price=7_500,
                deposit=7_500,
                utilities=1_500,
                photos=["/images/flats/balbinova-room1.jpg"],
                amenities=["Desk", "Bed", "Wardrobe", "Window"],
            ),
        ],
    ),
    Residence(
        id=2,
        name="Řepy Residence",
        address="Prague 17 - Řepy",
        district="Řepy",
        description=(
            "Comfortable shared flats in Řepy district with good metro access. Perfect for "
            "students looking for affordable accommodation."
        ),
        main_image="/images/residences/repy/main.jpg",
        photos=["/images/residences/repy/main.jpg"],
        features=["WiFi included", "Kitchen facilities", "Near metro", "Quiet neighborhood"],
        transport=Transport(metro="Luka (Line B)", tram=["22", "25"], bus=["164", "180"]),
        flats=[
            Flat(
                id=201,
                residence_id=2,
                name="Room A",
                room="Single Room",
                price=6_800,
                deposit=6_800,
                utilities=1_400,
                photos=["/images/flats/repy-room1.jpg"],
                amenities=["Desk", "Bed", "Closet", "Heating"],
            ),
        ],
    ),
    Residence(
        id=3,
        name="Palmovka Residence",
        address="Prague 8 - Palmovka",
        district="Palmovka",
        description=(
            "Modern residence near Palmovka metro station. Excellent transport connections to "
            "city center and universities."
        ),
        main_image="/images/residences/palmovka/main.jpg",
        photos=["/images/residences/palmovka/main.jpg"],
        features=["Modern facilities", "24/7 security", "Laundry room", "Study room"],
        transport=Transport(metro="Palmovka (Line C, B)", tram=["3", "10", "14"], bus=["136", "177"]),
        flats=[
            Flat(
                id=301,
                residence_id=3,
                name="Room 1",
                room="Single Room",
                price=7_200,
                deposit=7_200,
                utilities=1_600,
                photos=["/images/flats/palmovka-room1.jpg"],
                amenities=["Desk", "Bed", "Wardrobe", "Window", "WiFi"],
            ),
        ],
    ),
    Residence(
        id=4,
        name="Nové Butovice Residence",
        address="Prague 13 - Nové Butovice",
        district="Nové Butovice",
        description=(
            "Affordable accommodation in Nové Butovice area with excellent shopping and "
            "transport facilities nearby."
        ),
        main_image="/images/residences/butovice/main.jpg",
        photos=["/images/residences/butovice/main.jpg"],
        features=["Shopping center nearby", "WiFi", "Shared kitchen", "Parking available"],
        transport=Transport(metro="Nové Butovice (Line B)", tram=["4", "7", "9"], bus=["123", "225"]),
        flats=[
            Flat(
                id=401,
                residence_id=4,
                name="Room 1",
                room="Double Room",
                price=6_500,
                deposit=6_500,
                utilities=1_300,
                photos=["/images/flats/butovice-room1.jpg"],
                amenities=["Two Beds", "Desks", "Wardrobe", "Window"],
            ),
        ],
    ),
    Residence(
        id=5,
        name="Hostivař Residence",
        address="Praha 10 - V Nových Domcích 17, Hostivař",
        district="Hostivař",
        description=(
            "Quiet residential area in Prague 10 - Hostivař. Great for students who prefer a "
            "peaceful environment."
        ),
        main_image="/images/residences/hostivar/main.jpg",
        photos=["/images/residences/hostivar/main.jpg"],
        features=["Peaceful area", "Green surroundings", "WiFi included", "Fully equipped kitchen"],
        transport=Transport(metro="Hostivař (Line A)", tram=["7", "22"], bus=["124", "213"]),
        flats=[
            Flat(
                id=501,
                residence_id=5,
                name="Room 1",
                room="Single Room",
                price=6_900,
                deposit=6_900,
                utilities=1_450,
                photos=["/images/flats/hostivar-room1.jpg"],
                amenities=["Desk", "Bed", "Wardrobe", "Shared bathroom"],
            ),
        ],
    ),
]


DISTRICT_ALIASES: dict[str, str] = {
    "vinohrady": "Vinohrady",
    "prague 2": "Vinohrady",
    "repy": "Řepy",
    "řepy": "Řepy",
    "palmovka": "Palmovka",
    "butovice": "Nové Butovice",
    "nove butovice": "Nové Butovice",
    "nové butovice": "Nové Butovice",
    "hostivar": "Hostivař",
    "hostivař": "Hostivař",
}
