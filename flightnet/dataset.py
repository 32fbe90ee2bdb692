"""Utilities to populate a route network with demo and sample data."""
from __future__ import annotations

import random
from typing import Dict, Optional, Sequence, Tuple

from .errors import FlightNetworkError
from .network import RouteNetwork
from .reservations import ReservationEngine

DEMO_AIRPORTS: Sequence[Tuple[str, str, str]] = (
    ("ATH", "Athens International", "Athens"),
    ("LHR", "London Heathrow", "London"),
    ("CDG", "Charles de Gaulle", "Paris"),
    ("FRA", "Frankfurt Airport", "Frankfurt"),
    ("JFK", "John F Kennedy", "New York"),
    ("BOS", "Boston Logan", "Boston"),
)
DEMO_FLIGHTS: Sequence[Tuple[str, str, str, int, float]] = (
    ("A3501", "ATH", "LHR", 180, 220.0),
    ("A3502", "ATH", "CDG", 180, 240.0),
    ("A3503", "ATH", "FRA", 160, 200.0),
    ("BA177", "LHR", "JFK", 250, 380.0),
    ("BA178", "LHR", "BOS", 250, 360.0),
    ("AF007", "CDG", "JFK", 280, 400.0),
    ("AF008", "CDG", "BOS", 280, 390.0),
    ("LH400", "FRA", "JFK", 300, 370.0),
    ("A3600", "ATH", "JFK", 200, 450.0),
    ("AA100", "JFK", "BOS", 150, 120.0),
)

AIRPORTS: Sequence[Tuple[str, str]] = (
    ("ATL", "Atlanta"),
    ("PEK", "Beijing"),
    ("DXB", "Dubai"),
    ("LAX", "Los Angeles"),
    ("HND", "Tokyo"),
    ("ORD", "Chicago"),
    ("LHR", "London"),
    ("HKG", "Hong Kong"),
    ("PVG", "Shanghai"),
    ("CDG", "Paris"),
)
FIRST_NAMES = ("Ava", "Noah", "Liam", "Mia", "Lucas", "Emma", "Ethan", "Isabella")
LAST_NAMES = ("Johnson", "Williams", "Smith", "Brown", "Garcia", "Lee")


def build_demo_network() -> RouteNetwork:
    """European hubs feeding two US airports, with a direct ATH-JFK flight."""

    network = RouteNetwork()
    for code, name, city in DEMO_AIRPORTS:
        network.add_airport(code, name, city)
    for flight_code, origin, destination, capacity, price in DEMO_FLIGHTS:
        network.add_flight(flight_code, origin, destination, capacity, price)
    return network


def generate_sample_data(
    network: RouteNetwork,
    *,
    flights: int = 25,
    bookings: int = 100,
    engine: Optional[ReservationEngine] = None,
    seed: int = 42,
) -> Dict[str, int]:
    """Populate ``network`` with deterministic pseudo-random flights and bookings."""

    rng = random.Random(seed)
    for code, city in AIRPORTS:
        if not network.has_airport(code):
            network.add_airport(code, f"{city} Airport", city)

    codes = [code for code, _ in AIRPORTS]
    for index in range(flights):
        origin, destination = rng.sample(codes, 2)
        network.add_flight(
            f"AR{1000 + index}",
            origin,
            destination,
            rng.choice((90, 120, 180)),
            float(rng.choice((120, 180, 220, 340))),
        )

    engine = engine or ReservationEngine(network)
    successful = 0
    for _ in range(bookings):
        origin, destination = rng.sample(codes, 2)
        passenger = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
        try:
            engine.book(origin, destination, passenger, rng.randint(1, 6))
        except FlightNetworkError:
            continue
        successful += 1
    return {"flights": flights, "airports": len(codes), "bookings": successful}


__all__ = ["DEMO_AIRPORTS", "DEMO_FLIGHTS", "build_demo_network", "generate_sample_data"]
