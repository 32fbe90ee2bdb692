"""Airport registry and flight graph facade."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .errors import DuplicateAirportError, InvalidArgumentError, UnknownAirportError
from .graph import FlightGraph
from .models import Airport, Flight
from .routes import Route, find_routes

logger = logging.getLogger(__name__)


class RouteNetwork:
    """Airports keyed by code plus the flights between them.

    Topology is only ever added to. Every validation runs before anything is
    stored, so a rejected airport or flight leaves the network untouched.
    """

    def __init__(self) -> None:
        self._airports: Dict[str, Airport] = {}
        self._graph = FlightGraph()

    def add_airport(self, code: str, name: str, city: str) -> Airport:
        if not code:
            raise InvalidArgumentError("Airport code cannot be null or empty")
        if code in self._airports:
            raise DuplicateAirportError(f"Airport {code} already exists")
        airport = Airport(code=code, name=name, city=city)
        self._airports[code] = airport
        self._graph.add_airport(code)
        logger.debug("Registered airport %s", code)
        return airport

    def add_flight(
        self,
        flight_code: str,
        origin_code: str,
        dest_code: str,
        capacity: int,
        base_price: float,
    ) -> Flight:
        if origin_code not in self._airports:
            raise UnknownAirportError(f"Origin airport {origin_code} does not exist")
        if dest_code not in self._airports:
            raise UnknownAirportError(f"Destination airport {dest_code} does not exist")
        if not flight_code:
            raise InvalidArgumentError("Flight code cannot be null or empty")
        if origin_code == dest_code:
            raise InvalidArgumentError(f"Flight {flight_code} cannot depart and arrive at {origin_code}")
        if capacity <= 0 or base_price <= 0:
            raise InvalidArgumentError("Capacity and price must be positive")
        flight = Flight(
            flight_code=flight_code,
            origin=self._airports[origin_code],
            destination=self._airports[dest_code],
            total_capacity=capacity,
            base_price=base_price,
        )
        self._graph.add_flight(flight)
        logger.debug("Added flight %s %s->%s", flight_code, origin_code, dest_code)
        return flight

    def find_routes(self, start_code: str, end_code: str, max_stops: int) -> List[Route]:
        if start_code not in self._airports or end_code not in self._airports:
            return []
        return find_routes(self._graph, start_code, end_code, max_stops)

    def get_outgoing(self, code: str) -> Sequence[Flight]:
        return self._graph.outgoing(code)

    def get_direct_flight(self, origin_code: str, dest_code: str) -> Optional[Flight]:
        return self._graph.direct_flight(origin_code, dest_code)

    def get_all_flights(self) -> List[Flight]:
        return self._graph.all_flights()

    def has_airport(self, code: str) -> bool:
        return code in self._airports

    def get_airport(self, code: str) -> Optional[Airport]:
        return self._airports.get(code)

    def airports(self) -> List[Airport]:
        return list(self._airports.values())

    @property
    def airport_count(self) -> int:
        return len(self._airports)

    @property
    def flight_count(self) -> int:
        return len(self._graph)


__all__ = ["RouteNetwork"]
