"""Adjacency-list storage for the flight network."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .models import Flight


class FlightGraph:
    """Maps an airport code to its outgoing flights in insertion order.

    The graph only stores edges. Validation of airports and flight attributes
    happens in :class:`flightnet.network.RouteNetwork`.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[Flight]] = {}

    def add_airport(self, code: str) -> None:
        self._adjacency.setdefault(code, [])

    def add_flight(self, flight: Flight) -> None:
        self.add_airport(flight.destination.code)
        self._adjacency.setdefault(flight.origin.code, []).append(flight)

    def has_airport(self, code: str) -> bool:
        return code in self._adjacency

    def outgoing(self, code: str) -> Sequence[Flight]:
        return tuple(self._adjacency.get(code, ()))

    def direct_flight(self, origin_code: str, dest_code: str) -> Optional[Flight]:
        for flight in self._adjacency.get(origin_code, ()):
            if flight.destination.code == dest_code:
                return flight
        return None

    def all_flights(self) -> List[Flight]:
        return [flight for flights in self._adjacency.values() for flight in flights]

    def __len__(self) -> int:
        return sum(len(flights) for flights in self._adjacency.values())
