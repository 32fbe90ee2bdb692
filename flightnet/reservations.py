"""Booking logic and dynamic pricing for the flight network."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .errors import (
    InvalidArgumentError,
    NoAvailableRouteError,
    NoDirectFlightError,
    UnknownAirportError,
)
from .models import Flight, Reservation
from .network import RouteNetwork
from .routes import Route

logger = logging.getLogger(__name__)

# Bookings consider direct flights and one-stop connections only.
BOOKING_MAX_STOPS = 1
RESERVATION_PREFIX = "RES"


def route_cost(route: Sequence[Flight], seats: int) -> float:
    """Total price of ``seats`` seats on every leg at current prices."""

    return sum(flight.current_price * seats for flight in route)


def route_has_capacity(route: Sequence[Flight], seats: int) -> bool:
    return all(flight.has_available_seats(seats) for flight in route)


class ReservationEngine:
    """Books and cancels seats on the flights of a :class:`RouteNetwork`.

    The engine mutates the network's own flight objects; it keeps no copy of
    flight state. Each instance owns its reservation list and id sequence.
    """

    def __init__(self, network: RouteNetwork) -> None:
        self.network = network
        self._reservations: List[Reservation] = []
        self._next_sequence = 1

    def book(self, origin_code: str, dest_code: str, passenger_name: str, seats: int) -> Reservation:
        """Reserve ``seats`` seats on the cheapest available route.

        Every leg is checked before any leg is touched, so a failed booking
        leaves all flights unchanged. The cost is locked at pre-booking prices.
        """

        if not passenger_name:
            raise InvalidArgumentError("Passenger name cannot be null or empty")
        if seats <= 0:
            raise InvalidArgumentError("Number of seats must be positive")
        for code in (origin_code, dest_code):
            if not self.network.has_airport(code):
                raise UnknownAirportError(f"Airport {code} does not exist")

        route = self.find_cheapest_available_route(origin_code, dest_code, seats)
        if not route:
            logger.debug("No route with %d seats from %s to %s", seats, origin_code, dest_code)
            raise NoAvailableRouteError(
                f"No available route with {seats} seats from {origin_code} to {dest_code}"
            )

        total_cost = route_cost(route, seats)
        for flight in route:
            flight.book_seats(seats)

        reservation = Reservation(
            reservation_id=self._next_reservation_id(),
            flights=tuple(route),
            passenger_name=passenger_name,
            seats=seats,
            total_cost=total_cost,
        )
        self._reservations.append(reservation)
        logger.info(
            "Booked %s: %d seat(s) %s->%s via %s for %.2f",
            reservation.reservation_id,
            seats,
            origin_code,
            dest_code,
            ",".join(flight.flight_code for flight in route),
            total_cost,
        )
        return reservation

    def cancel(self, reservation_id: str) -> bool:
        """Release every leg of a reservation; ``False`` if the id is unknown."""

        for index, reservation in enumerate(self._reservations):
            if reservation.reservation_id == reservation_id:
                break
        else:
            return False

        for flight in reservation.flights:
            flight.release_seats(reservation.seats)
        del self._reservations[index]
        logger.info("Cancelled %s, released %d seat(s)", reservation_id, reservation.seats)
        return True

    def find_cheapest_available_route(
        self, origin_code: str, dest_code: str, seats: int
    ) -> Optional[Route]:
        if seats <= 0:
            raise InvalidArgumentError("Number of seats must be positive")
        candidates = [
            route
            for route in self.network.find_routes(origin_code, dest_code, BOOKING_MAX_STOPS)
            if route_has_capacity(route, seats)
        ]
        if not candidates:
            return None

        cheapest = candidates[0]
        cheapest_cost = route_cost(cheapest, seats)
        for route in candidates[1:]:
            cost = route_cost(route, seats)
            if cost < cheapest_cost:
                cheapest, cheapest_cost = route, cost
        return cheapest

    def available_seats(self, origin_code: str, dest_code: str) -> int:
        flight = self.network.get_direct_flight(origin_code, dest_code)
        if flight is None:
            raise NoDirectFlightError(f"No direct flight from {origin_code} to {dest_code}")
        return flight.available_seats

    def total_reservations(self) -> int:
        return len(self._reservations)

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        for reservation in self._reservations:
            if reservation.reservation_id == reservation_id:
                return reservation
        return None

    def reservations(self) -> List[Reservation]:
        return list(self._reservations)

    def _next_reservation_id(self) -> str:
        reservation_id = f"{RESERVATION_PREFIX}{self._next_sequence:04d}"
        self._next_sequence += 1
        return reservation_id


__all__ = [
    "BOOKING_MAX_STOPS",
    "ReservationEngine",
    "route_cost",
    "route_has_capacity",
]
