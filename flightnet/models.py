"""In-memory records for airports, flights and reservations."""
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Tuple

from .errors import InvalidArgumentError
from .pricing import dynamic_price, load_factor


@dataclass(unsafe_hash=True)
class Airport:
    """An airport keyed by its IATA code; ``name`` and ``city`` are cosmetic."""

    code: str
    name: str = field(default="", compare=False)
    city: str = field(default="", compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "code" and "code" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'code'")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return f"{self.code} - {self.name} ({self.city})"


@dataclass(eq=False)
class Flight:
    """A directed flight between two airports.

    Occupancy and price are read-only from the outside. :meth:`book_seats` and
    :meth:`release_seats` are the only mutators and both re-price the flight, so
    ``current_price`` always matches the pricing tier of the current load.
    """

    flight_code: str
    origin: Airport
    destination: Airport
    total_capacity: int
    base_price: float
    _booked_seats: int = field(default=0, init=False, repr=False)
    _current_price: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.total_capacity <= 0 or self.base_price <= 0:
            raise InvalidArgumentError("Capacity and price must be positive")
        self._reprice()

    @property
    def booked_seats(self) -> int:
        return self._booked_seats

    @property
    def current_price(self) -> float:
        return self._current_price

    @property
    def available_seats(self) -> int:
        return self.total_capacity - self._booked_seats

    @property
    def load_factor(self) -> float:
        return load_factor(self._booked_seats, self.total_capacity)

    def has_available_seats(self, seats: int) -> bool:
        return self.available_seats >= seats

    def book_seats(self, seats: int) -> None:
        if seats <= 0:
            raise InvalidArgumentError("Number of seats must be positive")
        if not self.has_available_seats(seats):
            raise InvalidArgumentError(
                f"Flight {self.flight_code} has only {self.available_seats} seats left"
            )
        self._booked_seats += seats
        self._reprice()

    def release_seats(self, seats: int) -> None:
        if seats <= 0:
            raise InvalidArgumentError("Number of seats must be positive")
        if seats > self._booked_seats:
            raise InvalidArgumentError(
                f"Cannot release {seats} seats on {self.flight_code}; only {self._booked_seats} booked"
            )
        self._booked_seats -= seats
        self._reprice()

    def _reprice(self) -> None:
        self._current_price = dynamic_price(self.base_price, self._booked_seats, self.total_capacity)

    def __str__(self) -> str:
        return (
            f"{self.flight_code}: {self.origin.code} → {self.destination.code} "
            f"[{self._booked_seats}/{self.total_capacity} seats, {self._current_price:.2f}]"
        )


@dataclass(frozen=True)
class Reservation:
    """A committed booking over one or more legs; never mutated after creation."""

    reservation_id: str
    flights: Tuple[Flight, ...]
    passenger_name: str
    seats: int
    total_cost: float

    @property
    def flight(self) -> Flight:
        return self.flights[0]

    def __str__(self) -> str:
        legs = ", ".join(flight.flight_code for flight in self.flights)
        return (
            f"Reservation {self.reservation_id}: {self.passenger_name} booked "
            f"{self.seats} seat(s) on {legs} for {self.total_cost:.2f}"
        )


__all__ = ["Airport", "Flight", "Reservation"]
