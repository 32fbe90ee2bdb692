"""Flight network modelling with route search and demand-based pricing."""
from typing import TYPE_CHECKING, Any

from .cli import main as cli_main
from .dataset import build_demo_network, generate_sample_data
from .errors import (
    DuplicateAirportError,
    FlightNetworkError,
    InvalidArgumentError,
    NoAvailableRouteError,
    NoDirectFlightError,
    UnknownAirportError,
)
from .loader import LoadSummary, build_network, load_routes
from .models import Airport, Flight, Reservation
from .network import RouteNetwork
from .pricing import dynamic_price, price_multiplier
from .reservations import BOOKING_MAX_STOPS, ReservationEngine

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .web import create_app as _create_app


def create_app(*args: Any, **kwargs: Any):  # pragma: no cover - thin wrapper
    from .web import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = [
    "Airport",
    "BOOKING_MAX_STOPS",
    "DuplicateAirportError",
    "Flight",
    "FlightNetworkError",
    "InvalidArgumentError",
    "LoadSummary",
    "NoAvailableRouteError",
    "NoDirectFlightError",
    "Reservation",
    "ReservationEngine",
    "RouteNetwork",
    "UnknownAirportError",
    "build_demo_network",
    "build_network",
    "cli_main",
    "create_app",
    "dynamic_price",
    "generate_sample_data",
    "load_routes",
    "price_multiplier",
]
