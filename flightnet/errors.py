"""Exceptions raised by the flight network and reservation engine."""
from __future__ import annotations


class FlightNetworkError(Exception):
    """Base class for every error raised by :mod:`flightnet`."""


class InvalidArgumentError(FlightNetworkError, ValueError):
    """Raised for empty identifiers, non-positive quantities or negative hop budgets."""


class DuplicateAirportError(FlightNetworkError):
    """Raised when an airport code is registered twice."""


class UnknownAirportError(FlightNetworkError, LookupError):
    """Raised when an airport code was never registered."""


class NoAvailableRouteError(FlightNetworkError):
    """Raised when no candidate route has enough seats on every leg."""


class NoDirectFlightError(FlightNetworkError, LookupError):
    """Raised when a direct-flight-only query finds no flight."""


__all__ = [
    "FlightNetworkError",
    "InvalidArgumentError",
    "DuplicateAirportError",
    "UnknownAirportError",
    "NoAvailableRouteError",
    "NoDirectFlightError",
]
