"""FastAPI application exposing route search and bookings."""
from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from .dataset import build_demo_network
from .errors import (
    InvalidArgumentError,
    NoAvailableRouteError,
    NoDirectFlightError,
    UnknownAirportError,
)
from .models import Airport, Flight, Reservation
from .network import RouteNetwork
from .reporting import XLSX_MEDIA_TYPE, ExportFormat, export_flights
from .reservations import ReservationEngine, route_cost


class BookingRequest(BaseModel):
    origin: str
    destination: str
    passenger_name: str
    seats: int = Field(1, ge=1, description="Seats required on every leg")


def _airport_payload(airport: Airport) -> Dict[str, str]:
    return {"code": airport.code, "name": airport.name, "city": airport.city}


def _flight_payload(flight: Flight) -> Dict[str, Any]:
    return {
        "flight_code": flight.flight_code,
        "origin": flight.origin.code,
        "destination": flight.destination.code,
        "total_capacity": flight.total_capacity,
        "booked_seats": flight.booked_seats,
        "available_seats": flight.available_seats,
        "base_price": flight.base_price,
        "current_price": flight.current_price,
    }


def _route_payload(route: Sequence[Flight], seats: int = 1) -> Dict[str, Any]:
    return {
        "flights": [_flight_payload(flight) for flight in route],
        "legs": len(route),
        "total_cost": route_cost(route, seats),
    }


def _reservation_payload(reservation: Reservation) -> Dict[str, Any]:
    return {
        "reservation_id": reservation.reservation_id,
        "passenger_name": reservation.passenger_name,
        "seats": reservation.seats,
        "total_cost": reservation.total_cost,
        "flights": [flight.flight_code for flight in reservation.flights],
    }


def create_app(
    network: Optional[RouteNetwork] = None,
    engine: Optional[ReservationEngine] = None,
) -> FastAPI:
    """Return an application serving ``network`` (the demo network by default).

    Every request runs under one lock, since the engine itself does no locking.
    """

    if network is None:
        network = engine.network if engine is not None else build_demo_network()
    if engine is None:
        engine = ReservationEngine(network)
    lock = threading.Lock()

    app = FastAPI(title="flightnet", description="Route search and dynamically priced bookings")
    app.state.network = network
    app.state.engine = engine

    @app.get("/airports")
    def list_airports() -> List[Dict[str, str]]:
        with lock:
            return [_airport_payload(airport) for airport in network.airports()]

    @app.get("/flights")
    def list_flights() -> List[Dict[str, Any]]:
        with lock:
            return [_flight_payload(flight) for flight in network.get_all_flights()]

    @app.get("/flights/download/{file_format}")
    def download_flights(file_format: ExportFormat) -> StreamingResponse:
        with lock:
            content = export_flights(network, file_format)
        media_type = "text/csv" if file_format == "csv" else XLSX_MEDIA_TYPE
        headers = {"Content-Disposition": f"attachment; filename=\"flights.{file_format}\""}
        return StreamingResponse(iter([content]), media_type=media_type, headers=headers)

    @app.get("/routes")
    def search_routes(
        origin: str = Query(..., description="Origin airport code"),
        destination: str = Query(..., description="Destination airport code"),
        max_stops: int = Query(1, description="Intermediate airports allowed"),
    ) -> List[Dict[str, Any]]:
        with lock:
            try:
                routes = network.find_routes(origin, destination, max_stops)
            except InvalidArgumentError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            return [_route_payload(route) for route in routes]

    @app.get("/routes/cheapest")
    def cheapest_route(
        origin: str,
        destination: str,
        seats: int = Query(1, ge=1, description="Seats required on every leg"),
    ) -> Dict[str, Any]:
        with lock:
            try:
                route = engine.find_cheapest_available_route(origin, destination, seats)
            except InvalidArgumentError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            if route is None:
                raise HTTPException(status_code=404, detail="No available route")
            return _route_payload(route, seats)

    @app.get("/seats")
    def available_seats(origin: str, destination: str) -> Dict[str, Any]:
        with lock:
            try:
                seats = engine.available_seats(origin, destination)
            except NoDirectFlightError as exc:
                raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"origin": origin, "destination": destination, "available_seats": seats}

    @app.post("/reservations", status_code=201)
    def create_reservation(booking: BookingRequest) -> Dict[str, Any]:
        with lock:
            try:
                reservation = engine.book(
                    booking.origin, booking.destination, booking.passenger_name, booking.seats
                )
            except InvalidArgumentError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            except UnknownAirportError as exc:
                raise HTTPException(status_code=404, detail=str(exc)) from exc
            except NoAvailableRouteError as exc:
                raise HTTPException(status_code=409, detail=str(exc)) from exc
            return _reservation_payload(reservation)

    @app.get("/reservations/{reservation_id}")
    def get_reservation(reservation_id: str) -> Dict[str, Any]:
        with lock:
            reservation = engine.get_reservation(reservation_id)
            if reservation is None:
                raise HTTPException(status_code=404, detail=f"Unknown reservation '{reservation_id}'")
            return _reservation_payload(reservation)

    @app.delete("/reservations/{reservation_id}", status_code=204)
    def cancel_reservation(reservation_id: str) -> Response:
        with lock:
            if not engine.cancel(reservation_id):
                raise HTTPException(status_code=404, detail=f"Unknown reservation '{reservation_id}'")
        return Response(status_code=204)

    return app


__all__ = ["BookingRequest", "create_app"]
