"""Command line interface for searching routes and booking seats."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from tabulate import tabulate

from .config import configure_logging, load_settings
from .dataset import build_demo_network
from .errors import FlightNetworkError
from .loader import build_network
from .models import Flight, Reservation
from .network import RouteNetwork
from .reporting import format_route, summarize_flights
from .reservations import ReservationEngine, route_cost


def _render_routes(routes: Iterable[Sequence[Flight]], seats: int = 1) -> str:
    rows = [
        [
            index,
            format_route(route),
            " ".join(flight.flight_code for flight in route),
            min(flight.available_seats for flight in route),
            f"{route_cost(route, seats):,.2f}",
        ]
        for index, route in enumerate(routes, start=1)
    ]
    headers = ["#", "Route", "Flights", "Seats left", "Price"]
    return tabulate(rows, headers=headers, tablefmt="github")


def _render_flights(network: RouteNetwork) -> str:
    rows = summarize_flights(network)
    return tabulate(rows, headers="keys", tablefmt="github", floatfmt=".2f")


def _describe_reservation(reservation: Reservation) -> str:
    return (
        f"{reservation.reservation_id}: {reservation.passenger_name}, {reservation.seats} seat(s) "
        f"on {format_route(reservation.flights)} for {reservation.total_cost:,.2f}"
    )


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def _load_network(data: Optional[Path]) -> RouteNetwork:
    if data is None:
        return build_demo_network()
    network, _ = build_network(data)
    return network


def _run_demo(network: RouteNetwork, engine: ReservationEngine) -> None:
    origin, destination = "ATH", "JFK"
    print(f"Routes {origin} → {destination} with up to one stop")
    print(_render_routes(network.find_routes(origin, destination, 1)))
    print()

    direct = network.get_direct_flight(origin, destination)
    bookings: List[Reservation] = []
    for passenger, seats in (("Maria Papadopoulos", 40), ("Tour Group", 70), ("Conference", 60)):
        reservation = engine.book(origin, destination, passenger, seats)
        bookings.append(reservation)
        print(_describe_reservation(reservation))
        if direct is not None:
            print(
                f"  {direct.flight_code} load {direct.load_factor:.0%}, "
                f"price now {direct.current_price:,.2f}"
            )
    print()

    cancelled = bookings[-1]
    engine.cancel(cancelled.reservation_id)
    print(f"Cancelled {cancelled.reservation_id}")
    if direct is not None:
        print(f"  {direct.flight_code} load {direct.load_factor:.0%}, price now {direct.current_price:,.2f}")
    print(f"Active reservations: {engine.total_reservations()}")
    print()
    print(_render_flights(network))


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search routes and book seats on a dynamically priced flight network.")
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Route CSV to load (default: FLIGHTNET_DATA_FILE, else the built-in demo network).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: FLIGHTNET_LOG_LEVEL or INFO).")
    commands = parser.add_subparsers(dest="command", required=True)

    routes = commands.add_parser("routes", help="List routes between two airports.")
    routes.add_argument("origin")
    routes.add_argument("destination")
    routes.add_argument("--max-stops", type=int, default=1, help="Intermediate airports allowed (default: 1).")

    cheapest = commands.add_parser("cheapest", help="Show the cheapest route with enough free seats.")
    cheapest.add_argument("origin")
    cheapest.add_argument("destination")
    cheapest.add_argument("--seats", type=_positive_int, default=1)

    book = commands.add_parser("book", help="Book seats on the cheapest available route.")
    book.add_argument("origin")
    book.add_argument("destination")
    book.add_argument("passenger")
    book.add_argument("--seats", type=_positive_int, default=1)

    commands.add_parser("flights", help="Show occupancy and prices of every flight.")
    commands.add_parser("demo", help="Walk through bookings and a cancellation on ATH → JFK.")

    return parser.parse_args(list(argv))


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)
    try:
        network = _load_network(args.data or settings.data_file)
        engine = ReservationEngine(network)
        if args.command == "routes":
            routes = network.find_routes(args.origin, args.destination, args.max_stops)
            if not routes:
                print(f"No routes from {args.origin} to {args.destination}.")
            else:
                print(_render_routes(routes))
        elif args.command == "cheapest":
            route = engine.find_cheapest_available_route(args.origin, args.destination, args.seats)
            if route is None:
                print(f"No route with {args.seats} free seat(s) from {args.origin} to {args.destination}.")
            else:
                print(_render_routes([route], seats=args.seats))
        elif args.command == "book":
            reservation = engine.book(args.origin, args.destination, args.passenger, args.seats)
            print(_describe_reservation(reservation))
            print(_render_flights(network))
        elif args.command == "flights":
            print(_render_flights(network))
        elif args.command == "demo":
            _run_demo(network, engine)
    except (FlightNetworkError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
