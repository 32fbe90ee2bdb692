"""Bounded-hop route discovery over a :class:`~flightnet.graph.FlightGraph`."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Tuple

from .errors import InvalidArgumentError
from .graph import FlightGraph
from .models import Flight

Route = List[Flight]


@dataclass
class _SearchNode:
    airport_code: str
    path: Tuple[Flight, ...]
    flight_count: int


def _airport_in_path(airport_code: str, path: Tuple[Flight, ...]) -> bool:
    for flight in path:
        if flight.origin.code == airport_code or flight.destination.code == airport_code:
            return True
    return False


def find_routes(graph: FlightGraph, start_code: str, end_code: str, max_stops: int) -> List[Route]:
    """Return every simple route from ``start_code`` to ``end_code``.

    ``max_stops`` counts intermediate airports, so a route has at most
    ``max_stops + 1`` flights. Routes are ordered by number of flights; routes
    of equal length keep breadth-first discovery order. A route ends as soon as
    it reaches ``end_code``; an empty path is not a route, so ``start_code ==
    end_code`` yields nothing. The caller checks that both airports exist.
    """

    if max_stops < 0:
        raise InvalidArgumentError("max_stops cannot be negative")

    max_flights = max_stops + 1
    routes: List[Route] = []
    queue: Deque[_SearchNode] = deque([_SearchNode(start_code, (), 0)])

    while queue:
        node = queue.popleft()
        if node.airport_code == end_code:
            if node.path:
                routes.append(list(node.path))
            continue
        if node.flight_count >= max_flights:
            continue
        for flight in graph.outgoing(node.airport_code):
            next_code = flight.destination.code
            if _airport_in_path(next_code, node.path):
                continue
            queue.append(_SearchNode(next_code, node.path + (flight,), node.flight_count + 1))

    routes.sort(key=len)
    return routes


__all__ = ["Route", "find_routes"]
