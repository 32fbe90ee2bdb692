"""Load a route network from a delimited route file."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Optional, Tuple, Union

import pandas as pd

from .errors import FlightNetworkError
from .network import RouteNetwork

logger = logging.getLogger(__name__)

COLUMNS: Tuple[str, ...] = (
    "airline_iata",
    "airline_name",
    "source_iata",
    "source_city",
    "destination_iata",
    "destination_city",
    "route",
    "stops",
    "aircraft_type",
    "aircraft_capacity",
    "price_usd",
)
_REQUIRED = ("source_iata", "source_city", "destination_iata", "destination_city", "aircraft_capacity", "price_usd")

Source = Union[str, Path, IO[str]]


@dataclass
class LoadSummary:
    airports: int
    flights: int
    skipped: int


def _field(row: pd.Series, column: str) -> Optional[str]:
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _read_frame(source: Source) -> Tuple[pd.DataFrame, int]:
    overlong: List[List[str]] = []

    def _truncate(fields: List[str]) -> List[str]:
        overlong.append(fields)
        return fields[: len(COLUMNS)]

    frame = pd.read_csv(
        source,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        engine="python",
        on_bad_lines=_truncate,
    )
    return frame, len(overlong)


def load_routes(source: Source, network: RouteNetwork, *, flight_prefix: str = "FL") -> LoadSummary:
    """Feed every usable row of ``source`` into ``network``.

    Rows with missing fields, non-numeric capacity or price, or values the
    network rejects are skipped. Flight codes are generated sequentially.
    """

    frame, truncated = _read_frame(source)
    if truncated:
        logger.debug("Truncated %d row(s) with extra fields", truncated)
    missing = [column for column in COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(f"Route file is missing columns: {', '.join(missing)}")

    airports_before = network.airport_count
    flights = 0
    skipped = 0
    counter = 0
    for index, row in frame.iterrows():
        values = {column: _field(row, column) for column in _REQUIRED}
        if any(value is None for value in values.values()):
            logger.debug("Skipping row %s: missing fields", index)
            skipped += 1
            continue
        try:
            capacity = int(values["aircraft_capacity"])
            price = float(values["price_usd"])
        except ValueError:
            price = math.nan
        if not math.isfinite(price):
            logger.debug("Skipping row %s: invalid capacity or price", index)
            skipped += 1
            continue

        for code_column, city_column in (("source_iata", "source_city"), ("destination_iata", "destination_city")):
            code = values[code_column]
            if not network.has_airport(code):
                city = values[city_column]
                network.add_airport(code, f"{city} Airport", city)

        flight_code = f"{flight_prefix}{counter:05d}"
        counter += 1
        try:
            network.add_flight(flight_code, values["source_iata"], values["destination_iata"], capacity, price)
        except FlightNetworkError as exc:
            logger.debug("Skipping row %s: %s", index, exc)
            skipped += 1
            continue
        flights += 1

    summary = LoadSummary(
        airports=network.airport_count - airports_before,
        flights=flights,
        skipped=skipped,
    )
    logger.info(
        "Loaded %d airport(s) and %d flight(s), skipped %d row(s)",
        summary.airports,
        summary.flights,
        summary.skipped,
    )
    return summary


def build_network(source: Source) -> Tuple[RouteNetwork, LoadSummary]:
    network = RouteNetwork()
    summary = load_routes(source, network)
    return network, summary


__all__ = ["COLUMNS", "LoadSummary", "load_routes", "build_network"]
