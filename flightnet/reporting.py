"""Tabular views of flight occupancy and pricing."""
from __future__ import annotations

from io import BytesIO
from typing import Dict, List, Literal, Sequence, Union

import pandas as pd

from .models import Flight
from .network import RouteNetwork

ExportFormat = Literal["csv", "xlsx"]

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def format_route(route: Sequence[Flight]) -> str:
    if not route:
        return ""
    codes = [route[0].origin.code] + [flight.destination.code for flight in route]
    return " → ".join(codes)


def summarize_flights(network: RouteNetwork) -> List[Dict[str, Union[str, int, float]]]:
    return [
        {
            "flight": flight.flight_code,
            "route": f"{flight.origin.code}-{flight.destination.code}",
            "booked": flight.booked_seats,
            "capacity": flight.total_capacity,
            "available": flight.available_seats,
            "load_factor": round(flight.load_factor, 4),
            "base_price": flight.base_price,
            "current_price": round(flight.current_price, 2),
        }
        for flight in network.get_all_flights()
    ]


def flights_dataframe(network: RouteNetwork) -> pd.DataFrame:
    columns = ["flight", "route", "booked", "capacity", "available", "load_factor", "base_price", "current_price"]
    return pd.DataFrame(summarize_flights(network), columns=columns)


def export_flights(network: RouteNetwork, file_format: str) -> bytes:
    """Render the flight summary as CSV or XLSX bytes."""

    dataframe = flights_dataframe(network)
    if file_format == "csv":
        return dataframe.to_csv(index=False).encode("utf-8")
    if file_format == "xlsx":
        buffer = BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            dataframe.to_excel(writer, index=False, sheet_name="Flights")
        return buffer.getvalue()
    raise ValueError(f"Unsupported export format '{file_format}'.")


__all__ = ["XLSX_MEDIA_TYPE", "format_route", "summarize_flights", "flights_dataframe", "export_flights"]
