from io import BytesIO, StringIO

import pandas as pd
import pytest

from flightnet.dataset import DEMO_FLIGHTS, build_demo_network, generate_sample_data
from flightnet.network import RouteNetwork
from flightnet.reporting import export_flights, flights_dataframe, format_route, summarize_flights
from flightnet.reservations import ReservationEngine


def test_demo_network_matches_fixture_tables():
    network = build_demo_network()
    assert network.airport_count == 6
    assert network.flight_count == len(DEMO_FLIGHTS) == 10
    direct = network.get_direct_flight("ATH", "JFK")
    assert (direct.flight_code, direct.total_capacity, direct.base_price) == ("A3600", 200, 450.0)
    assert len(network.find_routes("ATH", "JFK", 1)) == 4


def test_sample_data_is_deterministic():
    first = RouteNetwork()
    second = RouteNetwork()
    summary = generate_sample_data(first, flights=15, bookings=40)
    generate_sample_data(second, flights=15, bookings=40)

    assert summary["flights"] == 15
    assert summary["airports"] == 10
    assert 0 <= summary["bookings"] <= 40
    assert summarize_flights(first) == summarize_flights(second)


def test_sample_data_bookings_go_through_the_engine():
    network = RouteNetwork()
    engine = ReservationEngine(network)
    summary = generate_sample_data(network, flights=20, bookings=30, engine=engine)
    assert engine.total_reservations() == summary["bookings"]
    booked = sum(flight.booked_seats for flight in network.get_all_flights())
    expected = sum(r.seats * len(r.flights) for r in engine.reservations())
    assert booked == expected


def test_summary_and_dataframe_reflect_bookings():
    network = build_demo_network()
    ReservationEngine(network).book("ATH", "JFK", "Maria Papadopoulos", 110)

    rows = {row["flight"]: row for row in summarize_flights(network)}
    assert rows["A3600"]["booked"] == 110
    assert rows["A3600"]["available"] == 90
    assert rows["A3600"]["current_price"] == pytest.approx(540.0)
    assert rows["A3600"]["route"] == "ATH-JFK"

    frame = flights_dataframe(network)
    assert list(frame["flight"])[:3] == ["A3501", "A3502", "A3503"]
    assert len(frame) == 10


def test_export_flights_csv_and_xlsx():
    network = build_demo_network()
    csv_frame = pd.read_csv(StringIO(export_flights(network, "csv").decode("utf-8")))
    assert list(csv_frame.columns)[:2] == ["flight", "route"]
    assert len(csv_frame) == 10

    xlsx_frame = pd.read_excel(BytesIO(export_flights(network, "xlsx")), engine="openpyxl")
    assert list(xlsx_frame["flight"]) == list(csv_frame["flight"])

    with pytest.raises(ValueError):
        export_flights(network, "pdf")


def test_format_route():
    network = build_demo_network()
    route = network.find_routes("ATH", "JFK", 1)[1]
    assert format_route(route) == "ATH → LHR → JFK"
    assert format_route([]) == ""
