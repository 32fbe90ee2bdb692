from io import StringIO

import pytest

from flightnet.loader import build_network, load_routes
from flightnet.network import RouteNetwork

HEADER = (
    "airline_iata,airline_name,source_iata,source_city,destination_iata,"
    "destination_city,route,stops,aircraft_type,aircraft_capacity,price_usd\n"
)


def _write(tmp_path, body):
    path = tmp_path / "routes.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_load_routes_registers_airports_and_flights(tmp_path):
    path = _write(
        tmp_path,
        "A3,Aegean,ATH,Athens,LHR,London,ATH-LHR,0,A320,180,220.0\n"
        "BA,British Airways,LHR,London,JFK,New York,LHR-JFK,0,B777,250,380.5\n"
        "A3,Aegean,ATH,Athens,JFK,New York,ATH-JFK,0,A330,200,450\n",
    )
    network, summary = build_network(path)

    assert (summary.airports, summary.flights, summary.skipped) == (3, 3, 0)
    assert network.get_airport("ATH").name == "Athens Airport"
    assert network.get_airport("JFK").city == "New York"
    assert [f.flight_code for f in network.get_all_flights()] == ["FL00000", "FL00002", "FL00001"]
    flight = network.get_direct_flight("LHR", "JFK")
    assert flight.total_capacity == 250
    assert flight.base_price == pytest.approx(380.5)
    assert [len(r) for r in network.find_routes("ATH", "JFK", 1)] == [1, 2]


def test_malformed_rows_are_skipped_without_aborting(tmp_path):
    path = _write(
        tmp_path,
        "A3,Aegean,ATH,Athens,LHR,London,ATH-LHR,0,A320,180,220.0\n"
        "A3,Aegean,ATH,Athens,CDG\n"
        "A3,Aegean,ATH,Athens,FRA,Frankfurt,ATH-FRA,0,A320,lots,200\n"
        "A3,Aegean,ATH,Athens,FRA,Frankfurt,ATH-FRA,0,A320,160,free\n"
        "A3,Aegean,ATH,Athens,BER,Berlin,ATH-BER,0,A320,0,150\n"
        "LH,Lufthansa,FRA,Frankfurt,JFK,New York,FRA-JFK,0,A340,300,370\n",
    )
    network = RouteNetwork()
    summary = load_routes(path, network)

    assert summary.flights == 2
    assert summary.skipped == 4
    assert network.has_airport("BER")
    assert not network.has_airport("CDG")
    assert network.get_direct_flight("ATH", "BER") is None
    assert network.get_direct_flight("FRA", "JFK").flight_code == "FL00002"


def test_load_routes_accepts_file_objects_and_existing_airports():
    network = RouteNetwork()
    network.add_airport("ATH", "Athens International", "Athens")
    source = StringIO(HEADER + "A3,Aegean,ATH,Athens,LHR,London,ATH-LHR,0,A320,180,220\n")

    summary = load_routes(source, network, flight_prefix="GR")

    assert summary.airports == 1
    assert network.get_airport("ATH").name == "Athens International"
    assert network.get_direct_flight("ATH", "LHR").flight_code == "GR00000"


def test_missing_columns_raise(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("source_iata,destination_iata\nATH,LHR\n", encoding="utf-8")
    with pytest.raises(ValueError):
        build_network(path)
