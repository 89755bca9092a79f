import pytest

from shegerbus.models import (
    Bus,
    Passenger,
    ReservationDate,
    RouteNotFoundError,
    default_network,
)
from shegerbus.storage import (
    format_record,
    load_routes,
    parse_records,
    route_path,
    save_route,
)


def make_passenger(ticket_id="17000000001234", seat=0, name="Abebe"):
    return Passenger(
        name=name,
        age=30,
        gender="m",
        phone_no="900000000",
        ticket_id=ticket_id,
        date=ReservationDate(1, 2, 2024),
        seat=seat,
    )


def test_route_path_names(tmp_path):
    network = default_network()
    assert route_path(network.get_bus("addis", "bahirdar"), tmp_path) == (
        tmp_path / "routes" / "addis_bahir.txt"
    )
    assert route_path(network.get_bus("addis", "diredewa"), tmp_path).name == "addis_dire.txt"
    assert route_path(network.get_bus("addis", "jima"), tmp_path).name == "addis_jima.txt"


def test_route_path_unknown_route(tmp_path):
    with pytest.raises(RouteNotFoundError):
        route_path(Bus("jima", "addis"), tmp_path)


def test_format_record_field_order():
    record = format_record(make_passenger(ticket_id="T1", seat=7))
    assert record == "Abebe 30 m 900000000 T1 7 1 2 2024"


def test_parse_round_trip():
    passengers = [make_passenger("a", 1), make_passenger("b", 2, name="Sara")]
    text = "".join(format_record(p) + "\n" for p in passengers)
    assert list(parse_records(text)) == passengers


def test_parse_stops_at_malformed_record():
    good = format_record(make_passenger("a", 1))
    bad = "Sara xx f 900000000 b 2 1 2 2024"
    after = format_record(make_passenger("c", 3))
    parsed = list(parse_records("\n".join([good, bad, after])))
    assert [p.ticket_id for p in parsed] == ["a"]


def test_parse_ignores_incomplete_tail():
    good = format_record(make_passenger("a", 1))
    parsed = list(parse_records(good + "\nSara 20 f"))
    assert len(parsed) == 1


def test_parse_empty_text():
    assert list(parse_records("")) == []


def test_save_and_load_round_trip(tmp_path):
    network = default_network()
    jima = network.get_bus("addis", "jima")
    jima.book(make_passenger("a"), 4)
    jima.book(make_passenger("b", name="Sara"), 9)
    path = save_route(jima, tmp_path)
    assert path.is_file()

    fresh = default_network()
    assert load_routes(fresh, tmp_path) == 2
    restored = fresh.get_bus("addis", "jima")
    assert restored.customers == jima.customers
    assert not restored.is_seat_available(4)
    assert not restored.is_seat_available(9)
    assert fresh.get_bus("addis", "bahirdar").customers == []


def test_save_after_cancel_rewrites_file(tmp_path):
    network = default_network()
    bus = network.get_bus("addis", "bahirdar")
    bus.book(make_passenger("a"), 1)
    bus.book(make_passenger("b"), 2)
    save_route(bus, tmp_path)
    bus.cancel("a")
    save_route(bus, tmp_path)

    fresh = default_network()
    load_routes(fresh, tmp_path)
    assert [p.ticket_id for p in fresh.get_bus("addis", "bahirdar").customers] == ["b"]


def test_load_without_files_reads_nothing(tmp_path):
    network = default_network()
    assert load_routes(network, tmp_path) == 0
    assert all(not bus.customers for bus in network)