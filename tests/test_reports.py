from shegerbus.models import Passenger, ReservationDate, default_network
from shegerbus.reports import (
    export_report,
    format_bookings,
    format_report,
    format_ticket,
    search_by_seat,
    search_by_ticket,
    write_ticket,
)


def _passenger(name, ticket):
    return Passenger(
        name=name,
        age=30,
        gender="m",
        phone_no="900000000",
        ticket_id=ticket,
        date=ReservationDate(1, 2, 2024),
    )


def _network():
    net = default_network()
    net.get_bus("addis", "bahirdar").book(_passenger("Abebe", "T1"), 5)
    net.get_bus("addis", "jima").book(_passenger("Sara", "T2"), 5)
    return net


def test_format_bookings_empty():
    text = format_bookings(default_network())
    assert "No bookings found in the system." in text
    assert "Route:" not in text


def test_format_bookings_lists_routes_and_total():
    text = format_bookings(_network())
    assert "Route: addis to bahirdar" in text
    assert "Route: addis to jima" in text
    assert "Route: addis to diredewa" not in text
    assert text.rstrip().endswith("Total bookings across all routes: 2")
    row = next(line for line in text.splitlines() if line.startswith("Abebe"))
    assert row.endswith("1/2/2024")
    assert "T1" in row


def test_search_by_ticket():
    net = _network()
    assert [p.name for p in search_by_ticket(net, "T2")] == ["Sara"]
    assert search_by_ticket(net, "missing") == []


def test_search_by_seat_covers_every_route():
    net = _network()
    assert [p.name for p in search_by_seat(net, 5)] == ["Abebe", "Sara"]
    assert search_by_seat(net, 6) == []


def test_format_report_rows():
    text = format_report(_network())
    lines = text.splitlines()
    assert lines[0] == "========== Booking Report =========="
    assert lines[2] == "-" * 75
    assert len(lines) == 5
    assert lines[3].startswith("T1")
    assert "Abebe" in lines[3]


def test_export_report_round_trip(tmp_path):
    net = _network()
    path = export_report(net, tmp_path / "report.txt")
    assert path.read_text(encoding="utf-8") == format_report(net)


def test_format_ticket():
    p = _passenger("Abebe", "T1")
    p.seat = 7
    lines = format_ticket(p).splitlines()
    assert len(lines[0]) == 25
    assert lines[0].strip() == "Individual Ticket"
    assert "Name: Abebe" in lines
    assert "Ticket_id: T1" in lines
    assert "Date of reservation: 1/2/2024" in lines
    assert "Seat number: 7" in lines


def test_write_ticket_round_trip(tmp_path):
    p = _passenger("Sara", "T9")
    path = write_ticket(p, tmp_path / "ticket.txt")
    assert path.read_text(encoding="utf-8") == format_ticket(p)