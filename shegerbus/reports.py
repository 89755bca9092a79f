"""Text views of the bookings: listings, searches, reports and tickets."""

from __future__ import annotations

from pathlib import Path

from .models import Network, Passenger

REPORT_FILE = "booking_report.txt"
TICKET_FILE = "ticket.txt"


def _booking_row(p: Passenger) -> str:
    return (
        f"{p.name:<15}{p.seat:<10}{p.ticket_id:<15}{p.gender:<10}"
        f"{p.phone_no:<15}{p.date}"
    )


def format_bookings(network: Network) -> str:
    """All bookings grouped by route, with a total at the end."""
    lines = ["", "=== ALL BOOKINGS ==="]
    total = 0
    header = f"{'Name':<15}{'Seat':<10}{'Ticket ID':<15}{'Gender':<10}{'Phone':<15}Date"
    for bus in network:
        if not bus.customers:
            continue
        total += len(bus.customers)
        lines += ["", f"Route: {bus.origin} to {bus.destination}", header, "-" * 80]
        lines.extend(_booking_row(p) for p in bus.customers)
    lines.append("")
    if total == 0:
        lines.append("No bookings found in the system.")
    else:
        lines.append(f"Total bookings across all routes: {total}")
    return "\n".join(lines) + "\n"


def search_by_ticket(network: Network, ticket_id: str) -> list[Passenger]:
    """The first booking with the ticket id on each route that has one."""
    return [p for bus in network if (p := bus.find_ticket(ticket_id)) is not None]


def search_by_seat(network: Network, seat: int) -> list[Passenger]:
    """The first booking of the seat number on each route that has one."""
    found = []
    for bus in network:
        match = next((p for p in bus.customers if p.seat == seat), None)
        if match is not None:
            found.append(match)
    return found


def format_report(network: Network) -> str:
    """The contents of the exported booking report."""
    lines = [
        "========== Booking Report ==========",
        f"{'Ticket ID':<18}{'Seat No':<10}{'Name':<18}{'Gender':<15}{'Phone':<15}",
        "-" * 75,
    ]
    for bus in network:
        lines.extend(
            f"{p.ticket_id:<18} {p.seat:<10}{p.name:<18}{p.gender:<12}{p.phone_no:<15}"
            for p in bus.customers
        )
    return "\n".join(lines) + "\n"


def export_report(network: Network, path: str | Path = REPORT_FILE) -> Path:
    """Write the booking report to a file and return its path."""
    target = Path(path)
    target.write_text(format_report(network), encoding="utf-8")
    return target


def format_ticket(passenger: Passenger) -> str:
    """A printable ticket for one passenger."""
    lines = [
        f"{'Individual Ticket':>25}",
        f"Name: {passenger.name}",
        f"Age: {passenger.age}",
        f"phone_no: {passenger.phone_no}",
        f"Ticket_id: {passenger.ticket_id}",
        f"Date of reservation: {passenger.date}",
        f"Seat number: {passenger.seat}",
    ]
    return "\n".join(lines) + "\n"


def write_ticket(passenger: Passenger, path: str | Path = TICKET_FILE) -> Path:
    """Write the passenger's ticket to a file and return its path."""
    target = Path(path)
    target.write_text(format_ticket(passenger), encoding="utf-8")
    return target