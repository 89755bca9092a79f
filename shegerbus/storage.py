"""Plain-text persistence of bookings, one file per route."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from .models import Bus, Network, Passenger, ReservationDate, RouteNotFoundError

ROUTES_DIR = "routes"
ROUTE_FILES: dict[tuple[str, str], str] = {
    ("addis", "bahirdar"): "addis_bahir.txt",
    ("addis", "diredewa"): "addis_dire.txt",
    ("addis", "jima"): "addis_jima.txt",
}
_FIELDS_PER_RECORD = 9


def route_path(bus: Bus, root: str | Path = ".") -> Path:
    """The file that holds the bookings of the bus's route."""
    try:
        name = ROUTE_FILES[(bus.origin, bus.destination)]
    except KeyError:
        raise RouteNotFoundError(bus.origin, bus.destination) from None
    return Path(root) / ROUTES_DIR / name


def format_record(passenger: Passenger) -> str:
    """One space-separated line for the passenger, without the newline."""
    d = passenger.date
    return " ".join(
        str(value)
        for value in (
            passenger.name,
            passenger.age,
            passenger.gender,
            passenger.phone_no,
            passenger.ticket_id,
            passenger.seat,
            d.day,
            d.month,
            d.year,
        )
    )


def parse_records(text: str) -> Iterator[Passenger]:
    """Yield passengers from whitespace-separated records.

    Reading stops at the first incomplete or malformed record.
    """
    tokens = text.split()
    for start in range(0, len(tokens), _FIELDS_PER_RECORD):
        chunk = tokens[start:start + _FIELDS_PER_RECORD]
        if len(chunk) < _FIELDS_PER_RECORD:
            return
        name, age, gender, phone_no, ticket_id, seat, day, month, year = chunk
        try:
            passenger = Passenger(
                name=name,
                age=int(age),
                gender=gender,
                phone_no=phone_no,
                ticket_id=ticket_id,
                date=ReservationDate(int(day), int(month), int(year)),
                seat=int(seat),
            )
        except ValueError:
            return
        yield passenger


def save_route(bus: Bus, root: str | Path = ".") -> Path:
    """Rewrite the route file with the bus's current bookings."""
    path = route_path(bus, root)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for passenger in bus.customers:
            f.write(format_record(passenger) + "\n")
    return path


def load_routes(network: Network, root: str | Path = ".") -> int:
    """Load saved bookings into the network's buses; return how many were read."""
    loaded = 0
    for (origin, destination) in ROUTE_FILES:
        bus = network.get_bus(origin, destination)
        path = route_path(bus, root)
        if not path.is_file():
            continue
        for passenger in parse_records(path.read_text(encoding="utf-8")):
            bus.taken.add(passenger.seat)
            bus.customers.append(passenger)
            loaded += 1
    return loaded