"""Buses, passengers and the route network."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

SEAT_CAPACITY = 50


class RouteNotFoundError(LookupError):
    """Raised when no bus serves the requested route."""

    def __init__(self, origin: str = "", destination: str = "") -> None:
        super().__init__("No bus found in this route")
        self.origin = origin
        self.destination = destination


class SeatUnavailableError(ValueError):
    """Raised when a seat is taken or outside the bus."""


@dataclass(frozen=True)
class ReservationDate:
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass
class Passenger:
    name: str
    age: int
    gender: str
    phone_no: str
    ticket_id: str
    date: ReservationDate
    seat: int = 0


@dataclass
class Bus:
    origin: str
    destination: str
    customers: list[Passenger] = field(default_factory=list)
    taken: set[int] = field(default_factory=set)
    capacity: int = SEAT_CAPACITY

    def is_seat_available(self, seat: int) -> bool:
        """True if the seat exists on this bus and nobody holds it."""
        return 1 <= seat <= self.capacity and seat not in self.taken

    def is_full(self) -> bool:
        return not any(self.is_seat_available(s) for s in range(1, self.capacity + 1))

    def book(self, passenger: Passenger, seat: int) -> Passenger:
        """Put the passenger in the seat and add them to the passenger list."""
        if not self.is_seat_available(seat):
            raise SeatUnavailableError(f"seat {seat} is not available")
        self.taken.add(seat)
        passenger.seat = seat
        self.customers.append(passenger)
        return passenger

    def cancel(self, ticket_id: str) -> bool:
        """Remove every booking with the ticket id; return whether any existed."""
        cancelled = [p for p in self.customers if p.ticket_id == ticket_id]
        if not cancelled:
            return False
        self.customers = [p for p in self.customers if p.ticket_id != ticket_id]
        for passenger in cancelled:
            if not any(p.seat == passenger.seat for p in self.customers):
                self.taken.discard(passenger.seat)
        return True

    def find_ticket(self, ticket_id: str) -> Passenger | None:
        return next((p for p in self.customers if p.ticket_id == ticket_id), None)

    def reset(self) -> None:
        self.customers.clear()
        self.taken.clear()


class Network:
    """The set of buses, one per route."""

    def __init__(self, buses: list[Bus] | None = None) -> None:
        self.buses: list[Bus] = list(buses or [])

    def get_bus(self, origin: str, destination: str) -> Bus:
        for bus in self.buses:
            if bus.origin == origin and bus.destination == destination:
                return bus
        raise RouteNotFoundError(origin, destination)

    def reset(self) -> None:
        for bus in self.buses:
            bus.reset()

    def __iter__(self) -> Iterator[Bus]:
        return iter(self.buses)


def default_network() -> Network:
    """The three routes out of Addis."""
    return Network(
        [
            Bus("addis", "bahirdar"),
            Bus("addis", "diredewa"),
            Bus("addis", "jima"),
        ]
    )