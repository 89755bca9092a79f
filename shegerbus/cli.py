"""Interactive menu for booking, cancelling and administering reservations."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path
from typing import Callable

from . import reports
from .models import Network, Passenger, ReservationDate, RouteNotFoundError, default_network
from .storage import load_routes, save_route
from .validation import (
    age_validate,
    gender_validate,
    generate_ticket_id,
    name_validate,
    phone_no_validate,
)

ADMIN_PASSWORD = "password"

_MAIN_MENU = """
=== Bus Ticket Reservation System ===
1. Book a Seat
2. Cancel Reservation
3. View Reservations - To get a ticket
4. View dashboard(admin use only)
5. Exit"""

_ADMIN_MENU = """
========== ADMIN DASHBOARD ==========
1. View All Bookings
2. Search Booking by Ticket ID / Seat No
3. Export Bookings to Report File
4. Reset All Bookings
5. Logout
====================================="""


class ReservationApp:
    """A menu-driven session over a route network stored under a root folder."""

    def __init__(
        self,
        network: Network,
        root: str | Path = ".",
        input_func: Callable[[str], str] = input,
        output: Callable[[str], object] = print,
    ) -> None:
        self.network = network
        self.root = Path(root)
        self._input = input_func
        self._output = output
        self._pending: deque[str] = deque()

    # -- input helpers -------------------------------------------------

    def _say(self, text: str) -> None:
        self._output(text)

    def _token(self, prompt: str) -> str:
        while not self._pending:
            self._pending.extend(self._input(prompt).split())
        return self._pending.popleft()

    def _line(self, prompt: str) -> str:
        self._pending.clear()
        return self._input(prompt).strip()

    def _int(self, prompt: str) -> int | None:
        try:
            return int(self._token(prompt))
        except ValueError:
            self._pending.clear()
            return None

    def _route(self):
        prompt = "Enter the origin and destination of the buses respectively: "
        origin = self._token(prompt)
        destination = self._token(prompt)
        return self.network.get_bus(origin, destination)

    # -- menu ------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user chooses to exit or input ends."""
        actions = {
            1: self.book_seat,
            2: self.cancel_reservation,
            3: self.view_reservation,
            4: self.admin_dashboard,
        }
        try:
            while True:
                self._say(_MAIN_MENU)
                choice = self._int("Enter choice: ")
                if choice == 5:
                    self._say("Exiting...")
                    return
                action = actions.get(choice)
                if action is None:
                    self._say("Invalid choice.")
                    continue
                try:
                    action()
                except RouteNotFoundError as exc:
                    self._say(str(exc))
        except EOFError:
            return

    def _create_passenger(self) -> Passenger:
        while True:
            name = self._line("Enter your name: ")
            if name_validate(name):
                break
            self._say("Invalid name! Please use only letters and spaces (2-50 characters).")
        while True:
            phone = self._token("Enter your phone number (9 digits starting with 9): +251")
            if phone_no_validate(phone):
                break
            self._say("Invalid phone number! Please enter a 9-digit number starting with 9.")
        while True:
            gender = self._token("Enter Gender (m or f): ")
            if gender_validate(gender):
                break
            self._say("Invalid gender! Please enter 'm' or 'f'.")
        while True:
            age = self._int("Enter your age (11-89): ")
            if age is not None and age_validate(age):
                break
            self._say("Invalid age! Please enter an age between 11 and 89.")
        while True:
            prompt = "Enter the date of reservation (day month year): "
            parts = [self._int(prompt) for _ in range(3)]
            if None not in parts:
                break
            self._say("Invalid date! Please enter three numbers.")
        day, month, year = parts
        return Passenger(
            name=name,
            age=age,
            gender=gender,
            phone_no=phone,
            ticket_id=generate_ticket_id(),
            date=ReservationDate(day, month, year),
        )

    def book_seat(self) -> Passenger | None:
        """Collect passenger details and book a seat; return the booking."""
        passenger = self._create_passenger()
        bus = self._route()
        if bus.is_full():
            self._say("Sorry there are no available seats for this bus")
            return None
        while True:
            seat = self._int(f"Choose Seat from 1 - {bus.capacity}:")
            if seat is not None and bus.is_seat_available(seat):
                break
        bus.book(passenger, seat)
        save_route(bus, self.root)
        self._say("Seat saved successfully")
        return passenger

    def cancel_reservation(self) -> bool:
        """Cancel by ticket id, retrying until one is found or the user exits."""
        while True:
            check = self._int("Do you want to cancel reservation(continue 1) or exit(-1): ")
            if check == -1:
                return False
            bus = self._route()
            ticket_id = self._token("Enter ticket_id: ")
            found = bus.cancel(ticket_id)
            save_route(bus, self.root)
            if found:
                self._say("Cancelled successfully")
                return True
            self._say("Not Found please try again ")

    def view_reservation(self) -> Passenger | None:
        """Write a ticket file for a booking, retrying until one is found."""
        while True:
            check = self._int("Do you want to see reservation(continue 1) or exit(-1): ")
            if check == -1:
                return None
            bus = self._route()
            ticket_id = self._token("Enter ticket_id: ")
            passenger = bus.find_ticket(ticket_id)
            if passenger is not None:
                reports.write_ticket(passenger, self.root / reports.TICKET_FILE)
                self._say(f"Ticket generated successfully on {reports.TICKET_FILE}")
                return passenger
            self._say("Ticket Not found Try again")

    def admin_dashboard(self) -> None:
        """Ask for the admin password, then carry out one dashboard action."""
        entered = self._token("Enter admin password: ")
        if entered != ADMIN_PASSWORD:
            self._say("Invalid password. Access denied.")
            return
        self._say(_ADMIN_MENU)
        choice = self._int("Enter your choice: ")
        if choice == 1:
            self._say(reports.format_bookings(self.network))
            self._line("\nPress Enter to continue...")
        elif choice == 2:
            self._search()
        elif choice == 3:
            path = self.root / reports.REPORT_FILE
            try:
                reports.export_report(self.network, path)
            except OSError:
                self._say(" Failed to create report file.")
                return
            self._say(f"Report exported to {reports.REPORT_FILE}")
        elif choice == 4:
            confirm = self._token("\nAre you sure you want to delete ALL bookings? (y/n): ")
            if confirm[:1] in ("y", "Y"):
                self.network.reset()
                self._say("All bookings have been reset.")
            else:
                self._say("Operation cancelled.")
        elif choice == 5:
            self._say("\n Logging out...")
        else:
            self._say(" Invalid option. Try again.")

    def _search(self) -> None:
        self._say("\nSearch Booking")
        kind = self._token("Search by (T)icket ID or (S)eat No? ")[:1].lower()
        if kind == "t":
            ticket_id = self._token("Enter Ticket ID: ")
            found = reports.search_by_ticket(self.network, ticket_id)
            for p in found:
                self._say(f" Booking Found: {p.name} (Seat {p.seat})")
        elif kind == "s":
            seat = self._int("Enter Seat Number: ")
            found = [] if seat is None else reports.search_by_seat(self.network, seat)
            for p in found:
                self._say(f" Booking Found: {p.name} (Ticket ID: {p.ticket_id})")
        else:
            self._say("Invalid option.")
            return
        if not found:
            self._say(" Booking not found.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bus ticket reservation system.")
    parser.add_argument("--root", default=".", help="folder that holds the routes directory")
    args = parser.parse_args(argv)
    network = default_network()
    load_routes(network, args.root)
    ReservationApp(network, args.root).run()
    return 0