# shegerbus

A small console application for reserving seats on intercity buses leaving
Addis. It keeps one bus per route, each with 50 seats, and stores the
reservations for each route as plain-text files under a `routes/` directory,
so bookings survive between runs.

## Installation

```
pip install .
```

## Running

```
shegerbus
shegerbus --root data
```

`--root` names the folder that holds (or will hold) the `routes/` directory;
it defaults to the current directory. Saved bookings are loaded from there at
start-up, and `ticket.txt` and `booking_report.txt` are written there too.

The main menu offers:

1. **Book a Seat**: enter your name, phone number, gender, age and the
   reservation date (day, month and year as three numbers), then the origin
   and destination (for example `addis bahirdar`), then choose a free seat
   from 1 to 50. The booking is saved to the route's file.
2. **Cancel Reservation**: give the route and your ticket ID. You are asked
   again until a ticket is found, or you enter `-1` to go back.
3. **View Reservations**: give the route and your ticket ID; your ticket is
   written to `ticket.txt`. As with cancelling, `-1` goes back.
4. **View dashboard**: the admin area, protected by the password held in
   `shegerbus.cli.ADMIN_PASSWORD`. After logging in you pick one action:
   list every booking, search by ticket ID or seat number, export a report to
   `booking_report.txt`, or reset all bookings held in memory. You then
   return to the main menu.
5. **Exit**

An unknown route prints `No bus found in this route` and returns to the
main menu. The session also ends when input runs out.

Known routes are `addis` → `bahirdar`, `addis` → `diredewa` and
`addis` → `jima`, stored in `routes/addis_bahir.txt`,
`routes/addis_dire.txt` and `routes/addis_jima.txt`.

### Input rules

- Name: 2 to 50 characters, ASCII letters and spaces only.
- Phone: 9 digits starting with 9 (entered after the `+251` prefix).
- Gender: `m` or `f`, either case.
- Age: 11 to 89.

Ticket IDs are built from the current Unix time followed by a random number
from 0 to 9999 seeded from that time.

## Using it as a library

```python
from shegerbus.models import Passenger, ReservationDate, default_network
from shegerbus.storage import load_routes, save_route
from shegerbus.reports import format_bookings, search_by_ticket

network = default_network()
load_routes(network, "data")

bus = network.get_bus("addis", "jima")
print(bus.is_full())
print(format_bookings(network))
```

- `shegerbus.validation`: `age_validate`, `name_validate`,
  `phone_no_validate`, `gender_validate` and `generate_ticket_id`.
- `shegerbus.models`: `Passenger`, `ReservationDate`, `Bus`, `Network` and
  `default_network()`. `Network.get_bus` raises `RouteNotFoundError` for an
  unknown route; `Bus.book` raises `SeatUnavailableError` when the seat is
  taken or outside 1–50. `Bus.cancel`, `Bus.find_ticket`, `Bus.reset` and
  `Network.reset` manage bookings.
- `shegerbus.storage`: `save_route(bus, root)` rewrites one route's file,
  `load_routes(network, root)` reads all of them and returns how many
  bookings were loaded; `format_record` and `parse_records` handle the
  one-line-per-passenger format.
- `shegerbus.reports`: `format_bookings`, `search_by_ticket`,
  `search_by_seat`, `format_report`, `export_report`, `format_ticket` and
  `write_ticket`.
- `shegerbus.cli`: `ReservationApp`, which takes a network, a root folder and
  optional input and output callables, and `main`.

## Limitations

- Only the three built-in routes can be stored; routes are not configurable.
- Resetting bookings from the dashboard clears them in memory only; the
  route files keep their contents until a route is next saved.

## Tests

```
pip install .[test]
pytest
```