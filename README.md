# whooshrail

A console ticket-booking system for a high-speed rail line. It comes with a
fixed timetable of four departures on 2025-06-15 between Halim and
Padalarang, 50 seats per train at Rp 150000 each, and lets customers:

- register an account and log in with their customer ID and phone number
- list all schedules or search them by departure and arrival station
  (case-insensitive)
- view a seat map and book a free seat
- list their bookings, cancel one with a reason, and browse their booking
  history (newest first)

The menus and messages are in Indonesian.

## Installation

```
pip install .
```

## Running

```
whooshrail
whooshrail --data customers.txt
```

`--data` names the file that holds registered customers; it defaults to
`pelanggan.txt` in the current directory. A missing file simply means no
customers yet.

The program shows a numbered menu. Before logging in you can register, log
in, view the timetable or search it; once logged in you can also book, view
and cancel bookings, see your history, and log out. Choose `0` to leave.
The customer list is written to the data file after each registration and
again when you choose `0`. The program also ends quietly when input runs out.

## Using it as a library

```python
from whooshrail.system import BookingSystem, default_schedules

system = BookingSystem(default_schedules(), [])
customer = system.register("Budi", "000", "budi@example.com", "Jl. Contoh 1")
booking = system.book(customer, schedule_id=1, seat_number=12)
request = system.cancel(customer, booking.booking_id, "change of plans")
```

`BookingSystem` also offers `authenticate`, `find_customer`,
`find_schedule`, `search`, `check_seat`, `bookings_for` and `history_for`.
Bookings are kept in a `whooshrail.booking_tree.BookingTree`, ordered by
booking id; booking ids start at 1001 and customer ids follow the highest id
already known.

Failures raise subclasses of `whooshrail.system.BookingError`:
`LoginError`, `ScheduleNotFound`, `SoldOut`, `InvalidSeat`, `SeatTaken`,
`BookingNotFound`, `NotOwner` and `AlreadyCancelled`.

The records themselves (`Customer`, `Seat`, `Schedule`, `Booking`,
`HistoryEntry`, `CancellationRequest`, `BookingStatus`) live in
`whooshrail.models`.

The text layouts used by the console are in `whooshrail.render`:
`schedule_table`, `search_table`, `seat_map`, `schedule_details`,
`confirmation`, `booking_details` and `history_details`.

`whooshrail.storage` reads and writes the customer file, five lines per
customer (id, name, phone, email, address): `parse_customers`,
`format_customers`, `load_customers` and `save_customers`.

## What it does not do

Only customer accounts are stored. Bookings, seat assignments, booking
history and cancellation requests live in memory and are lost when the
program ends. Cancellation requests are queued but nothing processes them,
and the timetable is fixed; there is no way to add or change schedules from
the console.

## Tests

```
pip install .[test]
pytest
```