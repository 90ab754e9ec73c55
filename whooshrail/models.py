"""Core records of the booking system: customers, schedules, seats and bookings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class BookingStatus(str, Enum):
    """State of a booking or of a history entry."""

    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

    def __str__(self) -> str:
        return self.value


@dataclass
class Customer:
    """A registered customer."""

    id: int
    name: str
    phone: str
    email: str = ""
    address: str = ""


@dataclass
class Seat:
    """A numbered seat, held by a customer when occupied."""

    number: int
    customer: Customer | None = None

    @property
    def is_occupied(self) -> bool:
        """True while a customer holds the seat."""
        return self.customer is not None


def create_seats(total: int) -> list[Seat]:
    """Return free seats numbered from 1 to ``total``."""
    if total < 0:
        raise ValueError(f"seat count must not be negative: {total}")
    return [Seat(number) for number in range(1, total + 1)]


@dataclass
class Schedule:
    """A train departure with its own set of seats."""

    schedule_id: int
    departure: str
    arrival: str
    departure_time: str
    arrival_time: str
    date: str
    price: float
    total_seats: int
    seats: list[Seat] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.seats:
            self.seats = create_seats(self.total_seats)

    @property
    def available_seats(self) -> int:
        """Number of seats not yet taken."""
        return sum(1 for seat in self.seats if not seat.is_occupied)

    @property
    def route(self) -> str:
        """The route as ``departure -> arrival``."""
        return f"{self.departure} -> {self.arrival}"

    def seat(self, number: int) -> Seat | None:
        """Return the seat with this number, or None if there is none."""
        return next((seat for seat in self.seats if seat.number == number), None)


@dataclass
class HistoryEntry:
    """One event in a customer's booking history."""

    booking_id: int
    customer_id: int
    schedule_id: int
    seat_number: int
    customer_name: str
    route: str
    booking_date: str
    status: BookingStatus
    total_price: float


@dataclass
class CancellationRequest:
    """A queued request to refund a cancelled booking."""

    booking_id: int
    customer_name: str
    reason: str
    request_date: str


@dataclass
class Booking:
    """A seat reserved by a customer on a schedule."""

    booking_id: int
    customer_id: int
    schedule: Schedule
    customer: Customer
    seat_number: int
    booking_date: str
    status: BookingStatus = BookingStatus.CONFIRMED


def current_date(now: datetime | None = None) -> str:
    """Format a date as ``DD/MM/YYYY``; the current local date by default."""
    moment = now if now is not None else datetime.now()
    return f"{moment.day:02d}/{moment.month:02d}/{moment.year:04d}"


def current_time(now: datetime | None = None) -> str:
    """Format a time as ``HH:MM``; the current local time by default."""
    moment = now if now is not None else datetime.now()
    return f"{moment.hour:02d}:{moment.minute:02d}"