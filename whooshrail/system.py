"""Booking logic: customers, schedule search, seat reservation and cancellation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .booking_tree import BookingTree
from .models import (
    Booking,
    BookingStatus,
    CancellationRequest,
    Customer,
    HistoryEntry,
    Schedule,
    Seat,
    current_date,
)

FIRST_BOOKING_ID = 1001
SERVICE_DATE = "2025-06-15"
SEATS_PER_TRAIN = 50
TICKET_PRICE = 150000.0


class BookingError(Exception):
    """Base class for every refused booking operation."""


class LoginError(BookingError):
    """The customer id and phone number do not match."""

    def __init__(self) -> None:
        super().__init__("ID Customer atau nomor telepon salah!")


class ScheduleNotFound(BookingError):
    """No schedule has the requested id."""

    def __init__(self, schedule_id: int) -> None:
        super().__init__("Jadwal tidak ditemukan!")
        self.schedule_id = schedule_id


class SoldOut(BookingError):
    """Every seat on the schedule is taken."""

    def __init__(self, schedule_id: int) -> None:
        super().__init__("Maaf, tiket sudah habis untuk jadwal ini!")
        self.schedule_id = schedule_id


class InvalidSeat(BookingError):
    """The seat number is outside the schedule's range."""

    def __init__(self, seat_number: int) -> None:
        super().__init__("Nomor kursi tidak valid!")
        self.seat_number = seat_number


class SeatTaken(BookingError):
    """The seat is already occupied."""

    def __init__(self, seat_number: int) -> None:
        super().__init__(f"Kursi nomor {seat_number} sudah terisi!")
        self.seat_number = seat_number


class BookingNotFound(BookingError):
    """No booking has the requested id."""

    def __init__(self, booking_id: int) -> None:
        super().__init__("Pemesanan tidak ditemukan!")
        self.booking_id = booking_id


class NotOwner(BookingError):
    """The booking belongs to another customer."""

    def __init__(self, booking_id: int) -> None:
        super().__init__("Anda tidak berhak membatalkan pemesanan ini!")
        self.booking_id = booking_id


class AlreadyCancelled(BookingError):
    """The booking was cancelled before."""

    def __init__(self, booking_id: int) -> None:
        super().__init__("Pemesanan sudah dibatalkan sebelumnya!")
        self.booking_id = booking_id


def default_schedules() -> list[Schedule]:
    """Return the fixed timetable, most recently added schedule first."""
    timetable = [
        (1, "Halim", "Padalarang", "06:00", "07:30"),
        (2, "Padalarang", "Halim", "08:00", "09:30"),
        (3, "Halim", "Padalarang", "10:00", "11:30"),
        (4, "Padalarang", "Halim", "15:00", "16:30"),
    ]
    schedules = [
        Schedule(
            schedule_id=schedule_id,
            departure=departure,
            arrival=arrival,
            departure_time=leaves,
            arrival_time=arrives,
            date=SERVICE_DATE,
            price=TICKET_PRICE,
            total_seats=SEATS_PER_TRAIN,
        )
        for schedule_id, departure, arrival, leaves, arrives in timetable
    ]
    schedules.reverse()
    return schedules


class BookingSystem:
    """Holds schedules, customers and bookings and applies the booking rules."""

    def __init__(
        self,
        schedules: Iterable[Schedule] | None = None,
        customers: Iterable[Customer] | None = None,
    ) -> None:
        self.schedules: list[Schedule] = (
            list(schedules) if schedules is not None else default_schedules()
        )
        self.customers: list[Customer] = list(customers) if customers is not None else []
        self.bookings = BookingTree()
        self.history: list[HistoryEntry] = []
        self.cancellations: deque[CancellationRequest] = deque()
        self.next_booking_id = FIRST_BOOKING_ID
        self.next_customer_id = max((c.id for c in self.customers), default=0) + 1

    def register(self, name: str, phone: str, email: str, address: str) -> Customer:
        """Create a customer with the next free id; newest customers come first."""
        customer = Customer(self.next_customer_id, name, phone, email, address)
        self.next_customer_id += 1
        self.customers.insert(0, customer)
        return customer

    def find_customer(self, customer_id: int) -> Customer | None:
        """Return the customer with this id, or None."""
        return next((c for c in self.customers if c.id == customer_id), None)

    def authenticate(self, customer_id: int, phone: str) -> Customer:
        """Return the customer whose id and phone number both match."""
        customer = self.find_customer(customer_id)
        if customer is None or customer.phone != phone:
            raise LoginError()
        return customer

    def find_schedule(self, schedule_id: int) -> Schedule | None:
        """Return the schedule with this id, or None."""
        return next((s for s in self.schedules if s.schedule_id == schedule_id), None)

    def search(self, departure: str, arrival: str) -> list[Schedule]:
        """Return schedules on a route, comparing station names without case."""
        wanted = (departure.lower(), arrival.lower())
        return [
            schedule
            for schedule in self.schedules
            if (schedule.departure.lower(), schedule.arrival.lower()) == wanted
        ]

    def _checked(self, schedule_id: int, seat_number: int) -> tuple[Schedule, Seat]:
        schedule = self.find_schedule(schedule_id)
        if schedule is None:
            raise ScheduleNotFound(schedule_id)
        if schedule.available_seats <= 0:
            raise SoldOut(schedule_id)
        if not 1 <= seat_number <= schedule.total_seats:
            raise InvalidSeat(seat_number)
        seat = schedule.seat(seat_number)
        if seat is None or seat.is_occupied:
            raise SeatTaken(seat_number)
        return schedule, seat

    def check_seat(self, schedule_id: int, seat_number: int) -> Seat:
        """Return the seat if it can be booked; raise the reason otherwise."""
        return self._checked(schedule_id, seat_number)[1]

    def book(self, customer: Customer, schedule_id: int, seat_number: int) -> Booking:
        """Reserve a seat for a customer and record the booking."""
        schedule, seat = self._checked(schedule_id, seat_number)
        seat.customer = customer
        booking_id = self.next_booking_id
        self._record(booking_id, customer, schedule, seat_number, BookingStatus.CONFIRMED)
        booking = Booking(
            booking_id=booking_id,
            customer_id=customer.id,
            schedule=schedule,
            customer=customer,
            seat_number=seat_number,
            booking_date=current_date(),
            status=BookingStatus.CONFIRMED,
        )
        self.bookings.insert(booking)
        self.next_booking_id += 1
        return booking

    def cancel(self, customer: Customer, booking_id: int, reason: str) -> CancellationRequest:
        """Cancel a customer's booking, free its seat and queue a refund request."""
        booking = self.bookings.find(booking_id)
        if booking is None:
            raise BookingNotFound(booking_id)
        if booking.customer_id != customer.id:
            raise NotOwner(booking_id)
        if booking.status is BookingStatus.CANCELLED:
            raise AlreadyCancelled(booking_id)
        request = CancellationRequest(booking_id, customer.name, reason, current_date())
        self.cancellations.append(request)
        booking.status = BookingStatus.CANCELLED
        seat = booking.schedule.seat(booking.seat_number)
        if seat is not None:
            seat.customer = None
        self._record(
            booking_id, customer, booking.schedule, booking.seat_number, BookingStatus.CANCELLED
        )
        return request

    def bookings_for(self, customer_id: int) -> list[Booking]:
        """Return a customer's bookings in id order."""
        return list(self.bookings.for_customer(customer_id))

    def history_for(self, customer_id: int) -> list[HistoryEntry]:
        """Return a customer's history entries, newest first."""
        return [entry for entry in reversed(self.history) if entry.customer_id == customer_id]

    def _record(
        self,
        booking_id: int,
        customer: Customer,
        schedule: Schedule,
        seat_number: int,
        status: BookingStatus,
    ) -> None:
        self.history.append(
            HistoryEntry(
                booking_id=booking_id,
                customer_id=customer.id,
                schedule_id=schedule.schedule_id,
                seat_number=seat_number,
                customer_name=customer.name,
                route=schedule.route,
                booking_date=current_date(),
                status=status,
                total_price=schedule.price,
            )
        )