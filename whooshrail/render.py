"""Text layout of timetables, seat maps, bookings and history for the console."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Booking, Customer, HistoryEntry, Schedule
from .system import SERVICE_DATE

_RULE = "-" * 47
_WIDE_RULE = "-" * 89
_SEARCH_RULE = "-" * 63


def _price(value: float) -> str:
    return f"Rp {value:.0f}"


def schedule_table(schedules: Iterable[Schedule]) -> str:
    """Return the full timetable with seats still free on each train."""
    lines = [
        "",
        "=== JADWAL KERETA WHOOSH HARI INI ===",
        f"{'ID':<4} {'Keberangkatan':<15} {'Tujuan':<15} {'Depart':<8} {'Arrive':<8} "
        f"{'Tanggal':<12} {'Harga':<10} {'Tersedia':<8}",
        _WIDE_RULE,
    ]
    lines.extend(
        f"{s.schedule_id:<4d} {s.departure:<15} {s.arrival:<15} {s.departure_time:<8} "
        f"{s.arrival_time:<8} {s.date:<12} Rp{s.price:<8.0f} {s.available_seats:<8d}"
        for s in schedules
    )
    lines.append("")
    lines.append(f"Keterangan: Semua jadwal untuk tanggal {SERVICE_DATE}")
    return "\n".join(lines) + "\n"


def search_table(departure: str, arrival: str, schedules: Iterable[Schedule]) -> str:
    """Return the schedules found for a route, or a note that there are none."""
    lines = [
        "",
        "=== HASIL PENCARIAN ===",
        f"Rute: {departure} -> {arrival}",
        f"{'ID':<4} {'Depart':<8} {'Arrive':<8} {'Tanggal':<12} {'Harga':<10} {'Tersedia':<8}",
        _SEARCH_RULE,
    ]
    rows = [
        f"{s.schedule_id:<4d} {s.departure_time:<8} {s.arrival_time:<8} {s.date:<12} "
        f"Rp{s.price:<8.0f} {s.available_seats:<8d}"
        for s in schedules
    ]
    lines.extend(rows or ["Tidak ada jadwal untuk rute tersebut."])
    return "\n".join(lines) + "\n"


def seat_map(schedule: Schedule) -> str:
    """Return the seats in number order, eight to a row with an aisle after four."""
    parts = ["\n=== PETA KURSI ===\n", "Keterangan: [O] = Kosong, [X] = Terisi\n\n"]
    seats = sorted(
        (seat for seat in schedule.seats if 1 <= seat.number <= schedule.total_seats),
        key=lambda seat: seat.number,
    )
    for count, seat in enumerate(seats, start=1):
        parts.append("[X] " if seat.is_occupied else f"[{seat.number:02d}] ")
        if count % 4 == 0:
            parts.append("    ")
        if count % 8 == 0:
            parts.append("\n")
    if len(seats) % 8 != 0:
        parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def schedule_details(schedule: Schedule) -> str:
    """Return the route, time, price and free seats of one schedule."""
    return (
        "\n=== DETAIL JADWAL ===\n"
        f"Rute: {schedule.route}\n"
        f"Tanggal: {schedule.date}\n"
        f"Waktu: {schedule.departure_time} - {schedule.arrival_time}\n"
        f"Harga: {_price(schedule.price)}\n"
        f"Kursi Tersedia: {schedule.available_seats}\n"
    )


def confirmation(customer: Customer, schedule: Schedule, seat_number: int) -> str:
    """Return the summary shown before a booking is confirmed."""
    return (
        "\n=== KONFIRMASI PEMESANAN ===\n"
        f"Nama: {customer.name}\n"
        f"Telepon: {customer.phone}\n"
        f"Rute: {schedule.route}\n"
        f"Tanggal: {schedule.date}\n"
        f"Waktu: {schedule.departure_time} - {schedule.arrival_time}\n"
        f"Kursi: {seat_number}\n"
        f"Harga: {_price(schedule.price)}\n"
    )


def booking_details(bookings: Iterable[Booking]) -> str:
    """Return one block per booking, in the order given."""
    return "".join(
        f"ID Pemesanan: {b.booking_id}\n"
        f"Rute: {b.schedule.route}\n"
        f"Tanggal: {b.schedule.date}\n"
        f"Waktu: {b.schedule.departure_time} - {b.schedule.arrival_time}\n"
        f"Kursi: {b.seat_number}\n"
        f"Status: {b.status}\n"
        f"Harga: {_price(b.schedule.price)}\n"
        f"Tanggal Pesan: {b.booking_date}\n"
        f"{_RULE}\n"
        for b in bookings
    )


def history_details(entries: Iterable[HistoryEntry]) -> str:
    """Return one block per history entry, or a note that there is none."""
    text = "".join(
        f"ID Pemesanan: {e.booking_id}\n"
        f"Rute: {e.route}\n"
        f"Kursi: {e.seat_number}\n"
        f"Tanggal Pesan: {e.booking_date}\n"
        f"Status: {e.status}\n"
        f"Total: {_price(e.total_price)}\n"
        f"{_RULE}\n"
        for e in entries
    )
    return text or "Belum ada riwayat pemesanan.\n"