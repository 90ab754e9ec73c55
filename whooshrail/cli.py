"""Interactive console menu for booking train tickets."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from . import render
from .models import Customer
from .storage import DEFAULT_PATH, load_customers, save_customers
from .system import (
    AlreadyCancelled,
    BookingError,
    BookingNotFound,
    BookingStatus,
    BookingSystem,
    NotOwner,
    ScheduleNotFound,
    SoldOut,
)

_RULE = "=" * 47
_THANKS = "Terima kasih telah menggunakan layanan Whoosh!"
_LOGIN_FIRST = "Anda harus login terlebih dahulu!"


class _EndOfInput(Exception):
    pass


class Console:
    """Menu-driven dialogue over a pair of text streams."""

    def __init__(
        self,
        system: BookingSystem | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        data_path: str | Path | None = None,
    ) -> None:
        self.system = system if system is not None else BookingSystem()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.data_path = data_path
        self.customer: Customer | None = None

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _line(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        line = self._in.readline()
        if line == "":
            raise _EndOfInput
        return line.rstrip("\n")

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def _save(self) -> None:
        if self.data_path is not None:
            save_customers(self.system.customers, self.data_path)

    def run(self) -> None:
        """Show the menu until the user leaves or input runs out."""
        self._line("=== SISTEM PEMESANAN TIKET KERETA WHOOSH ===")
        self._line("Selamat datang di layanan pemesanan tiket Whoosh!")
        self._line("Menginisialisasi sistem...")
        self._line()
        self._line("Sistem berhasil diinisialisasi!")
        self._line(f"Tersedia {len(self.system.schedules)} jadwal kereta untuk hari ini.")
        self._line()
        try:
            while self._step():
                pass
        except _EndOfInput:
            pass

    def _step(self) -> bool:
        if self.customer is None:
            self._line("=== SELAMAT DATANG DI WHOOSH ===")
            self._line("1. Daftar Akun Baru")
            self._line("2. Login")
            self._line("3. Lihat Jadwal Kereta")
            self._line("4. Cari Jadwal")
            actions = {
                1: self._register,
                2: self._login,
                3: self._show_schedules,
                4: self._search,
            }
        else:
            self._line()
            self._line(f"=== MENU CUSTOMER - {self.customer.name} ===")
            self._line("1. Lihat Jadwal Kereta")
            self._line("2. Cari Jadwal")
            self._line("3. Pesan Tiket")
            self._line("4. Lihat Pemesanan Saya")
            self._line("5. Batalkan Pemesanan")
            self._line("6. Riwayat Pemesanan")
            self._line("7. Logout")
            actions = {
                1: self._show_schedules,
                2: self._search,
                3: self._book,
                4: self._my_bookings,
                5: self._cancel,
                6: self._history,
                7: self._logout,
            }
        self._line("0. Keluar")
        choice = self._ask_int("Pilihan: ")
        if choice == 0:
            self._line(_THANKS)
            self._save()
            return False
        action = actions.get(choice) if choice is not None else None
        if action is None:
            self._line("Pilihan tidak valid!")
        else:
            action()
        return True

    def _register(self) -> None:
        self._line()
        self._line("=== DAFTAR AKUN BARU ===")
        name = self._ask("Nama Lengkap: ")
        phone = self._ask("Nomor Telepon: ")
        email = self._ask("Email: ")
        address = self._ask("Alamat: ")
        customer = self.system.register(name, phone, email, address)
        self._line()
        self._line("=== PENDAFTARAN BERHASIL ===")
        self._line(f"ID Customer: {customer.id}")
        self._line(f"Nama: {customer.name}")
        self._line("Silakan login untuk melanjutkan.")
        self._save()

    def _login(self) -> None:
        self._line()
        self._line("=== LOGIN CUSTOMER ===")
        customer_id = self._ask_int("ID Customer: ")
        phone = self._ask("Nomor Telepon: ")
        try:
            if customer_id is None:
                raise BookingError("ID Customer atau nomor telepon salah!")
            customer = self.system.authenticate(customer_id, phone)
        except BookingError as error:
            self._line(str(error))
            return
        self.customer = customer
        self._line()
        self._line("=== LOGIN BERHASIL ===")
        self._line(f"Selamat datang, {customer.name}!")

    def _logout(self) -> None:
        self.customer = None
        self._line("Anda telah logout.")

    def _show_schedules(self) -> None:
        self._write(render.schedule_table(self.system.schedules))

    def _search(self) -> None:
        self._line()
        self._line("=== CARI JADWAL KERETA ===")
        departure = self._ask("Stasiun Keberangkatan: ")
        arrival = self._ask("Stasiun Tujuan: ")
        found = self.system.search(departure, arrival)
        self._write(render.search_table(departure, arrival, found))

    def _book(self) -> None:
        customer = self.customer
        if customer is None:
            self._line(_LOGIN_FIRST)
            return
        self._line()
        self._line("=== PESAN TIKET KERETA ===")
        self._show_schedules()
        self._line()
        schedule_id = self._ask_int("Masukkan ID Jadwal yang ingin dipesan: ")
        schedule = self.system.find_schedule(schedule_id) if schedule_id is not None else None
        if schedule is None:
            self._line(str(ScheduleNotFound(schedule_id or 0)))
            return
        if schedule.available_seats <= 0:
            self._line(str(SoldOut(schedule.schedule_id)))
            return
        self._write(render.schedule_details(schedule))
        self._write(render.seat_map(schedule))
        self._line()
        seat_number = self._ask_int(f"Pilih nomor kursi (1-{schedule.total_seats}): ")
        try:
            self.system.check_seat(schedule.schedule_id, seat_number if seat_number is not None else 0)
        except BookingError as error:
            self._line(str(error))
            return
        assert seat_number is not None
        self._write(render.confirmation(customer, schedule, seat_number))
        self._line()
        answer = self._ask("Konfirmasi pemesanan? (y/n): ").strip()
        if answer[:1] not in ("y", "Y"):
            self._line("Pemesanan dibatalkan.")
            return
        try:
            booking = self.system.book(customer, schedule.schedule_id, seat_number)
        except BookingError as error:
            self._line(str(error))
            return
        self._line()
        self._line("=== PEMESANAN BERHASIL ===")
        self._line(f"ID Pemesanan: {booking.booking_id}")
        self._line("Tiket telah berhasil dipesan!")
        self._line("Silakan datang 15 menit sebelum keberangkatan.")
        self._line("Terima kasih telah memilih Whoosh!")

    def _my_bookings(self) -> None:
        customer = self.customer
        if customer is None:
            self._line(_LOGIN_FIRST)
            return
        self._line()
        self._line("=== PEMESANAN SAYA ===")
        self._line(f"Customer: {customer.name} (ID: {customer.id})")
        self._line(_RULE)
        self._write(render.booking_details(self.system.bookings_for(customer.id)))

    def _cancel(self) -> None:
        customer = self.customer
        if customer is None:
            self._line(_LOGIN_FIRST)
            return
        self._line()
        self._line("=== BATALKAN PEMESANAN ===")
        self._my_bookings()
        self._line()
        booking_id = self._ask_int("Masukkan ID Pemesanan yang ingin dibatalkan: ")
        booking = self.system.bookings.find(booking_id) if booking_id is not None else None
        if booking is None:
            self._line(str(BookingNotFound(booking_id or 0)))
            return
        if booking.customer_id != customer.id:
            self._line(str(NotOwner(booking.booking_id)))
            return
        if booking.status is BookingStatus.CANCELLED:
            self._line(str(AlreadyCancelled(booking.booking_id)))
            return
        reason = self._ask("Alasan pembatalan: ")
        try:
            self.system.cancel(customer, booking.booking_id, reason)
        except BookingError as error:
            self._line(str(error))
            return
        self._line()
        self._line("=== PEMBATALAN BERHASIL ===")
        self._line(f"Pemesanan ID {booking.booking_id} telah dibatalkan.")
        self._line("Permintaan refund akan diproses dalam 3-5 hari kerja.")

    def _history(self) -> None:
        customer = self.customer
        if customer is None:
            self._line(_LOGIN_FIRST)
            return
        self._line()
        self._line("=== RIWAYAT PEMESANAN SAYA ===")
        self._line(f"Customer: {customer.name}")
        self._line(_RULE)
        self._write(render.history_details(self.system.history_for(customer.id)))


def main(argv: list[str] | None = None) -> int:
    """Load saved customers, run the console and save them again on exit."""
    parser = argparse.ArgumentParser(description="Whoosh train ticket booking.")
    parser.add_argument(
        "--data",
        default=DEFAULT_PATH,
        help="file that holds registered customers (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    system = BookingSystem(customers=load_customers(args.data))
    Console(system, sys.stdin, sys.stdout, args.data).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())