from whooshrail.render import (
    booking_details,
    confirmation,
    history_details,
    schedule_details,
    schedule_table,
    search_table,
    seat_map,
)
from whooshrail.system import BookingSystem, default_schedules


def _system_with_customer():
    system = BookingSystem()
    customer = system.register("Budi", "0000", "budi@example.com", "Jalan Satu")
    return system, customer


def test_schedule_table_lists_every_schedule():
    schedules = default_schedules()
    text = schedule_table(schedules)
    for schedule in schedules:
        assert f"{schedule.departure_time:<8}" in text
    assert "Keterangan: Semua jadwal untuk tanggal 2025-06-15" in text
    assert "Rp150000" in text


def test_schedule_table_shows_free_seat_count():
    system, customer = _system_with_customer()
    system.book(customer, 1, 1)
    text = schedule_table(system.schedules)
    row = next(line for line in text.splitlines() if line.startswith("1 "))
    assert row.split()[-1] == str(system.find_schedule(1).available_seats)


def test_search_table_without_results():
    text = search_table("Bandung", "Jakarta", [])
    assert "Rute: Bandung -> Jakarta" in text
    assert text.endswith("Tidak ada jadwal untuk rute tersebut.\n")


def test_search_table_with_results():
    system = BookingSystem()
    found = system.search("halim", "padalarang")
    text = search_table("halim", "padalarang", found)
    assert "Tidak ada jadwal" not in text
    for schedule in found:
        assert schedule.departure_time in text
    assert "15:00" not in text


def test_seat_map_free_schedule():
    schedule = default_schedules()[0]
    text = seat_map(schedule)
    assert "[X]" not in text.split("\n\n", 1)[1]
    for number in range(1, schedule.total_seats + 1):
        assert f"[{number:02d}]" in text


def test_seat_map_marks_occupied_seat():
    system, customer = _system_with_customer()
    system.book(customer, 2, 3)
    text = seat_map(system.find_schedule(2))
    body = text.split("\n\n", 1)[1]
    assert "[03]" not in body
    assert body.count("[X] ") == 1


def test_schedule_details_counts_seats():
    system, customer = _system_with_customer()
    schedule = system.find_schedule(4)
    assert "Kursi Tersedia: 50" in schedule_details(schedule)
    system.book(customer, 4, 10)
    text = schedule_details(schedule)
    assert f"Kursi Tersedia: {schedule.available_seats}" in text
    assert f"Rute: {schedule.route}" in text


def test_confirmation_holds_customer_and_seat():
    system, customer = _system_with_customer()
    text = confirmation(customer, system.find_schedule(1), 7)
    assert "Nama: Budi" in text
    assert "Kursi: 7" in text
    assert "Harga: Rp 150000" in text


def test_booking_details_order_and_empty():
    system, customer = _system_with_customer()
    assert booking_details([]) == ""
    system.book(customer, 1, 1)
    system.book(customer, 3, 2)
    text = booking_details(system.bookings_for(customer.id))
    assert text.index("ID Pemesanan: 1001") < text.index("ID Pemesanan: 1002")
    assert text.count("Status: Confirmed") == 2


def test_history_details():
    system, customer = _system_with_customer()
    assert history_details([]) == "Belum ada riwayat pemesanan.\n"
    system.book(customer, 1, 1)
    system.cancel(customer, 1001, "sakit")
    text = history_details(system.history_for(customer.id))
    assert text.index("Status: Cancelled") < text.index("Status: Confirmed")