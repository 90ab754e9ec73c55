import io

from whooshrail.cli import Console, main
from whooshrail.models import BookingStatus
from whooshrail.storage import load_customers
from whooshrail.system import BookingSystem


def run_console(script, system=None, data_path=None):
    out = io.StringIO()
    console = Console(system or BookingSystem(), io.StringIO(script), out, data_path)
    console.run()
    return out.getvalue(), console


def system_with(name="Budi", phone="0000"):
    system = BookingSystem()
    customer = system.register(name, phone, "budi@example.com", "Jalan Satu")
    return system, customer


def login(customer):
    return f"2\n{customer.id}\n{customer.phone}\n"


def test_empty_input_shows_banner_and_stops():
    output, console = run_console("")
    assert "=== SISTEM PEMESANAN TIKET KERETA WHOOSH ===" in output
    assert console.customer is None


def test_register_then_exit():
    output, console = run_console("1\nBudi\n0000\nbudi@example.com\nJalan Satu\n0\n")
    customer = console.system.find_customer(1)
    assert customer.name == "Budi"
    assert "ID Customer: 1" in output
    assert output.rstrip().endswith("Terima kasih telah menggunakan layanan Whoosh!")


def test_invalid_choice():
    output, _ = run_console("9\nabc\n0\n")
    assert output.count("Pilihan tidak valid!") == 2


def test_login_with_wrong_phone():
    system, customer = system_with()
    output, console = run_console(f"2\n{customer.id}\n9999\n0\n", system)
    assert "ID Customer atau nomor telepon salah!" in output
    assert console.customer is None


def test_login_and_logout():
    system, customer = system_with()
    output, console = run_console(login(customer) + "7\n0\n", system)
    assert "Selamat datang, Budi!" in output
    assert "Anda telah logout." in output
    assert console.customer is None


def test_book_ticket():
    system, customer = system_with()
    output, _ = run_console(login(customer) + "3\n1\n5\ny\n0\n", system)
    assert "ID Pemesanan: 1001" in output
    assert system.find_schedule(1).seat(5).customer is customer
    assert [b.seat_number for b in system.bookings_for(customer.id)] == [5]


def test_book_declined():
    system, customer = system_with()
    output, _ = run_console(login(customer) + "3\n1\n5\nn\n0\n", system)
    assert "Pemesanan dibatalkan." in output
    assert system.bookings_for(customer.id) == []


def test_book_unknown_schedule():
    system, customer = system_with()
    output, _ = run_console(login(customer) + "3\n99\n0\n", system)
    assert "Jadwal tidak ditemukan!" in output
    assert len(system.bookings) == 0


def test_book_taken_seat():
    system, customer = system_with()
    other = system.register("Sari", "1111", "sari@example.com", "Jalan Dua")
    system.book(other, 2, 5)
    output, _ = run_console(login(customer) + "3\n2\n5\n0\n", system)
    assert "Kursi nomor 5 sudah terisi!" in output
    assert system.bookings_for(customer.id) == []


def test_cancel_booking():
    system, customer = system_with()
    booking = system.book(customer, 1, 4)
    output, _ = run_console(login(customer) + f"5\n{booking.booking_id}\nsakit\n0\n", system)
    assert f"Pemesanan ID {booking.booking_id} telah dibatalkan." in output
    assert booking.status is BookingStatus.CANCELLED
    assert system.cancellations[0].reason == "sakit"
    assert not system.find_schedule(1).seat(4).is_occupied


def test_cancel_other_customers_booking():
    system, customer = system_with()
    other = system.register("Sari", "1111", "sari@example.com", "Jalan Dua")
    booking = system.book(other, 1, 4)
    output, _ = run_console(login(customer) + f"5\n{booking.booking_id}\n0\n", system)
    assert "Anda tidak berhak membatalkan pemesanan ini!" in output
    assert booking.status is BookingStatus.CONFIRMED


def test_history_shows_entries():
    system, customer = system_with()
    system.book(customer, 3, 8)
    output, _ = run_console(login(customer) + "6\n0\n", system)
    assert "Status: Confirmed" in output
    assert "Belum ada riwayat pemesanan." not in output


def test_register_saves_customers(tmp_path):
    path = tmp_path / "customers.txt"
    run_console("1\nBudi\n0000\nbudi@example.com\nJalan Satu\n", data_path=path)
    saved = load_customers(path)
    assert [(c.id, c.name, c.phone) for c in saved] == [(1, "Budi", "0000")]


def test_main_loads_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "customers.txt"
    path.write_text("3\nSari\n1111\nsari@example.com\nJalan Dua\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n1111\n0\n"))
    assert main(["--data", str(path)]) == 0
    assert "Selamat datang, Sari!" in capsys.readouterr().out
    assert [c.name for c in load_customers(path)] == ["Sari"]