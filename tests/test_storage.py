from whooshrail.models import Customer
from whooshrail.storage import (
    format_customers,
    load_customers,
    parse_customers,
    save_customers,
)

SAMPLE = [
    Customer(2, "Bob Santoso", "0002", "bob@example.com", "Jalan Dua"),
    Customer(1, "Alice", "0001", "alice@example.com", "Jalan Satu"),
]


def test_format_layout():
    text = format_customers([SAMPLE[1]])
    assert text == "1\nAlice\n0001\nalice@example.com\nJalan Satu\n"


def test_format_empty():
    assert format_customers([]) == ""


def test_round_trip():
    assert parse_customers(format_customers(SAMPLE)) == SAMPLE


def test_parse_strips_carriage_returns():
    text = format_customers(SAMPLE).replace("\n", "\r\n")
    assert parse_customers(text) == SAMPLE


def test_parse_skips_blank_lines_and_indent():
    text = "\n\n1\n  Alice\n\n0001\nalice@example.com\nJalan Satu\n"
    assert parse_customers(text) == [SAMPLE[1]]


def test_parse_drops_incomplete_record():
    text = format_customers(SAMPLE) + "3\nCarol\n0003\n"
    assert parse_customers(text) == SAMPLE


def test_parse_stops_at_bad_id():
    text = format_customers([SAMPLE[0]]) + "oops\nX\nY\nZ\nW\n" + format_customers([SAMPLE[1]])
    assert parse_customers(text) == [SAMPLE[0]]


def test_parse_empty():
    assert parse_customers("") == []


def test_load_missing_file(tmp_path):
    assert load_customers(tmp_path / "absent.txt") == []


def test_save_then_load(tmp_path):
    path = tmp_path / "customers.txt"
    save_customers(SAMPLE, path)
    assert load_customers(path) == SAMPLE
    assert path.read_text(encoding="utf-8") == format_customers(SAMPLE)


def test_save_replaces_content(tmp_path):
    path = tmp_path / "customers.txt"
    save_customers(SAMPLE, path)
    save_customers([SAMPLE[1]], path)
    assert load_customers(path) == [SAMPLE[1]]