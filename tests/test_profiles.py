import pytest

from friendnet.profiles import (
    RECORD_SIZE,
    Profile,
    ProfileStore,
    clean_field,
    format_record,
)


def test_format_record_widths():
    record = format_record("Alice", "25", "Engineer")
    assert len(record) == RECORD_SIZE
    assert record[:20].rstrip() == "Alice"
    assert record[20:23] == "25 "
    assert record[23:53].rstrip() == "Engineer"
    assert record.endswith("\n")


def test_format_record_does_not_truncate():
    long_name = "n" * 25
    record = format_record(long_name, "25", "x")
    assert record.startswith(long_name + "25")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Engineer" + " " * 22, "Engineer"),
        ("ab\0\0", "ab"),
        ("a b", "a b"),
        ("a  b", "a b"),
        ("", ""),
    ],
)
def test_clean_field(raw, expected):
    assert clean_field(raw) == expected


def test_store_round_trip(tmp_path):
    store = ProfileStore(tmp_path / "profiles.txt")
    store.reset()
    store.append("Alice", "25", "Engineer")
    store.append("Bob", "31", "Data Scientist")
    assert store.read(0) == Profile("25", "Engineer")
    assert store.read(1) == Profile("31", "Data Scientist")
    assert store.path.stat().st_size == 2 * RECORD_SIZE


def test_reset_empties_file(tmp_path):
    store = ProfileStore(tmp_path / "profiles.txt")
    store.reset()
    store.append("Alice", "25", "Engineer")
    store.reset()
    assert store.path.read_bytes() == b""


def test_read_past_end_gives_empty_profile(tmp_path):
    store = ProfileStore(tmp_path / "profiles.txt")
    store.reset()
    store.append("Alice", "25", "Engineer")
    assert store.read(3) == Profile("", "")


def test_read_missing_file_raises(tmp_path):
    store = ProfileStore(tmp_path / "absent.txt")
    with pytest.raises(FileNotFoundError):
        store.read(0)