"""Fixed-width profile records stored in a flat file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

NAME_WIDTH = 20
AGE_WIDTH = 3
OCCUPATION_WIDTH = 30
RECORD_SIZE = NAME_WIDTH + AGE_WIDTH + OCCUPATION_WIDTH + 1


@dataclass(frozen=True)
class Profile:
    """The age and occupation read back from a record."""

    age: str
    occupation: str


def _pad(value: str, width: int) -> str:
    return value + " " * max(0, width - len(value.encode("utf-8")))


def format_record(name: str, age: str, occupation: str) -> str:
    """Left-justify the fields to their widths; longer values are not cut."""
    return (
        _pad(name, NAME_WIDTH)
        + _pad(age, AGE_WIDTH)
        + _pad(occupation, OCCUPATION_WIDTH)
        + "\n"
    )


def clean_field(raw: str) -> str:
    """Drop NULs and any space followed by a space, NUL or the field's end."""
    following = raw[1:] + "\0"
    return "".join(
        ch
        for ch, nxt in zip(raw, following)
        if ch != "\0" and not (ch == " " and nxt in " \0")
    )


class ProfileStore:
    """Append-only file of fixed-width profile records."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def reset(self) -> None:
        """Create the file, or empty it."""
        self.path.write_bytes(b"")

    def append(self, name: str, age: str, occupation: str) -> None:
        """Write one record at the end of the file."""
        with self.path.open("ab") as handle:
            handle.write(format_record(name, age, occupation).encode("utf-8"))

    def read(self, index: int) -> Profile:
        """Read the age and occupation of the record at ``index``."""
        with self.path.open("rb") as handle:
            handle.seek(index * RECORD_SIZE + NAME_WIDTH)
            data = handle.read(AGE_WIDTH + OCCUPATION_WIDTH)
        data = data.ljust(AGE_WIDTH + OCCUPATION_WIDTH, b"\0")
        age = data[:AGE_WIDTH].decode("utf-8", errors="replace")
        occupation = data[AGE_WIDTH:].decode("utf-8", errors="replace")
        return Profile(clean_field(age), clean_field(occupation))