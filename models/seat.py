from dataclasses import dataclass
from typing import Optional, Tuple

from config.defaults import SEAT_ID_MAX_DIGITS, SEAT_ID_SEPARATOR
from models.errors import InvalidSeatIdError


def format_seat_id(row: int, index: int) -> str:
    return f"{row}{SEAT_ID_SEPARATOR}{index}"


def parse_seat_id(seat_id: str) -> Tuple[int, int]:
    """Split a '{row}-{index}' identifier into zero-based coordinates."""
    if not isinstance(seat_id, str):
        raise InvalidSeatIdError(seat_id)
    parts = seat_id.strip().split(SEAT_ID_SEPARATOR)
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidSeatIdError(seat_id)
    if any(len(p) > SEAT_ID_MAX_DIGITS for p in parts):
        raise InvalidSeatIdError(seat_id)
    return int(parts[0]), int(parts[1])


@dataclass
class Seat:
    row: int
    index: int
    booking_id: Optional[str] = None

    @property
    def seat_id(self) -> str:
        return format_seat_id(self.row, self.index)

    @property
    def is_occupied(self) -> bool:
        return self.booking_id is not None

    def book(self, booking_id: str):
        self.booking_id = booking_id

    def release(self):
        self.booking_id = None
