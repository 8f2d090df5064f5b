from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from config.defaults import DEFAULT_CUSTOMER_NAME
from models.seat import Seat


class RejectionReason(str, Enum):
    SEAT_UNAVAILABLE = "SEAT_UNAVAILABLE"
    DIFFERENT_ROWS = "DIFFERENT_ROWS"
    NOT_CONTIGUOUS = "NOT_CONTIGUOUS"
    FRAGMENTATION_PREVENTION = "FRAGMENTATION_PREVENTION"


@dataclass
class BookingRequest:
    seat_ids: List[str]
    customer_name: str = DEFAULT_CUSTOMER_NAME  # display only, never validated


@dataclass
class Booking:
    booking_id: str
    seats: List[Seat]
    customer_name: str = DEFAULT_CUSTOMER_NAME

    @property
    def seat_ids(self) -> List[str]:
        return [s.seat_id for s in self.seats]


@dataclass
class FragmentationCheck:
    """Seats a hypothetical booking would leave isolated."""
    isolated_seats: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def would_fragment(self) -> bool:
        return bool(self.isolated_seats)


@dataclass
class BookingSuccess:
    booking_id: str
    seats_reserved: int
    message: str
    fragmentation_before: float     # % of free seats isolated, 0-100
    fragmentation_after: float
    last_resort: bool = False       # accepted despite fragmenting

    success = True

    @property
    def fragmentation_increase(self) -> float:
        return self.fragmentation_after - self.fragmentation_before


@dataclass
class BookingRejection:
    reason: RejectionReason
    message: str
    isolated_seats: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    success = False


BookingResult = Union[BookingSuccess, BookingRejection]


@dataclass
class HallLayout:
    rows: int
    seats_per_row: int
    occupied: List[List[bool]]      # occupied[row][index]

    @property
    def total_seats(self) -> int:
        return self.rows * self.seats_per_row
