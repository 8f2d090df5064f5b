"""Generates human-readable messages for booking outcomes."""

from typing import List


def explain_fragmentation(isolated_seats: List[str]) -> str:
    if not isolated_seats:
        return ""
    if len(isolated_seats) == 1:
        return (
            f"This booking would leave 1 isolated seat ({isolated_seats[0]}). "
            "Please choose other seats."
        )
    return (
        f"This booking would leave {len(isolated_seats)} isolated seats "
        f"({', '.join(isolated_seats)}). Please choose other seats."
    )


def explain_unavailable(seat_id: str) -> str:
    return f"Seat {seat_id} is not available"


def explain_empty_request() -> str:
    return "No seats selected"


def explain_different_rows() -> str:
    return "All seats must be in the same row"


def explain_not_contiguous() -> str:
    return "Seats must be next to each other"


def explain_success(seats_reserved: int, last_resort: bool = False) -> str:
    noun = "seat" if seats_reserved == 1 else "seats"
    message = f"Booking confirmed! {seats_reserved} {noun} reserved"
    if last_resort:
        message += " (last remaining seats, fragmentation allowed)"
    return message


def format_block(row: int, start: int, size: int) -> str:
    """Describe a block of seats with 1-based row and seat numbers, e.g. 'Row 2, seats 3-5'."""
    if size == 1:
        return f"Row {row + 1}, seat {start + 1}"
    return f"Row {row + 1}, seats {start + 1}-{start + size}"
