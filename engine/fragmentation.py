"""Isolated-seat detection and hall-wide fragmentation / utilization metrics.

A free seat is isolated when the seat on each side of it is occupied, part of
the booking being evaluated, or the edge of the row. Such a seat can only ever
be sold to a party of one.
"""

from typing import AbstractSet, Iterable, List

from models.booking import FragmentationCheck
from models.hall import Hall
from models.seat import Seat
from engine.explainer import explain_fragmentation


def _is_blocked(hall: Hall, row: int, index: int, pending_ids: AbstractSet[str]) -> bool:
    """True when (row, index) is a row edge, occupied, or part of the pending booking."""
    if not 0 <= index < hall.seats_per_row:
        return True
    seat = hall.seat_at(row, index)
    return seat.is_occupied or seat.seat_id in pending_ids


def _isolated_in_row(hall: Hall, row: int, pending_ids: AbstractSet[str]) -> List[str]:
    isolated = []
    for seat in hall.row_seats(row):
        if seat.is_occupied or seat.seat_id in pending_ids:
            continue
        if (_is_blocked(hall, row, seat.index - 1, pending_ids)
                and _is_blocked(hall, row, seat.index + 1, pending_ids)):
            isolated.append(seat.seat_id)
    return isolated


def find_isolated_seats(hall: Hall, seats: Iterable[Seat]) -> FragmentationCheck:
    """Free seats that would be isolated if `seats` were booked.

    Only rows touched by `seats` are scanned; a booking cannot fragment a row it
    does not touch.
    """
    seats = list(seats)
    pending_ids = {s.seat_id for s in seats}
    affected_rows = sorted({s.row for s in seats})

    isolated: List[str] = []
    for row in affected_rows:
        isolated.extend(_isolated_in_row(hall, row, pending_ids))

    return FragmentationCheck(
        isolated_seats=isolated,
        message=explain_fragmentation(isolated),
    )


def count_isolated_seats(hall: Hall) -> int:
    return sum(len(_isolated_in_row(hall, row, frozenset())) for row in range(hall.rows))


def calculate_fragmentation(hall: Hall) -> float:
    """Isolated free seats as a percentage of all free seats (0 when the hall is full)."""
    free = hall.count_free()
    if free == 0:
        return 0.0
    return count_isolated_seats(hall) * 100.0 / free


def calculate_utilization(hall: Hall) -> float:
    """Occupied seats as a percentage of all seats."""
    return hall.count_occupied() * 100.0 / hall.total_seats
