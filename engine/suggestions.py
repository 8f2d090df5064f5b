"""Alternative-block search for rejected bookings."""

from typing import Iterator, List, Optional, Sequence

from config.defaults import MAX_SUGGESTIONS
from models.hall import Hall
from models.seat import Seat
from engine.explainer import format_block
from engine.fragmentation import find_isolated_seats


def iter_free_blocks(hall: Hall, row: int, size: int) -> Iterator[List[Seat]]:
    """Yield every fully free run of `size` seats in `row`, left to right."""
    if size < 1:
        return
    seats = hall.row_seats(row)
    for start in range(len(seats) - size + 1):
        block = seats[start:start + size]
        if not any(s.is_occupied for s in block):
            yield block


def suggest_alternatives(
    hall: Hall,
    requested_seats: Sequence[Seat],
    limit: Optional[int] = None,
) -> List[str]:
    """Non-fragmenting blocks of the requested size in the row of the first requested seat."""
    if not requested_seats:
        return []
    limit = MAX_SUGGESTIONS if limit is None else limit
    size = len(requested_seats)
    row = requested_seats[0].row

    suggestions = []
    for block in iter_free_blocks(hall, row, size):
        if len(suggestions) >= limit:
            break
        if not find_isolated_seats(hall, block).would_fragment:
            suggestions.append(format_block(row, block[0].index, size))
    return suggestions
