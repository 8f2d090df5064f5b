"""Fixed-size seat grid owned by a single booking service."""

from typing import List

from models.errors import SeatOutOfRangeError
from models.seat import Seat


class Hall:
    """Dense rows x seats_per_row grid of seats, addressed by (row, index)."""

    def __init__(self, rows: int, seats_per_row: int):
        if rows < 1 or seats_per_row < 1:
            raise ValueError(f"Hall dimensions must be positive, got {rows}x{seats_per_row}")
        self.rows = rows
        self.seats_per_row = seats_per_row
        self._grid: List[List[Seat]] = [
            [Seat(r, s) for s in range(seats_per_row)] for r in range(rows)
        ]

    @property
    def total_seats(self) -> int:
        return self.rows * self.seats_per_row

    def contains(self, row: int, index: int) -> bool:
        return 0 <= row < self.rows and 0 <= index < self.seats_per_row

    def seat_at(self, row: int, index: int) -> Seat:
        if not self.contains(row, index):
            raise SeatOutOfRangeError(row, index, self.rows, self.seats_per_row)
        return self._grid[row][index]

    def row_seats(self, row: int) -> List[Seat]:
        if not 0 <= row < self.rows:
            raise SeatOutOfRangeError(row, 0, self.rows, self.seats_per_row)
        return list(self._grid[row])

    def all_seats(self) -> List[Seat]:
        """All seats in row-major order."""
        return [seat for row in self._grid for seat in row]

    def count_free(self) -> int:
        return sum(1 for seat in self.all_seats() if not seat.is_occupied)

    def count_occupied(self) -> int:
        return self.total_seats - self.count_free()

    def clear(self):
        for seat in self.all_seats():
            seat.release()
