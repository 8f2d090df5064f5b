"""Input-validation errors raised at the booking service boundary."""


class SeatBookingError(Exception):
    """Base class for errors raised by the booking core."""


class InvalidSeatIdError(SeatBookingError, ValueError):
    """Raised when a seat identifier is not of the form '{row}-{index}'."""

    def __init__(self, seat_id):
        self.seat_id = seat_id
        super().__init__(f"Invalid seat id {seat_id!r}: expected '<row>-<index>' with non-negative integers")


class SeatOutOfRangeError(SeatBookingError, IndexError):
    """Raised when a coordinate outside the hall reaches the grid."""

    def __init__(self, row: int, index: int, rows: int, seats_per_row: int):
        self.row = row
        self.index = index
        super().__init__(
            f"Seat ({row}, {index}) is outside the {rows}x{seats_per_row} hall"
        )


class InvalidPartySizeError(SeatBookingError, ValueError):
    """Raised when an availability query asks for a party smaller than one."""

    def __init__(self, party_size):
        self.party_size = party_size
        super().__init__(f"Party size must be a positive integer, got {party_size!r}")
