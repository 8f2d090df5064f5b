from models.seat import Seat, format_seat_id, parse_seat_id
from models.hall import Hall
from models.booking import (
    Booking, BookingRejection, BookingRequest, BookingResult, BookingSuccess,
    FragmentationCheck, HallLayout, RejectionReason,
)
from models.statistics import HallStatistics
from models.audit import BookingAttempt
from models.errors import InvalidPartySizeError, InvalidSeatIdError, SeatBookingError, SeatOutOfRangeError
