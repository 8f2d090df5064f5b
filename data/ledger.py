"""Committed bookings, outcome counters and a bounded attempt history."""

from collections import deque
from typing import Deque, Dict, List, Optional

from config.defaults import HISTORY_LIMIT
from models.audit import BookingAttempt
from models.booking import Booking


class BookingLedger:
    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self.bookings: Dict[str, Booking] = {}
        self.total_bookings = 0
        self.rejected_bookings = 0
        self.history: Deque[BookingAttempt] = deque(maxlen=history_limit)

    def add(self, booking: Booking):
        if booking.booking_id in self.bookings:
            raise KeyError(f"Duplicate booking id {booking.booking_id}")
        self.bookings[booking.booking_id] = booking
        self.total_bookings += 1

    def record_rejection(self):
        self.rejected_bookings += 1

    def record_attempt(self, attempt: BookingAttempt):
        self.history.append(attempt)

    def get(self, booking_id: str) -> Optional[Booking]:
        return self.bookings.get(booking_id)

    def recent_attempts(self, limit: Optional[int] = None) -> List[BookingAttempt]:
        """Most recent attempts first."""
        attempts = list(reversed(self.history))
        return attempts if limit is None else attempts[:limit]

    def clear(self):
        self.bookings.clear()
        self.total_bookings = 0
        self.rejected_bookings = 0
        self.history.clear()
