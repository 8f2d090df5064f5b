"""Single in-memory booking authority: one hall, one ledger, one lock."""

import threading
from typing import List, Optional

from config.defaults import DEFAULT_CUSTOMER_NAME, DEFAULT_ROWS, DEFAULT_SEATS_PER_ROW
from config.logger_config import logger
from data.ledger import BookingLedger
from engine.allocation_engine import allocate, find_available_seats
from engine.fragmentation import calculate_fragmentation, calculate_utilization
from models.audit import BookingAttempt
from models.booking import (
    Booking, BookingRejection, BookingRequest, BookingResult, HallLayout, RejectionReason,
)
from models.errors import SeatBookingError
from models.hall import Hall
from models.statistics import HallStatistics


class BookingService:
    """Owns the hall and ledger; all reads and writes are serialized on one lock."""

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        seats_per_row: int = DEFAULT_SEATS_PER_ROW,
        rule_config: Optional[dict] = None,
    ):
        self.hall = Hall(rows, seats_per_row)
        self.ledger = BookingLedger()
        self.rule_config = dict(rule_config or {})
        self._lock = threading.Lock()
        logger.info(f"Hall ready: {rows} rows x {seats_per_row} seats")

    def get_hall_layout(self) -> HallLayout:
        with self._lock:
            occupied = [
                [seat.is_occupied for seat in self.hall.row_seats(row)]
                for row in range(self.hall.rows)
            ]
        return HallLayout(rows=self.hall.rows, seats_per_row=self.hall.seats_per_row, occupied=occupied)

    def book_seats(self, seat_ids: List[str], customer_name: str = DEFAULT_CUSTOMER_NAME) -> BookingResult:
        request = BookingRequest(seat_ids=list(seat_ids), customer_name=customer_name or DEFAULT_CUSTOMER_NAME)
        try:
            with self._lock:
                result = allocate(self.hall, self.ledger, request, self.rule_config)
        except SeatBookingError as e:
            logger.warning(f"Rejected malformed booking request from {request.customer_name!r}: {e}")
            raise

        if isinstance(result, BookingRejection):
            self._log_rejection(request, result)
        elif result.last_resort:
            logger.warning(
                f"Last-resort booking {result.booking_id} for {request.customer_name!r}: "
                f"{result.seats_reserved} seats, fragmentation {result.fragmentation_before:.1f}% "
                f"-> {result.fragmentation_after:.1f}%"
            )
        else:
            logger.info(
                f"Booking {result.booking_id} for {request.customer_name!r}: "
                f"{result.seats_reserved} seats {request.seat_ids}"
            )
        return result

    def _log_rejection(self, request: BookingRequest, rejection: BookingRejection):
        if rejection.reason == RejectionReason.FRAGMENTATION_PREVENTION:
            logger.info(
                f"Fragmentation prevented for {request.customer_name!r} {request.seat_ids}: "
                f"isolated {rejection.isolated_seats}, suggested {rejection.suggestions}"
            )
        else:
            logger.debug(f"Rejected {request.seat_ids} ({rejection.reason.value}): {rejection.message}")

    def reset(self) -> str:
        with self._lock:
            self.hall.clear()
            self.ledger.clear()
        logger.info("Hall reset: all seats released, counters zeroed")
        return "Hall reset"

    def get_statistics(self) -> HallStatistics:
        with self._lock:
            return HallStatistics(
                total_bookings=self.ledger.total_bookings,
                rejected_bookings=self.ledger.rejected_bookings,
                fragmentation_pct=calculate_fragmentation(self.hall),
                utilization_pct=calculate_utilization(self.hall),
                total_seats=self.hall.total_seats,
                occupied_seats=self.hall.count_occupied(),
            )

    def get_available_seats(self, party_size: int) -> List[str]:
        with self._lock:
            return find_available_seats(self.hall, party_size, self.rule_config)

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            return self.ledger.get(booking_id)

    def get_recent_attempts(self, limit: Optional[int] = None) -> List[BookingAttempt]:
        with self._lock:
            return self.ledger.recent_attempts(limit)
