"""Rule-based seat allocation: the booking pipeline and bookable-seat search."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from config.defaults import LAST_RESORT_MAX_FREE, SINGLE_SEAT_EXEMPT, MAX_SUGGESTIONS
from data.ledger import BookingLedger
from engine.explainer import (
    explain_different_rows, explain_empty_request, explain_not_contiguous,
    explain_success, explain_unavailable,
)
from engine.fragmentation import calculate_fragmentation, find_isolated_seats
from engine.suggestions import iter_free_blocks, suggest_alternatives
from models.audit import BookingAttempt
from models.booking import (
    Booking, BookingRejection, BookingRequest, BookingResult, BookingSuccess,
    FragmentationCheck, RejectionReason,
)
from models.errors import InvalidPartySizeError
from models.hall import Hall
from models.seat import Seat, parse_seat_id


@dataclass
class RequestEvaluation:
    """Outcome of running a request through validation, before anything is committed."""
    seats: List[Seat]
    rejection: Optional[BookingRejection] = None
    fragmentation: FragmentationCheck = field(default_factory=FragmentationCheck)
    last_resort: bool = False

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def dedupe_seat_ids(seat_ids: List[str]) -> List[str]:
    """Drop repeated ids, keeping first-occurrence order."""
    return list(dict.fromkeys(s.strip() if isinstance(s, str) else s for s in seat_ids))


def resolve_seats(hall: Hall, seat_ids: List[str]) -> RequestEvaluation:
    """Map ids to free seats. Malformed ids raise InvalidSeatIdError before any lookup.

    Ids spelled differently but naming the same seat ("0-1", "00-1") collapse to the first.
    """
    coords = {}
    for seat_id in seat_ids:
        coords.setdefault(parse_seat_id(seat_id), seat_id)

    seats = []
    for (row, index), seat_id in coords.items():
        if not hall.contains(row, index) or hall.seat_at(row, index).is_occupied:
            return RequestEvaluation(
                seats=[],
                rejection=BookingRejection(RejectionReason.SEAT_UNAVAILABLE, explain_unavailable(seat_id)),
            )
        seats.append(hall.seat_at(row, index))
    return RequestEvaluation(seats=seats)


def check_same_row(seats: List[Seat]) -> Optional[BookingRejection]:
    if len(seats) > 1 and len({s.row for s in seats}) > 1:
        return BookingRejection(RejectionReason.DIFFERENT_ROWS, explain_different_rows())
    return None


def check_contiguous(seats: List[Seat]) -> Optional[BookingRejection]:
    if len(seats) < 2:
        return None
    indices = sorted(s.index for s in seats)
    for left, right in zip(indices, indices[1:]):
        if right - left != 1:
            return BookingRejection(RejectionReason.NOT_CONTIGUOUS, explain_not_contiguous())
    return None


def needs_fragmentation_check(party_size: int, rule_config: Optional[dict] = None) -> bool:
    cfg = rule_config or {}
    single_seat_exempt = cfg.get("single_seat_exempt", SINGLE_SEAT_EXEMPT)
    return not (party_size == 1 and single_seat_exempt)


def is_last_resort(free_seats: int, party_size: int, rule_config: Optional[dict] = None) -> bool:
    """Whether a fragmenting booking of `party_size` is allowed with `free_seats` left.

    Groups qualify when they take all but at most one of the remaining seats.
    Checked single seats qualify as soon as the hall is down to the threshold.
    """
    cfg = rule_config or {}
    max_free = cfg.get("last_resort_max_free", LAST_RESORT_MAX_FREE)

    if free_seats > max_free:
        return False
    if party_size == 1:
        return True
    return party_size >= free_seats - 1


def evaluate_request(
    hall: Hall,
    seat_ids: List[str],
    rule_config: Optional[dict] = None,
) -> RequestEvaluation:
    """Run steps 1-5 of the pipeline against current hall state without mutating it."""
    cfg = rule_config or {}
    max_suggestions = cfg.get("max_suggestions", MAX_SUGGESTIONS)

    seat_ids = dedupe_seat_ids(seat_ids)
    if not seat_ids:
        return RequestEvaluation(
            seats=[],
            rejection=BookingRejection(RejectionReason.SEAT_UNAVAILABLE, explain_empty_request()),
        )

    # Step 1: Parse & resolve
    evaluation = resolve_seats(hall, seat_ids)
    if not evaluation.accepted:
        return evaluation
    seats = evaluation.seats

    # Step 2-3: Row and contiguity constraints
    rejection = check_same_row(seats) or check_contiguous(seats)
    if rejection:
        return RequestEvaluation(seats=seats, rejection=rejection)

    # Step 4: Fragmentation check
    if not needs_fragmentation_check(len(seats), cfg):
        return evaluation
    check = find_isolated_seats(hall, seats)
    if not check.would_fragment:
        return RequestEvaluation(seats=seats, fragmentation=check)

    # Step 5: Last-resort override
    if is_last_resort(hall.count_free(), len(seats), cfg):
        return RequestEvaluation(seats=seats, fragmentation=check, last_resort=True)

    return RequestEvaluation(
        seats=seats,
        fragmentation=check,
        rejection=BookingRejection(
            reason=RejectionReason.FRAGMENTATION_PREVENTION,
            message=check.message,
            isolated_seats=list(check.isolated_seats),
            suggestions=suggest_alternatives(hall, seats, max_suggestions),
        ),
    )


def allocate(
    hall: Hall,
    ledger: BookingLedger,
    request: BookingRequest,
    rule_config: Optional[dict] = None,
) -> BookingResult:
    """Full booking pipeline: evaluate, then commit or reject. Caller must serialize access."""
    evaluation = evaluate_request(hall, request.seat_ids, rule_config)

    if not evaluation.accepted:
        rejection = evaluation.rejection
        if rejection.reason == RejectionReason.FRAGMENTATION_PREVENTION:
            ledger.record_rejection()
        ledger.record_attempt(BookingAttempt(
            timestamp=datetime.now(),
            customer_name=request.customer_name,
            seat_ids=list(request.seat_ids),
            success=False,
            reason=rejection.reason.value,
            isolated_seats=list(rejection.isolated_seats),
        ))
        return rejection

    # Step 6: Commit
    seats = evaluation.seats
    fragmentation_before = calculate_fragmentation(hall)

    booking_id = str(uuid.uuid4())
    for seat in seats:
        seat.book(booking_id)
    ledger.add(Booking(booking_id=booking_id, seats=seats, customer_name=request.customer_name))

    fragmentation_after = calculate_fragmentation(hall)

    ledger.record_attempt(BookingAttempt(
        timestamp=datetime.now(),
        customer_name=request.customer_name,
        seat_ids=[s.seat_id for s in seats],
        success=True,
        booking_id=booking_id,
        last_resort=evaluation.last_resort,
        isolated_seats=list(evaluation.fragmentation.isolated_seats),
    ))

    return BookingSuccess(
        booking_id=booking_id,
        seats_reserved=len(seats),
        message=explain_success(len(seats), evaluation.last_resort),
        fragmentation_before=fragmentation_before,
        fragmentation_after=fragmentation_after,
        last_resort=evaluation.last_resort,
    )


def find_available_seats(
    hall: Hall,
    party_size: int,
    rule_config: Optional[dict] = None,
) -> List[str]:
    """Seat ids that belong to at least one block of `party_size` the pipeline would accept."""
    if isinstance(party_size, bool) or not isinstance(party_size, int) or party_size < 1:
        raise InvalidPartySizeError(party_size)
    cfg = rule_config or {}

    if not needs_fragmentation_check(party_size, cfg):
        return [s.seat_id for s in hall.all_seats() if not s.is_occupied]

    last_resort = is_last_resort(hall.count_free(), party_size, cfg)

    available = {}  # ordered set
    for row in range(hall.rows):
        for block in iter_free_blocks(hall, row, party_size):
            if last_resort or not find_isolated_seats(hall, block).would_fragment:
                for seat in block:
                    available[seat.seat_id] = None
    return list(available)
