"""Tests for the booking pipeline."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data.ledger import BookingLedger
from engine.allocation_engine import (
    allocate,
    check_contiguous,
    check_same_row,
    dedupe_seat_ids,
    evaluate_request,
    find_available_seats,
    is_last_resort,
    needs_fragmentation_check,
)
from engine.fragmentation import calculate_fragmentation
from models.booking import BookingRejection, BookingRequest, BookingSuccess, RejectionReason
from models.errors import InvalidPartySizeError, InvalidSeatIdError
from models.hall import Hall


def make_hall(rows=1, seats_per_row=8, occupied=()):
    hall = Hall(rows, seats_per_row)
    for r, s in occupied:
        hall.seat_at(r, s).book("existing")
    return hall


def book(hall, ledger, *seat_ids, rule_config=None):
    return allocate(hall, ledger, BookingRequest(list(seat_ids), "Test"), rule_config)


class TestPipelineSteps:
    def test_dedupe_keeps_order(self):
        assert dedupe_seat_ids(["0-2", "0-1", "0-2", " 0-1"]) == ["0-2", "0-1"]

    def test_same_row(self):
        hall = make_hall(rows=2)
        assert check_same_row([hall.seat_at(0, 1), hall.seat_at(0, 2)]) is None
        rejection = check_same_row([hall.seat_at(0, 1), hall.seat_at(1, 1)])
        assert rejection.reason == RejectionReason.DIFFERENT_ROWS

    def test_contiguous_ignores_request_order(self):
        hall = make_hall()
        assert check_contiguous([hall.seat_at(0, 3), hall.seat_at(0, 1), hall.seat_at(0, 2)]) is None

    def test_not_contiguous(self):
        hall = make_hall()
        rejection = check_contiguous([hall.seat_at(0, 1), hall.seat_at(0, 3)])
        assert rejection.reason == RejectionReason.NOT_CONTIGUOUS

    def test_single_seat_exempt_by_default(self):
        assert not needs_fragmentation_check(1)
        assert needs_fragmentation_check(2)
        assert needs_fragmentation_check(1, {"single_seat_exempt": False})


class TestLastResort:
    def test_group_boundary(self):
        assert is_last_resort(4, 3)
        assert is_last_resort(4, 4)
        assert not is_last_resort(4, 2)
        assert not is_last_resort(5, 4)

    def test_relaxed_single_seat(self):
        assert is_last_resort(4, 1)
        assert not is_last_resort(5, 1)

    def test_threshold_override(self):
        assert is_last_resort(6, 5, {"last_resort_max_free": 6})


class TestAllocate:
    def test_accepts_and_commits(self):
        hall, ledger = make_hall(), BookingLedger()
        result = book(hall, ledger, "0-0", "0-1")

        assert isinstance(result, BookingSuccess)
        assert result.success
        assert result.seats_reserved == 2
        assert hall.seat_at(0, 0).booking_id == result.booking_id
        assert hall.seat_at(0, 1).booking_id == result.booking_id
        assert ledger.get(result.booking_id).seat_ids == ["0-0", "0-1"]
        assert ledger.total_bookings == 1
        assert not result.last_resort

    def test_booking_ids_are_unique(self):
        hall, ledger = make_hall(seats_per_row=12), BookingLedger()
        ids = {book(hall, ledger, f"0-{i}").booking_id for i in range(0, 12, 2)}
        assert len(ids) == 6

    def test_fragmentation_before_and_after(self):
        hall, ledger = make_hall(seats_per_row=6), BookingLedger()
        result = book(hall, ledger, "0-1")  # single seat, exempt; strands 0-0
        assert result.fragmentation_before == 0.0
        assert result.fragmentation_after == 20.0
        assert result.fragmentation_increase == 20.0

    def test_unavailable_seat(self):
        hall, ledger = make_hall(occupied=[(0, 3)]), BookingLedger()
        result = book(hall, ledger, "0-2", "0-3")
        assert isinstance(result, BookingRejection)
        assert not result.success
        assert result.reason == RejectionReason.SEAT_UNAVAILABLE
        assert "0-3" in result.message
        assert not hall.seat_at(0, 2).is_occupied

    def test_out_of_range_is_unavailable(self):
        hall, ledger = make_hall(), BookingLedger()
        assert book(hall, ledger, "0-8").reason == RejectionReason.SEAT_UNAVAILABLE
        assert book(hall, ledger, "1-0").reason == RejectionReason.SEAT_UNAVAILABLE

    def test_malformed_raises_without_side_effects(self):
        hall, ledger = make_hall(), BookingLedger()
        with pytest.raises(InvalidSeatIdError):
            book(hall, ledger, "0-1", "zero-two")
        assert hall.count_free() == 8
        assert ledger.total_bookings == 0

    def test_different_rows(self):
        hall, ledger = make_hall(rows=2), BookingLedger()
        result = book(hall, ledger, "0-3", "1-4")
        assert result.reason == RejectionReason.DIFFERENT_ROWS
        assert hall.count_free() == 16

    def test_not_contiguous(self):
        hall, ledger = make_hall(), BookingLedger()
        result = book(hall, ledger, "0-2", "0-4")
        assert result.reason == RejectionReason.NOT_CONTIGUOUS

    def test_empty_request_rejected_without_counting(self):
        hall, ledger = make_hall(), BookingLedger()
        result = book(hall, ledger)
        assert result.reason == RejectionReason.SEAT_UNAVAILABLE
        assert ledger.total_bookings == 0
        assert ledger.rejected_bookings == 0

    def test_duplicates_collapse(self):
        hall, ledger = make_hall(), BookingLedger()
        result = book(hall, ledger, "0-0", "0-1", "0-0")
        assert isinstance(result, BookingSuccess)
        assert result.seats_reserved == 2

    def test_differently_spelled_duplicates_collapse(self):
        hall, ledger = make_hall(), BookingLedger()
        result = book(hall, ledger, "0-0", "00-0", "0-1")
        assert isinstance(result, BookingSuccess)
        assert result.seats_reserved == 2
        assert ledger.get(result.booking_id).seat_ids == ["0-0", "0-1"]

    def test_oversized_numeric_id_raises_invalid_seat_id(self):
        hall, ledger = make_hall(), BookingLedger()
        with pytest.raises(InvalidSeatIdError):
            book(hall, ledger, "0-" + "9" * 5000)
        assert hall.count_free() == 8
        assert ledger.recent_attempts() == []

    def test_long_but_accepted_id_is_unavailable(self):
        hall, ledger = make_hall(), BookingLedger()
        result = book(hall, ledger, "0-" + "9" * 9)
        assert result.reason == RejectionReason.SEAT_UNAVAILABLE

    def test_fragmentation_prevented_with_suggestions(self):
        hall, ledger = make_hall(), BookingLedger()
        assert book(hall, ledger, "0-5").success

        result = book(hall, ledger, "0-1", "0-2", "0-3")
        assert result.reason == RejectionReason.FRAGMENTATION_PREVENTION
        assert set(result.isolated_seats) == {"0-0", "0-4"}
        assert result.suggestions == ["Row 1, seats 1-3", "Row 1, seats 3-5"]
        assert ledger.rejected_bookings == 1
        assert hall.count_free() == 7

    def test_filling_gap_exactly_leaves_no_fragmentation(self):
        hall, ledger = make_hall(), BookingLedger()
        assert book(hall, ledger, "0-0", "0-1").success
        assert book(hall, ledger, "0-4", "0-5").success
        assert book(hall, ledger, "0-2", "0-3").success
        assert calculate_fragmentation(hall) == 0.0

    def test_last_resort_with_four_free(self):
        hall, ledger = make_hall(), BookingLedger()
        assert book(hall, ledger, "0-0", "0-1", "0-2", "0-3").success

        result = book(hall, ledger, "0-5", "0-6", "0-7")  # strands 0-4
        assert isinstance(result, BookingSuccess)
        assert result.last_resort
        assert "last remaining seats" in result.message

    def test_no_last_resort_with_five_free(self):
        hall, ledger = make_hall(), BookingLedger()
        assert book(hall, ledger, "0-0", "0-1", "0-2").success

        result = book(hall, ledger, "0-4", "0-5", "0-6")  # strands 0-3 and 0-7
        assert result.reason == RejectionReason.FRAGMENTATION_PREVENTION
        assert result.isolated_seats == ["0-3", "0-7"]

    def test_checked_single_seat(self):
        hall, ledger = make_hall(), BookingLedger()
        cfg = {"single_seat_exempt": False}
        result = book(hall, ledger, "0-1", rule_config=cfg)
        assert result.reason == RejectionReason.FRAGMENTATION_PREVENTION
        assert result.isolated_seats == ["0-0"]

    def test_accepted_booking_adds_no_isolated_seats(self):
        hall, ledger = make_hall(rows=2, seats_per_row=10), BookingLedger()
        for seat_ids in (["0-0", "0-1", "0-2"], ["0-5", "0-6"], ["1-3", "1-4", "1-5", "1-6"]):
            result = book(hall, ledger, *seat_ids)
            assert isinstance(result, BookingSuccess)
            assert not result.last_resort
            assert calculate_fragmentation(hall) == 0.0

    def test_attempts_recorded(self):
        hall, ledger = make_hall(), BookingLedger()
        book(hall, ledger, "0-0")
        book(hall, ledger, "0-2", "0-3")
        attempts = ledger.recent_attempts()
        assert [a.success for a in attempts] == [False, True]
        assert attempts[0].reason == "FRAGMENTATION_PREVENTION"
        assert attempts[0].isolated_seats == ["0-1"]


class TestEvaluateRequest:
    def test_does_not_mutate(self):
        hall = make_hall()
        evaluation = evaluate_request(hall, ["0-0", "0-1"])
        assert evaluation.accepted
        assert hall.count_free() == 8


class TestFindAvailableSeats:
    def test_empty_hall_single_seat(self):
        hall = make_hall(rows=5, seats_per_row=8)
        assert len(find_available_seats(hall, 1)) == 40

    def test_excludes_stranding_blocks(self):
        hall = make_hall()
        # (1,2) and (5,6) strand an edge seat, but every seat is covered by some other pair
        available = find_available_seats(hall, 2)
        assert available == ["0-0", "0-1", "0-2", "0-3", "0-4", "0-5", "0-6", "0-7"]

        hall.seat_at(0, 3).book("x")
        # free runs: 0-2 and 4-7; pair (0,1) strands 0-2, (1,2) strands 0-0
        available = find_available_seats(hall, 2)
        assert available == ["0-4", "0-5", "0-6", "0-7"]

    def test_wider_than_row(self):
        assert find_available_seats(make_hall(seats_per_row=4), 5) == []

    @pytest.mark.parametrize("bad", [0, -2, True, 1.5])
    def test_invalid_party_size(self, bad):
        with pytest.raises(InvalidPartySizeError):
            find_available_seats(make_hall(), bad)

    def test_matches_booking_outcomes(self):
        hall, ledger = make_hall(rows=2, seats_per_row=7), BookingLedger()
        book(hall, ledger, "0-2")
        book(hall, ledger, "1-3", "1-4")
        for size in (2, 3):
            available = set(find_available_seats(hall, size))
            for row in range(2):
                for start in range(7 - size + 1):
                    ids = [f"{row}-{start + i}" for i in range(size)]
                    evaluation = evaluate_request(hall, ids)
                    if evaluation.accepted:
                        assert set(ids) <= available
            # every listed seat is part of some accepted block
            for seat_id in available:
                row, index = map(int, seat_id.split("-"))
                assert any(
                    evaluate_request(hall, [f"{row}-{s + i}" for i in range(size)]).accepted
                    for s in range(max(0, index - size + 1), min(index, 7 - size) + 1)
                )
