"""Typed wrapper around st.session_state plus the process-wide booking service."""

import streamlit as st
from typing import List, Optional

from config.defaults import DEFAULT_CUSTOMER_NAME, DEFAULT_ROWS, DEFAULT_SEATS_PER_ROW
from engine.booking_service import BookingService
from models.booking import BookingResult


@st.cache_resource
def get_booking_service(rows: int = DEFAULT_ROWS, seats_per_row: int = DEFAULT_SEATS_PER_ROW) -> BookingService:
    """Shared by every browser session; the service serializes access itself."""
    return BookingService(rows, seats_per_row)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "selected_seats": [],
        "last_result": None,
        "my_booking_ids": [],
        "sidebar_state": {
            "party_size": 1,
            "customer_name": DEFAULT_CUSTOMER_NAME,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_selected_seats() -> List[str]:
    return st.session_state.get("selected_seats", [])


def get_last_result() -> Optional[BookingResult]:
    return st.session_state.get("last_result")


def get_my_booking_ids() -> List[str]:
    return st.session_state.get("my_booking_ids", [])


# --- Setters ---

def set_selected_seats(seat_ids: List[str]):
    st.session_state["selected_seats"] = list(seat_ids)


def set_last_result(result: Optional[BookingResult]):
    st.session_state["last_result"] = result


def add_my_booking_id(booking_id: str):
    st.session_state["my_booking_ids"].append(booking_id)


def clear_session_bookings():
    st.session_state["selected_seats"] = []
    st.session_state["last_result"] = None
    st.session_state["my_booking_ids"] = []
