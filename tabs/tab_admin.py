"""Tab 3: Admin — hall configuration, booking rules and reset."""

import streamlit as st

from config.defaults import LAST_RESORT_MAX_FREE, MAX_SUGGESTIONS, SINGLE_SEAT_EXEMPT
from data.session_store import clear_session_bookings, get_booking_service


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    service = get_booking_service()
    layout = service.get_hall_layout()
    cfg = service.rule_config

    st.subheader("Hall")
    col1, col2, col3 = st.columns(3)
    col1.metric("Rows", layout.rows)
    col2.metric("Seats per Row", layout.seats_per_row)
    col3.metric("Total Seats", layout.total_seats)

    st.subheader("Booking Rules")
    st.markdown(
        f"- All seats in a booking must be in one row and next to each other.\n"
        f"- A booking may not leave a free seat boxed in on both sides.\n"
        f"- Single seats {'are exempt from' if cfg.get('single_seat_exempt', SINGLE_SEAT_EXEMPT) else 'follow'} "
        f"the isolation rule.\n"
        f"- Last resort: with {cfg.get('last_resort_max_free', LAST_RESORT_MAX_FREE)} or fewer seats left, "
        f"a party taking all but at most one of them may fragment.\n"
        f"- Up to {cfg.get('max_suggestions', MAX_SUGGESTIONS)} alternatives are suggested on rejection."
    )

    st.divider()

    st.subheader("Reset")
    st.caption("Releases every seat and zeroes all counters. This cannot be undone.")
    confirm = st.checkbox("I understand", key="admin_reset_confirm")
    if st.button("Reset hall", disabled=not confirm):
        message = service.reset()
        clear_session_bookings()
        st.success(message)
