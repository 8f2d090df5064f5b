"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List

from models.audit import BookingAttempt


def attempts_frame(attempts: List[BookingAttempt]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Time": a.timestamp.strftime("%H:%M:%S"),
        "Customer": a.customer_name,
        "Seats": ", ".join(a.seat_ids),
        "Outcome": ("LAST RESORT" if a.last_resort else "BOOKED") if a.success else a.reason,
        "Isolated": ", ".join(a.isolated_seats) or "—",
        "Booking ID": a.booking_id or "—",
    } for a in attempts])


def render_attempts_table(attempts: List[BookingAttempt], outcome_column: str = "Outcome"):
    """Render the attempt history with colour-coded outcomes."""
    def color_outcome(val):
        if val == "BOOKED":
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        elif val == "LAST RESORT":
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        elif val:
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        return ""

    df = attempts_frame(attempts)
    if df.empty:
        st.caption("No booking attempts yet.")
        return
    styled = df.style.map(color_outcome, subset=[outcome_column])
    st.dataframe(styled, use_container_width=True, hide_index=True)
