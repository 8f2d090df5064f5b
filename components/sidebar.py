"""Global sidebar controls for party size and customer name."""

import streamlit as st
from dataclasses import dataclass

from config.defaults import DEFAULT_CUSTOMER_NAME, MAX_PARTY_SIZE
from data.session_store import get_booking_service, set_selected_seats


@dataclass
class SidebarState:
    party_size: int
    customer_name: str


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    service = get_booking_service()
    hall = service.hall

    with st.sidebar:
        st.title("Fragmentation Theater")
        st.caption(f"{hall.rows} rows x {hall.seats_per_row} seats")
        st.divider()

        party_size = st.number_input(
            "Party size",
            min_value=1,
            max_value=min(MAX_PARTY_SIZE, hall.seats_per_row),
            value=st.session_state["sidebar_state"]["party_size"],
            step=1,
            key="sidebar_party_size",
        )
        if party_size != st.session_state["sidebar_state"]["party_size"]:
            set_selected_seats([])

        customer_name = st.text_input(
            "Name on booking",
            value=st.session_state["sidebar_state"]["customer_name"],
            key="sidebar_customer_name",
        ).strip() or DEFAULT_CUSTOMER_NAME

        st.session_state["sidebar_state"] = {
            "party_size": int(party_size),
            "customer_name": customer_name,
        }

        st.divider()
        stats = service.get_statistics()
        if stats.free_seats == 0:
            st.error("Sold out")
        else:
            st.success(f"{stats.free_seats} seats free")
        st.caption(f"Fragmentation: {stats.fragmentation_pct:.1f}%")

    return SidebarState(party_size=int(party_size), customer_name=customer_name)
