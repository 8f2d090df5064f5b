"""Fragmentation Theater seat booking — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import tab_booking, tab_statistics, tab_admin


def main():
    st.set_page_config(
        page_title="Fragmentation Theater",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "🎟️ Book Seats",
        "📊 Statistics",
        "⚙️ Admin",
    ])

    with tab1:
        tab_booking.render(sidebar_state)
    with tab2:
        tab_statistics.render(sidebar_state)
    with tab3:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
