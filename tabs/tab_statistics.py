"""Tab 2: Statistics — utilization, fragmentation and booking history."""

import streamlit as st

from components.charts import row_occupancy_bar, utilization_donut
from components.metrics_cards import render_statistics_row
from components.tables import render_attempts_table
from data.session_store import get_booking_service


def render(sidebar_state):
    """Render the Statistics tab."""
    st.header("Statistics")

    service = get_booking_service()
    stats = service.get_statistics()
    layout = service.get_hall_layout()

    render_statistics_row(stats)

    st.divider()

    col1, col2 = st.columns([2, 3])
    with col1:
        st.plotly_chart(utilization_donut(stats.occupied_seats, stats.total_seats), use_container_width=True)
    with col2:
        st.plotly_chart(row_occupancy_bar(layout), use_container_width=True)

    st.divider()

    st.subheader("Recent Attempts")
    render_attempts_table(service.get_recent_attempts(limit=50))
