"""Reusable KPI metric card widgets."""

import streamlit as st

from models.statistics import HallStatistics


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_statistics_row(stats: HallStatistics):
    render_metric_row([
        {"label": "Bookings", "value": f"{stats.total_bookings:,}"},
        {"label": "Prevented", "value": f"{stats.rejected_bookings:,}",
         "delta": "fragmenting requests" if stats.rejected_bookings else None, "delta_color": "off"},
        {"label": "Occupied", "value": f"{stats.occupied_seats} / {stats.total_seats}"},
        {"label": "Utilization", "value": f"{stats.utilization_pct:.1f}%"},
        {"label": "Fragmentation", "value": f"{stats.fragmentation_pct:.1f}%",
         "delta": "isolated free seats" if stats.fragmentation_pct > 0 else None, "delta_color": "inverse"},
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    elif level == "success":
        st.success(message, icon="🟢")
    else:
        st.info(message, icon="🔵")
