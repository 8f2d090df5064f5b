"""Tab 1: Book Seats — seat map, seat selection and booking outcome."""

import streamlit as st

from components.charts import seat_map_heatmap
from components.metrics_cards import render_alert_card
from data.session_store import (
    add_my_booking_id, get_booking_service, get_last_result, get_my_booking_ids,
    get_selected_seats, set_last_result, set_selected_seats,
)
from models.booking import BookingRejection, BookingSuccess
from models.errors import SeatBookingError


def _render_result(result):
    if isinstance(result, BookingSuccess):
        render_alert_card(result.message, "warning" if result.last_resort else "success")
        st.caption(
            f"Booking ID `{result.booking_id}` — fragmentation "
            f"{result.fragmentation_before:.1f}% → {result.fragmentation_after:.1f}% "
            f"({result.fragmentation_increase:+.1f} pts)"
        )
    elif isinstance(result, BookingRejection):
        render_alert_card(f"{result.message} [{result.reason.value}]", "error")
        if result.isolated_seats:
            st.caption(f"Would isolate: {', '.join(result.isolated_seats)}")
        if result.suggestions:
            st.markdown("**Try instead:**")
            for s in result.suggestions:
                st.markdown(f"- {s}")


def render(sidebar_state):
    """Render the Book Seats tab."""
    st.header("Book Seats")

    service = get_booking_service()
    party_size = sidebar_state.party_size

    layout = service.get_hall_layout()
    bookable = service.get_available_seats(party_size)
    selected = [s for s in get_selected_seats() if s in bookable]

    col1, col2 = st.columns([3, 2])

    with col1:
        fig = seat_map_heatmap(layout, bookable, selected,
                               title=f"Seats bookable for a party of {party_size}")
        st.plotly_chart(fig, use_container_width=True)
        st.caption("Blue: bookable · Orange: taken · Grey: would strand a single seat · Yellow: selected")

    with col2:
        if not bookable:
            st.info(f"No block of {party_size} seats can be booked without stranding a single seat.")

        picked = st.multiselect(
            f"Choose {party_size} adjacent seat{'s' if party_size > 1 else ''}",
            options=bookable,
            default=selected,
            max_selections=party_size,
            key="booking_seat_picker",
        )
        if picked != selected:
            set_selected_seats(picked)

        manual = st.text_input(
            "…or type seat ids (comma separated, e.g. 0-3, 0-4)",
            key="booking_manual_ids",
        )

        if st.button("Book", type="primary", use_container_width=True):
            seat_ids = [s.strip() for s in manual.split(",") if s.strip()] if manual.strip() else picked
            try:
                result = service.book_seats(seat_ids, sidebar_state.customer_name)
            except SeatBookingError as e:
                st.error(str(e))
            else:
                set_last_result(result)
                if isinstance(result, BookingSuccess):
                    add_my_booking_id(result.booking_id)
                    set_selected_seats([])
                    st.session_state.pop("booking_seat_picker", None)
                st.rerun()

        result = get_last_result()
        if result is not None:
            st.divider()
            _render_result(result)

    st.divider()

    # --- This session's bookings ---
    st.subheader("My Bookings")
    booking_ids = get_my_booking_ids()
    if not booking_ids:
        st.caption("No bookings in this session.")
    for booking_id in reversed(booking_ids):
        booking = service.get_booking(booking_id)
        if booking is None:
            st.caption(f"`{booking_id}` — cleared by a hall reset")
            continue
        st.markdown(f"**{booking.customer_name}** · `{booking_id}` · seats {', '.join(booking.seat_ids)}")
