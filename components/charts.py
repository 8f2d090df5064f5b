"""Plotly chart builders for the seat map and hall statistics."""

import plotly.graph_objects as go
import pandas as pd
from typing import Iterable, List

from config.defaults import SEAT_COLORS
from models.booking import HallLayout
from models.seat import format_seat_id

# Seat map cell codes
OCCUPIED, BLOCKED, BOOKABLE, SELECTED = 0, 1, 2, 3


def seat_map_frame(layout: HallLayout, bookable: Iterable[str], selected: Iterable[str]) -> pd.DataFrame:
    """One row per seat with its display status."""
    bookable, selected = set(bookable), set(selected)
    rows = []
    for r in range(layout.rows):
        for s in range(layout.seats_per_row):
            seat_id = format_seat_id(r, s)
            if layout.occupied[r][s]:
                status = OCCUPIED
            elif seat_id in selected:
                status = SELECTED
            elif seat_id in bookable:
                status = BOOKABLE
            else:
                status = BLOCKED
            rows.append({"seat_id": seat_id, "row": r, "index": s, "status": status})
    return pd.DataFrame(rows)


def seat_map_heatmap(
    layout: HallLayout,
    bookable: Iterable[str],
    selected: Iterable[str] = (),
    title: str = "Seat Map",
) -> go.Figure:
    """Grid of seats coloured by occupied / not bookable / bookable / selected."""
    df = seat_map_frame(layout, bookable, selected)
    matrix = df.pivot(index="row", columns="index", values="status").values
    labels = df.pivot(index="row", columns="index", values="seat_id").values

    colors = [SEAT_COLORS["occupied"], SEAT_COLORS["blocked"], SEAT_COLORS["bookable"], SEAT_COLORS["selected"]]
    colorscale = []
    for i, c in enumerate(colors):
        colorscale.append([i / len(colors), c])
        colorscale.append([(i + 1) / len(colors), c])

    fig = go.Figure(data=go.Heatmap(
        z=matrix,
        x=[str(s + 1) for s in range(layout.seats_per_row)],
        y=[f"Row {r + 1}" for r in range(layout.rows)],
        text=labels,
        colorscale=colorscale,
        zmin=-0.5,
        zmax=len(colors) - 0.5,
        showscale=False,
        xgap=3,
        ygap=3,
        hovertemplate="Seat %{text}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Seat",
        yaxis=dict(autorange="reversed"),
        height=max(300, layout.rows * 45),
    )
    return fig


def utilization_donut(used: int, total: int, title: str = "Hall Utilization") -> go.Figure:
    """Donut chart showing overall seat utilization."""
    available = total - used
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Free"],
        values=[used, available],
        hole=0.6,
        marker_colors=[SEAT_COLORS["occupied"], SEAT_COLORS["bookable"]],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def row_occupancy_bar(layout: HallLayout, title: str = "Occupancy by Row") -> go.Figure:
    occupied: List[int] = [sum(row) for row in layout.occupied]
    df = pd.DataFrame({
        "Row": [f"Row {r + 1}" for r in range(layout.rows)],
        "Occupied": occupied,
        "Free": [layout.seats_per_row - o for o in occupied],
    })
    fig = go.Figure()
    fig.add_trace(go.Bar(name="Occupied", x=df["Row"], y=df["Occupied"], marker_color=SEAT_COLORS["occupied"]))
    fig.add_trace(go.Bar(name="Free", x=df["Row"], y=df["Free"], marker_color=SEAT_COLORS["bookable"]))
    fig.update_layout(barmode="stack", title=title, yaxis_title="Seats", height=350)
    return fig
