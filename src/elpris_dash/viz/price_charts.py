"""Plotly figure builder for the step chart."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import plotly.graph_objects as go

if TYPE_CHECKING:
    from ..services.engine import RenderInstructions

LINE_COLOR = "#f2c94c"
TEXT_COLOR = "#e0e0e0"
MUTED_TEXT_COLOR = "#a0a0b0"
BACKGROUND = "#1f1a3a"


def make_step_chart(instructions: Optional["RenderInstructions"], height: int = 400) -> go.Figure:
    """Draw the engine's instructions in pixel space.

    Both axes use the plot area's pixel coordinates; the y axis is reversed so
    y grows downwards as in the engine.
    """
    fig = go.Figure()

    if instructions is None:
        fig.add_annotation(text="No data to display", showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper")
        fig.update_layout(template="plotly_dark", height=height)
        return fig

    width = instructions.bounded_width
    bottom = instructions.bounded_height

    fig.add_shape(type="path", path=instructions.path, line=dict(color=LINE_COLOR, width=2))
    fig.add_shape(
        type="line",
        x0=instructions.highlight_x,
        x1=instructions.highlight_x,
        y0=0,
        y1=bottom,
        line=dict(color=TEXT_COLOR, width=1, dash="dash"),
    )
    r = instructions.marker_radius
    fig.add_shape(
        type="circle",
        x0=instructions.marker_x - r,
        x1=instructions.marker_x + r,
        y0=instructions.marker_y - r,
        y1=instructions.marker_y + r,
        line=dict(color=TEXT_COLOR, width=2),
        fillcolor=BACKGROUND,
    )

    for label in (instructions.min_label, instructions.max_label):
        fig.add_annotation(
            x=label.x,
            y=label.y + label.dy,
            text=label.text,
            showarrow=False,
            font=dict(color=MUTED_TEXT_COLOR),
        )

    fig.update_layout(
        template="plotly_dark",
        height=height,
        showlegend=False,
        margin=dict(l=40, r=10, t=10, b=30),
        plot_bgcolor=BACKGROUND,
        dragmode=False,
    )
    fig.update_xaxes(
        range=[0, width],
        tickvals=[x for x, _ in instructions.x_ticks],
        ticktext=[text for _, text in instructions.x_ticks],
        showgrid=False,
        zeroline=False,
        fixedrange=True,
    )
    fig.update_yaxes(
        range=[bottom, 0],
        tickvals=[y for y, _ in instructions.y_ticks],
        ticktext=[text for _, text in instructions.y_ticks],
        showgrid=True,
        gridcolor="rgba(255,255,255,0.08)",
        zeroline=False,
        fixedrange=True,
    )

    return fig
