"""Visualization components using Plotly for interactive charts."""

from typing import Iterable

import plotly.graph_objects as go

from modules.tax.records import CalculationRecord
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# ========================================
# CHART STYLING CONSTANTS
# ========================================

CHART_HEIGHT = 320

CHART_TITLE_FONT = dict(size=16, family="JetBrains Mono")

CHART_HOVER_LABEL = dict(
    bgcolor='rgba(17, 24, 39, 0.95)',
    bordercolor='#4B7DA3',
    font_size=13,
    font_family='JetBrains Mono'
)

DUE_COLOR = 'rgba(185, 28, 28, 0.70)'
REFUND_COLOR = 'rgba(16, 185, 129, 0.70)'


def create_tax_due_chart(
    records: Iterable[CalculationRecord],
    title: str = "Tax Due / (Refund) by Row",
    dark_mode: bool = False
) -> go.Figure:
    """
    Bar chart of tax due per report row; refunds (negative) in green.

    Returns an empty figure for an empty report.
    """
    rows = list(records)
    if not rows:
        return go.Figure()

    labels = [f"#{i}" for i in range(1, len(rows) + 1)]
    values = [float(r.tax_due) for r in rows]
    colors = [REFUND_COLOR if v < 0 else DUE_COLOR for v in values]

    fig = go.Figure(go.Bar(
        x=labels,
        y=values,
        marker_color=colors,
        hovertemplate='<b>Row %{x}</b>: %{y:,.2f}<extra></extra>',
        hoverlabel=CHART_HOVER_LABEL
    ))

    font_color = "#9CA3AF" if dark_mode else "#374151"
    fig.update_layout(
        title=dict(text=title, font=CHART_TITLE_FONT),
        height=CHART_HEIGHT,
        margin=dict(t=50, b=30, l=10, r=10),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter", color=font_color),
        yaxis=dict(tickformat=",.0f", zeroline=True),
        showlegend=False
    )

    logger.debug(f"Tax due chart: {len(rows)} bars")
    return fig
