# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the T-REX Tax Report project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Reusable UI Components
"""

from typing import List, Union

import pandas as pd
import streamlit as st

from modules.report.renderer import ReportRowView, SummaryView, EmptySummaryView, LatestResultView
from modules.report.session import ReportDisplay
from utils.logging_config import setup_logger, log_dataframe_info

logger = setup_logger(__name__)

TABLE_COLUMNS = ["#", "Book Income", "Taxable Income", "Tax Due / (Refund)", "Date"]


def render_kpi_board(metrics, title=None):
    """
    Render a KPI board as a single HTML block using CSS Grid.
    metrics: List of dicts with 'label', 'value', 'tone' (opt: 'due' / 'refund')
    """
    items_html = ""
    for m in metrics:
        tone = f" {m['tone']}" if m.get('tone') else ""
        items_html += '<div class="kpi-item">'
        items_html += f'<div class="kpi-label">{m["label"]}</div>'
        items_html += f'<div class="kpi-value{tone}">{m["value"]}</div>'
        items_html += '</div>'

    # Flatten string to avoid Markdown code block interpretation
    html = '<div class="kpi-board">'
    if title:
        html += f'<div class="kpi-header">{title}</div>'
    html += f'<div class="kpi-grid">{items_html}</div></div>'
    return html


def _tone(amount_label: str) -> str:
    return "refund" if amount_label.startswith("-") else "due"


def latest_result_html(view: LatestResultView) -> str:
    return render_kpi_board([
        {"label": "Taxable Income", "value": view.taxable_income},
        {"label": "Tax Before Payments", "value": view.tax_before_payments},
        {"label": "Tax Due / (Refund)", "value": view.tax_due, "tone": _tone(view.tax_due)},
    ], title="Latest Calculation")


def summary_html(view: Union[SummaryView, EmptySummaryView]) -> str:
    if isinstance(view, EmptySummaryView):
        return f'<div class="kpi-board"><div class="kpi-empty">{view.message}</div></div>'

    return render_kpi_board([
        {"label": "Rows in report", "value": str(view.count)},
        {"label": "Total Tax Due / (Refund)", "value": view.total_tax_due, "tone": _tone(view.total_tax_due)},
        {"label": "Average Taxable Income", "value": view.average_taxable_income},
    ], title="Report Summary")


def rows_to_dataframe(rows: List[ReportRowView]) -> pd.DataFrame:
    """Table rows as a display DataFrame (all values pre-formatted strings)."""
    df = pd.DataFrame(
        [[r.index, r.income, r.taxable_income, r.tax_due, r.date_label] for r in rows],
        columns=TABLE_COLUMNS
    )
    log_dataframe_info(logger, df, name="Report table")
    return df


class StreamlitDisplay(ReportDisplay):
    """
    Report display backed by Streamlit placeholders.

    Each show_* call replaces the placeholder contents, so a render is
    always a full redraw.
    """

    def __init__(self, latest_slot, table_slot, summary_slot):
        self.latest_slot = latest_slot
        self.table_slot = table_slot
        self.summary_slot = summary_slot

    def show_latest(self, view: LatestResultView):
        self.latest_slot.markdown(latest_result_html(view), unsafe_allow_html=True)

    def show_table(self, rows: List[ReportRowView]):
        if not rows:
            self.table_slot.empty()
            return
        self.table_slot.dataframe(
            rows_to_dataframe(rows),
            width='stretch',
            hide_index=True
        )

    def show_summary(self, view: Union[SummaryView, EmptySummaryView]):
        self.summary_slot.markdown(summary_html(view), unsafe_allow_html=True)


def create_display() -> StreamlitDisplay:
    """Lay out the three report placeholders in page order."""
    return StreamlitDisplay(st.empty(), st.empty(), st.empty())
