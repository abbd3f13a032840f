# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the T-REX Tax Report project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
T-REX Tax Report - Streamlit Application

A tax worksheet with:
- Taxable income / tax due calculation from seven inputs
- In-session report of every calculation with summary statistics
- JSON and PDF export of the full report
- Persisted light/dark theme
"""

import sys
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st

from core import config
from lib.preferences import Theme
from modules.report.session import ReportSession
from app.charts.visualizations import create_tax_due_chart
from app.ui.components import create_display
from app.ui.sidebar import init_theme, render_theme_toggle, render_export_controls
from app.ui.styles import get_app_style
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# (form key, label, step, format)
INPUT_FIELDS = [
    ("income", "Book Income", 1000.0, "%.2f"),
    ("addbacks", "Addbacks", 100.0, "%.2f"),
    ("tempDiff", "Temporary Differences", 100.0, "%.2f"),
    ("deductions", "Deductions", 100.0, "%.2f"),
    ("nol", "Net Operating Loss (NOL)", 100.0, "%.2f"),
    ("taxRate", "Tax Rate (e.g. 0.21)", 0.01, "%.4f"),
    ("payments", "Estimated Payments", 100.0, "%.2f"),
]


def get_session() -> ReportSession:
    """One ReportSession per browser session."""
    if 'report_session' not in st.session_state:
        st.session_state.report_session = ReportSession()
        logger.info("New report session started")
    return st.session_state.report_session


def render_input_form() -> dict:
    """Draw the seven inputs; blank fields come back as None."""
    values = {}
    cols = st.columns(2)
    for i, (key, label, step, fmt) in enumerate(INPUT_FIELDS):
        with cols[i % 2]:
            values[key] = st.number_input(
                label,
                value=None,
                step=step,
                format=fmt,
                placeholder="0",
                key=key
            )
    return values


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=config.APP_TITLE,
        page_icon="🦖",
        layout="wide"
    )

    theme = init_theme()
    st.markdown(get_app_style(theme), unsafe_allow_html=True)

    session = get_session()
    render_theme_toggle()

    st.title(config.APP_TITLE)
    st.caption("Taxable income = income + addbacks + temporary differences - deductions - NOL")

    values = render_input_form()
    calculate_clicked = st.button("Calculate & Add to Report", type="primary", key="calc_button")

    st.divider()
    display = create_display()

    if calculate_clicked:
        session.calculate(values, display=display)
    else:
        session.render(display)

    if session.exports_enabled:
        st.plotly_chart(
            create_tax_due_chart(session.store, dark_mode=theme == Theme.DARK),
            config={'displayModeBar': 'hover', 'displaylogo': False},
            key="tax_due_chart"
        )

    render_export_controls(session)


if __name__ == "__main__":
    main()
