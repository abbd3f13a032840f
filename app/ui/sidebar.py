# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the T-REX Tax Report project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

import streamlit as st

from core import config
from lib.preferences import Theme, load_theme, save_theme
from modules.report.session import ReportSession, ExportFormat
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

EXPORT_FILENAMES = {
    ExportFormat.JSON: config.JSON_FILENAME,
    ExportFormat.PDF: config.PDF_FILENAME,
}

EXPORT_LABELS = {
    ExportFormat.JSON: "📥 Download JSON",
    ExportFormat.PDF: "📄 Download PDF",
}


def init_theme() -> Theme:
    """Load the saved theme once per session."""
    if 'theme' not in st.session_state:
        st.session_state.theme = load_theme()
        logger.info(f"Theme loaded: {st.session_state.theme.value}")
    return st.session_state.theme


def _on_theme_toggle():
    theme = Theme.DARK if st.session_state.dark_mode else Theme.LIGHT
    st.session_state.theme = theme
    save_theme(theme)


def render_theme_toggle():
    """Dark mode switch; every change is persisted."""
    with st.sidebar:
        st.markdown("### DISPLAY")
        st.toggle(
            "Dark Mode",
            value=st.session_state.theme == Theme.DARK,
            key="dark_mode",
            on_change=_on_theme_toggle
        )


def render_export_controls(session: ReportSession):
    """
    Download buttons for the full report.

    Buttons are disabled while the report is empty.
    """
    with st.sidebar:
        st.markdown("### EXPORT REPORT")

        for fmt, label in EXPORT_LABELS.items():
            artifact = None
            if session.exports_enabled:
                artifact = session.export(fmt, notify=st.error)

            st.download_button(
                label=label,
                data=artifact.data if artifact else b"",
                file_name=artifact.filename if artifact else EXPORT_FILENAMES[fmt],
                mime=artifact.mime_type if artifact else None,
                disabled=artifact is None,
                key=f"export_{fmt.value}"
            )

        if not session.exports_enabled:
            st.caption("Add a calculation to enable exports.")
