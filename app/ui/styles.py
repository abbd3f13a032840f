# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the T-REX Tax Report project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens

BASE_STYLE is always injected; LIGHT_TOKENS / DARK_TOKENS switch the
palette for the saved theme.
"""

from lib.preferences import Theme

LIGHT_TOKENS = """
    :root {
        --bg-color: #f7f9fc;
        --card-bg: #ffffff;
        --card-border: rgba(31, 69, 110, 0.18);
        --text-primary: #1c2430;
        --text-secondary: #5a6778;
        --accent-primary: #1F456E;
        --refund-color: #15803d;
        --due-color: #b91c1c;
    }
"""

DARK_TOKENS = """
    :root {
        --bg-color: #12161f;
        --card-bg: rgba(28, 34, 45, 0.65);
        --card-border: rgba(75, 125, 163, 0.35);
        --text-primary: #ecf3fa;
        --text-secondary: #a8b5c8;
        --accent-primary: #4B7DA3;
        --refund-color: #34d399;
        --due-color: #f87171;
    }

    .stApp {
        background-color: var(--bg-color);
        color: var(--text-primary);
    }

    .stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p {
        color: var(--text-primary) !important;
    }

    [data-testid="stSidebar"] {
        background-color: rgba(23, 28, 38, 0.95) !important;
        border-right: 1px solid var(--card-border);
    }
"""

BASE_STYLE = """
    /* Import Professional Fonts */
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=JetBrains+Mono:wght@400;500;700&display=swap');

    :root {
        --font-primary: 'Inter', sans-serif;
        --font-mono: 'JetBrains Mono', monospace;
        --font-size-sm: 0.75rem;
        --font-size-lg: 1.1rem;
        --font-size-xl: 1.25rem;
    }

    .block-container {
        padding-top: 3rem !important;
        padding-bottom: 3rem !important;
    }

    .kpi-board {
        background-color: var(--card-bg);
        border: 1px solid var(--card-border);
        border-radius: 10px;
        padding: 1rem;
        margin-bottom: 1.5rem;
    }

    .kpi-header {
        font-family: var(--font-mono);
        font-size: var(--font-size-lg);
        font-weight: 600;
        color: var(--text-primary);
        margin-bottom: 1rem;
    }

    .kpi-grid {
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 0.5rem;
    }

    .kpi-item {
        border-left: 1px solid var(--card-border);
        padding: 0.25rem 0.85rem 0.25rem 1.25rem;
        min-height: 50px;
    }

    .kpi-label {
        font-family: var(--font-primary);
        font-size: var(--font-size-sm);
        color: var(--text-secondary);
        text-transform: uppercase;
        letter-spacing: 0.05em;
        white-space: nowrap;
    }

    .kpi-value {
        font-family: var(--font-mono);
        font-size: var(--font-size-xl);
        font-weight: 700;
        color: var(--text-primary);
        font-variant-numeric: tabular-nums;
    }

    .kpi-value.refund { color: var(--refund-color); }
    .kpi-value.due { color: var(--due-color); }

    .kpi-empty {
        color: var(--text-secondary);
        font-style: italic;
    }
"""


def get_app_style(theme: Theme) -> str:
    """Full <style> block for the given theme."""
    tokens = DARK_TOKENS if theme == Theme.DARK else LIGHT_TOKENS
    return f"<style>{BASE_STYLE}{tokens}</style>"
