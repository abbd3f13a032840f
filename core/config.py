"""
T-REX Configuration

Static settings for the tax worksheet plus the few values that can be
overridden from the environment.

Environment:
    TREX_DATA_DIR: Directory holding the settings database (default ./data)
    LOG_LEVEL: Log level for all module loggers (default INFO)

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
from pathlib import Path

APP_TITLE = "T-REX Tax Report"

# Data directory for the settings database
DATA_DIR = Path(os.getenv("TREX_DATA_DIR", Path(__file__).parent.parent / "data"))
SETTINGS_DB_NAME = "trex.db"

# Theme preference
THEME_KEY = "trex-theme"
DEFAULT_THEME = "light"

# Export artifacts
JSON_FILENAME = "trex_report.json"
JSON_MIME_TYPE = "application/json"
JSON_INDENT = 2

PDF_FILENAME = "trex_report.pdf"
PDF_MIME_TYPE = "application/pdf"

# PDF layout (A4, millimetres)
PDF_LEFT_MARGIN = 10
PDF_TITLE_Y = 15
PDF_TITLE_FONT_SIZE = 16
PDF_BODY_FONT_SIZE = 11
PDF_START_Y = 25
PDF_LINE_HEIGHT = 6
PDF_PAGE_BREAK_Y = 270   # start a new page once y passes this
PDF_NEW_PAGE_Y = 20

# User-facing messages
EMPTY_REPORT_MESSAGE = "No report data yet."
EMPTY_EXPORT_MESSAGE = "No report data to export yet."
