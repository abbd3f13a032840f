"""
Theme Preference

Light/dark theme choice persisted across sessions in the settings table.
Storage problems never break the worksheet: reads fall back to the
default theme and failed writes are logged.
"""

import sqlite3
from enum import Enum
from typing import Optional

from core import config
from core.db import DatabaseManager, get_db
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def normalize(cls, value: Optional[str]) -> 'Theme':
        """Map a stored value to a Theme; absent or unknown values are light."""
        if value is None:
            return cls(config.DEFAULT_THEME)
        try:
            return cls(value.strip().lower())
        except ValueError:
            logger.debug(f"Unknown theme value: {value!r}, using {config.DEFAULT_THEME}")
            return cls(config.DEFAULT_THEME)


def load_theme(db: Optional[DatabaseManager] = None) -> Theme:
    """Read the saved theme (light if none is stored)."""
    db = db or get_db()
    try:
        stored = db.get_setting(config.THEME_KEY)
    except sqlite3.Error as e:
        logger.warning(f"Could not read theme preference: {e}")
        stored = None
    return Theme.normalize(stored)


def save_theme(theme: Theme, db: Optional[DatabaseManager] = None) -> bool:
    """Persist the theme. Returns False if it could not be stored."""
    db = db or get_db()
    theme = Theme(theme)
    try:
        db.set_setting(config.THEME_KEY, theme.value)
    except sqlite3.Error as e:
        logger.warning(f"Could not save theme preference: {e}")
        return False
    logger.info(f"Theme preference saved: {theme.value}")
    return True
