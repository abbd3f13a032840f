"""
Database Connection Manager

Provides access to the SQLite database that holds persisted settings.
Report rows are never written here; they live only in the session.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import sqlite3
import threading
from pathlib import Path
from typing import Optional, List, Dict, Any

from core import config
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class DatabaseManager:
    """
    Manages the SQLite connection for the worksheet.

    Provides:
    - Lazy SQLite connection
    - Settings key/value access
    - Schema initialization
    """

    def __init__(self, data_dir: Path = None):
        """
        Initialize database manager.

        Args:
            data_dir: Path to data directory (defaults to config.DATA_DIR)
        """
        if data_dir is None:
            data_dir = config.DATA_DIR

        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.sqlite_path = self.data_dir / config.SETTINGS_DB_NAME

        # Connection (lazy loaded)
        self._sqlite_conn: Optional[sqlite3.Connection] = None

    @property
    def sqlite(self) -> sqlite3.Connection:
        """Get SQLite connection (creates it and the schema if needed)."""
        if self._sqlite_conn is None:
            self._sqlite_conn = sqlite3.connect(str(self.sqlite_path))
            self._sqlite_conn.row_factory = sqlite3.Row
            logger.info(f"SQLite connection opened: {self.sqlite_path}")
            self.init_schema()
        return self._sqlite_conn

    def query_sqlite(self, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        """
        Execute SQL query on SQLite database.

        Args:
            sql: SQL query string
            params: Query parameters (for parameterized queries)

        Returns:
            List of rows as dictionaries
        """
        cursor = self.sqlite.execute(sql, params)
        columns = [desc[0] for desc in cursor.description] if cursor.description else []
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def execute_sqlite(self, sql: str, params: tuple = ()) -> int:
        """
        Execute SQL statement on SQLite (INSERT, UPDATE, DELETE).

        Returns:
            Number of affected rows
        """
        cursor = self.sqlite.execute(sql, params)
        self.sqlite.commit()
        return cursor.rowcount

    def get_setting(self, key: str) -> Optional[str]:
        """Read a single setting, None if it was never stored."""
        rows = self.query_sqlite("SELECT value FROM settings WHERE key = ?", (key,))
        return rows[0]['value'] if rows else None

    def set_setting(self, key: str, value: str):
        """Store (or overwrite) a single setting."""
        self.execute_sqlite(
            "INSERT OR REPLACE INTO settings (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)",
            (key, value)
        )

    def init_schema(self):
        """
        Initialize database schema.

        Creates tables:
        - settings: Application settings (theme preference)
        """
        schema_sql = """
        CREATE TABLE IF NOT EXISTS settings (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT DEFAULT CURRENT_TIMESTAMP
        );
        """
        self._sqlite_conn.executescript(schema_sql)
        self._sqlite_conn.commit()
        logger.debug("Database schema initialized (settings)")

    def close(self):
        """Close the database connection."""
        if self._sqlite_conn:
            self._sqlite_conn.close()
            self._sqlite_conn = None
            logger.info("SQLite connection closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


# Thread-local storage for database connections
_thread_local = threading.local()


def get_db(data_dir: Path = None) -> DatabaseManager:
    """
    Get thread-local DatabaseManager instance.

    Streamlit runs each script rerun on its own thread, and SQLite
    connections cannot be shared across threads.
    """
    if not hasattr(_thread_local, 'db_instance'):
        _thread_local.db_instance = DatabaseManager(data_dir)
    return _thread_local.db_instance
