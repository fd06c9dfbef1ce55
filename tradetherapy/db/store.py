"""SQLite data store for Post-Trade Therapy."""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from tradetherapy.db.codec import dump_trades, parse_trades
from tradetherapy.models import Trade

logger = logging.getLogger(__name__)


class DataStore:
    """SQLite-backed key/value store holding the trade journal.

    The whole trade sequence is stored under a single key, so every
    save replaces the previous one (last write wins).
    """

    REQUIRED_TABLES = ["records"]

    TRADES_KEY = "postTradeTherapy"

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS records (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Raw records ====================

    def get_value(self, key: str) -> Optional[str]:
        """Get the raw value stored under a key.

        Args:
            key: Record key.

        Returns:
            Stored text, or None if the key is absent or unreadable.
        """
        try:
            conn = self._get_connection()
        except sqlite3.Error as e:
            logger.warning("Could not open %s: %s", self.db_path, e)
            return None
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM records WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        except sqlite3.Error as e:
            logger.warning("Could not read record %r: %s", key, e)
            return None
        finally:
            conn.close()

    def set_value(self, key: str, value: str) -> None:
        """Store a raw value under a key, replacing any previous value.

        Args:
            key: Record key.
            value: Text to store.
        """
        try:
            conn = self._get_connection()
        except sqlite3.Error as e:
            logger.warning("Could not open %s: %s", self.db_path, e)
            return
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO records (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not write record %r: %s", key, e)
        finally:
            conn.close()

    # ==================== Trades ====================

    def load_trades(self) -> list[Trade]:
        """Load the trade journal.

        Returns:
            Trades in journal order. Missing or malformed content
            yields an empty list.
        """
        raw = self.get_value(self.TRADES_KEY)
        if raw is None:
            return []

        trades = parse_trades(raw)
        if trades is None:
            logger.warning("Ignoring unreadable journal in %s", self.db_path)
            return []
        return trades

    def save_trades(self, trades: list[Trade]) -> None:
        """Replace the stored trade journal.

        Args:
            trades: Trades in journal order.
        """
        self.set_value(self.TRADES_KEY, dump_trades(trades))
        logger.debug("Saved %d trades to %s", len(trades), self.db_path)
