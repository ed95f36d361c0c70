# -*- coding: utf-8 -*-
"""Event store — one SQLite connection behind a global lock.

Design notes:
- pure event sourcing: rows are only ever inserted, current values are
  aggregated on read
- PRIMARY KEY is id, not timestamp, so events captured in the same
  millisecond never collide
- every top-level operation holds the gate end to end, so a "read current
  value, decide, append" sequence needs no database transaction of its own
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .errors import StoreFailure

logger = logging.getLogger(__name__)

_NUTRIENT_CHECK = "('protein', 'carbs', 'vegetables', 'fats')"


def connect(db_path: Path, *, in_memory: bool = False) -> sqlite3.Connection:
    if in_memory:
        conn = sqlite3.connect(":memory:", check_same_thread=False)
    else:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the two append-only event tables if they are missing."""
    cur = conn.cursor()
    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS nutrient_events (
            id INTEGER PRIMARY KEY,
            timestamp INTEGER NOT NULL,
            name TEXT NOT NULL CHECK (name IN {_NUTRIENT_CHECK}),
            date TEXT NOT NULL,
            type TEXT NOT NULL CHECK (type IN ('consume', 'unconsume'))
        );
        """
    )
    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS goal_events (
            id INTEGER PRIMARY KEY,
            timestamp INTEGER NOT NULL,
            nutrient TEXT NOT NULL CHECK (nutrient IN {_NUTRIENT_CHECK}),
            type TEXT NOT NULL CHECK (type IN ('inc', 'dec'))
        );
        """
    )
    conn.commit()


class EventStore:
    """Owns the event store connection; only the gate holder may touch it."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    @classmethod
    def open(cls, db_path: Path, *, in_memory: bool = False) -> "EventStore":
        conn = connect(db_path, in_memory=in_memory)
        init_db(conn)
        return cls(conn)

    @contextmanager
    def gate(self) -> Iterator[sqlite3.Connection]:
        """Hold the store exclusively for one whole operation.

        Commits on normal exit, rolls back on any exception. SQLite errors are
        re-raised as StoreFailure; the lock is always released.
        """
        with self._lock:
            try:
                yield self._conn
                self._conn.commit()
            except sqlite3.Error as exc:
                self._rollback()
                logger.exception("Event store operation failed")
                raise StoreFailure() from exc
            except BaseException:
                self._rollback()
                raise

    def _rollback(self) -> None:
        # Never let a failed rollback replace the error already in flight.
        try:
            self._conn.rollback()
        except sqlite3.Error as exc:
            logger.warning("Event store rollback failed: %s", exc)

    def close(self) -> None:
        with self._lock:
            self._conn.close()


_store: Optional[EventStore] = None
_store_lock = threading.Lock()


def get_store() -> EventStore:
    """Process-wide store built from settings on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = EventStore.open(settings.db_path, in_memory=settings.in_memory)
            logger.info("Opened event store at %s", ":memory:" if settings.in_memory else settings.db_path)
        return _store


def reset_store(store: Optional[EventStore] = None) -> None:
    """Replace the process-wide store (tests open a fresh one per case)."""
    global _store
    with _store_lock:
        _store = store
