# -*- coding: utf-8 -*-
"""Ledger descriptors and the signed-sum aggregation shared by both ledgers.

A ledger is an append-only table of events, each tagged with a subject
(nutrient), an optional scope (date) and a polarity kind. The current value
for a subject is the number of positive events minus the number of negative
events; it is never stored.
"""

from __future__ import annotations

import sqlite3
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import InvalidRequest


@dataclass(frozen=True)
class Ledger:
    table: str
    subject_column: str
    positive: str
    negative: str
    scope_column: Optional[str] = None

    @property
    def signed_sum(self) -> str:
        return f"SUM(CASE type WHEN '{self.positive}' THEN 1 ELSE -1 END)"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _scope_filter(ledger: Ledger, scope: Optional[str]) -> Tuple[List[str], List[str]]:
    clauses: List[str] = []
    params: List[str] = []
    if ledger.scope_column is not None:
        if scope is None:
            raise ValueError(f"{ledger.table} is scoped; a scope value is required")
        clauses.append(f"{ledger.scope_column} = ?")
        params.append(scope)
    return clauses, params


def aggregate(conn: sqlite3.Connection, ledger: Ledger, scope: Optional[str] = None) -> Dict[str, int]:
    """Current value per subject within ``scope``.

    Subjects without any event in scope are omitted, so an empty scope
    yields ``{}``. A subject whose events cancel out is reported as 0.
    """
    clauses, params = _scope_filter(ledger, scope)
    where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
    rows = conn.execute(
        f"SELECT {ledger.subject_column}, {ledger.signed_sum} FROM {ledger.table}{where} "
        f"GROUP BY {ledger.subject_column}",
        params,
    ).fetchall()
    return {str(row[0]): int(row[1]) for row in rows}


def current_value(
    conn: sqlite3.Connection,
    ledger: Ledger,
    subject: str,
    scope: Optional[str] = None,
) -> Optional[int]:
    """Current value for one subject, or None when it has no events in scope."""
    clauses, params = _scope_filter(ledger, scope)
    clauses.append(f"{ledger.subject_column} = ?")
    params.append(subject)
    row = conn.execute(
        f"SELECT {ledger.signed_sum} FROM {ledger.table} WHERE {' AND '.join(clauses)}",
        params,
    ).fetchone()
    if row is None or row[0] is None:
        return None
    return int(row[0])


def append_event(
    conn: sqlite3.Connection,
    ledger: Ledger,
    kind: str,
    subject: str,
    scope: Optional[str] = None,
) -> int:
    """Insert one event and return its id."""
    columns = ["timestamp", ledger.subject_column, "type"]
    values: List[object] = [_now_ms(), subject, kind]
    if ledger.scope_column is not None:
        if scope is None:
            raise ValueError(f"{ledger.table} is scoped; a scope value is required")
        columns.append(ledger.scope_column)
        values.append(scope)
    placeholders = ", ".join("?" for _ in columns)
    cur = conn.execute(
        f"INSERT INTO {ledger.table} ({', '.join(columns)}) VALUES ({placeholders})",
        values,
    )
    return int(cur.lastrowid)


def append_positive(conn: sqlite3.Connection, ledger: Ledger, subject: str, scope: Optional[str] = None) -> int:
    return append_event(conn, ledger, ledger.positive, subject, scope)


def append_negative_if_positive(
    conn: sqlite3.Connection,
    ledger: Ledger,
    subject: str,
    scope: Optional[str] = None,
    *,
    reason: str,
) -> int:
    """Append a negative event only while the current value is above zero.

    Must run inside the store gate: the check and the insert rely on no other
    operation touching the ledger in between. A subject with no events counts
    as zero here.
    """
    count = current_value(conn, ledger, subject, scope)
    if count is None or count <= 0:
        raise InvalidRequest(reason)
    return append_event(conn, ledger, ledger.negative, subject, scope)
