# -*- coding: utf-8 -*-
"""Goal ledger — commands and queries over ``goal_events``."""

from __future__ import annotations

import logging
from typing import Dict

from ..db import EventStore, get_store
from ..ledger import Ledger, aggregate, append_negative_if_positive, append_positive
from ..validation import require_nutrient
from .models import GoalEventType

logger = logging.getLogger(__name__)

GOAL_LEDGER = Ledger(
    table="goal_events",
    subject_column="nutrient",
    positive=GoalEventType.inc.value,
    negative=GoalEventType.dec.value,
)


def increment_goal(nutrient: str, store: EventStore | None = None) -> int:
    subject = require_nutrient(nutrient)
    with (store or get_store()).gate() as conn:
        event_id = append_positive(conn, GOAL_LEDGER, subject.value)
    logger.debug("goal inc %s (event %d)", subject.value, event_id)
    return event_id


def decrement_goal(nutrient: str, store: EventStore | None = None) -> int:
    subject = require_nutrient(nutrient)
    with (store or get_store()).gate() as conn:
        event_id = append_negative_if_positive(
            conn,
            GOAL_LEDGER,
            subject.value,
            reason="can't decrease because the goal is already 0",
        )
    logger.debug("goal dec %s (event %d)", subject.value, event_id)
    return event_id


def query_goals(store: EventStore | None = None) -> Dict[str, int]:
    with (store or get_store()).gate() as conn:
        return aggregate(conn, GOAL_LEDGER)
