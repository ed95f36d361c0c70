# -*- coding: utf-8 -*-
"""Nutrient ledger — commands and queries over ``nutrient_events``."""

from __future__ import annotations

import logging
from typing import Dict

from ..db import EventStore, get_store
from ..ledger import Ledger, aggregate, append_negative_if_positive, append_positive
from ..validation import require_date, require_nutrient
from .models import NutrientEventType

logger = logging.getLogger(__name__)

NUTRIENT_LEDGER = Ledger(
    table="nutrient_events",
    subject_column="name",
    positive=NutrientEventType.consume.value,
    negative=NutrientEventType.unconsume.value,
    scope_column="date",
)


def record_consumption(date: str, nutrient: str, store: EventStore | None = None) -> int:
    require_date(date)
    subject = require_nutrient(nutrient)
    with (store or get_store()).gate() as conn:
        event_id = append_positive(conn, NUTRIENT_LEDGER, subject.value, date)
    logger.debug("consume %s on %s (event %d)", subject.value, date, event_id)
    return event_id


def record_unconsumption(date: str, nutrient: str, store: EventStore | None = None) -> int:
    require_date(date)
    subject = require_nutrient(nutrient)
    with (store or get_store()).gate() as conn:
        event_id = append_negative_if_positive(
            conn,
            NUTRIENT_LEDGER,
            subject.value,
            date,
            reason="can't unconsume because the count is already 0",
        )
    logger.debug("unconsume %s on %s (event %d)", subject.value, date, event_id)
    return event_id


def query_day(date: str, store: EventStore | None = None) -> Dict[str, int]:
    # The date is not validated here: a malformed date simply matches no events.
    with (store or get_store()).gate() as conn:
        return aggregate(conn, NUTRIENT_LEDGER, date)
