# -*- coding: utf-8 -*-
"""Nutrient ledger — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import RootModel


class NutrientEventType(str, Enum):
    consume = "consume"
    unconsume = "unconsume"


class DayPortions(RootModel[Dict[str, int]]):
    """Portions consumed on one date, keyed by nutrient. Nutrients never touched that day are absent."""
