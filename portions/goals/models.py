# -*- coding: utf-8 -*-
"""Goal ledger — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import RootModel


class GoalEventType(str, Enum):
    inc = "inc"
    dec = "dec"


class GoalPortions(RootModel[Dict[str, int]]):
    """Daily goal per nutrient. Nutrients without any goal event are absent."""
