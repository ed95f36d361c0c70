# -*- coding: utf-8 -*-
"""Input validation for ledger commands."""

from __future__ import annotations

import re
from enum import Enum

from .errors import InvalidRequest

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class Nutrient(str, Enum):
    protein = "protein"
    carbs = "carbs"
    vegetables = "vegetables"
    fats = "fats"


NUTRIENTS = tuple(n.value for n in Nutrient)


def is_valid_date(date: str) -> bool:
    # Shape only and unanchored: "2026-13-99" and "2026-01-01T10:00" both pass.
    return _DATE_RE.search(date) is not None


def is_valid_nutrient(nutrient: str) -> bool:
    return nutrient in NUTRIENTS


def require_date(date: str) -> str:
    if not is_valid_date(date):
        raise InvalidRequest("invalid date")
    return date


def require_nutrient(nutrient: str) -> Nutrient:
    if not is_valid_nutrient(nutrient):
        raise InvalidRequest("invalid nutrient")
    return Nutrient(nutrient)
