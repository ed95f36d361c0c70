# -*- coding: utf-8 -*-
"""Nutrient ledger — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from .models import DayPortions
from .storage import query_day, record_consumption, record_unconsumption

router = APIRouter(prefix="/days", tags=["Portions"])


@router.get("/{date}/portions", response_model=DayPortions, summary="Portions consumed on a date")
def get_portions_for_date(date: str):
    return DayPortions(query_day(date))


@router.post("/{date}/portions/{nutrient}/consume", response_model=str, summary="Record one consumed portion")
def consume_portion(date: str, nutrient: str):
    record_consumption(date, nutrient)
    return "success"


@router.post("/{date}/portions/{nutrient}/unconsume", response_model=str, summary="Take back one consumed portion")
def unconsume_portion(date: str, nutrient: str):
    record_unconsumption(date, nutrient)
    return "success"
