# -*- coding: utf-8 -*-
"""Goal ledger — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from .models import GoalPortions
from .storage import decrement_goal, increment_goal, query_goals

router = APIRouter(prefix="/goals", tags=["Goals"])


@router.get("", response_model=GoalPortions, summary="Daily goals per nutrient")
def get_goals():
    return GoalPortions(query_goals())


@router.post("/portions/{nutrient}/inc", response_model=str, summary="Raise a nutrient goal by one portion")
def inc_goal(nutrient: str):
    increment_goal(nutrient)
    return "success"


@router.post("/portions/{nutrient}/dec", response_model=str, summary="Lower a nutrient goal by one portion")
def dec_goal(nutrient: str):
    decrement_goal(nutrient)
    return "success"
