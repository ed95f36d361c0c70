# -*- coding: utf-8 -*-
"""Nutrient ledger (consume/unconsume events per day)."""
