# -*- coding: utf-8 -*-
"""Portions tracker — event-sourced nutrient and goal ledgers behind a small HTTP API."""

__version__ = "0.1.0"
