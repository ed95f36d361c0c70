# -*- coding: utf-8 -*-
"""Goal ledger (inc/dec events per nutrient)."""
