# -*- coding: utf-8 -*-
"""Error kinds raised by the ledgers."""

from __future__ import annotations


class PortionsError(Exception):
    """Base class for portions errors."""


class InvalidRequest(PortionsError):
    """Caller input failed a precondition (bad date, unknown nutrient, count already 0)."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"invalid request: {self.reason}"


class StoreFailure(PortionsError):
    """The event store failed unexpectedly.

    The message is deliberately generic; the underlying error is kept on
    ``__cause__`` for logging only.
    """

    def __str__(self) -> str:
        return "database error"
