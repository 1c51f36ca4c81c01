"""Errors raised for programmer mistakes, never for bad row data."""
from __future__ import annotations


class UnsupportedCurrencyError(ValueError):
    """Raised when a currency code is missing from the active rate table."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Unsupported currency: {code!r}")
        self.code = code
