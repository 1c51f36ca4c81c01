"""Numeric helpers shared by the calculation services."""
from __future__ import annotations

import logging
import re
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_number(value: object, field: str = "value") -> float:
    """Return ``value`` as float, treating None, NaN and junk as 0."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric %s %r coerced to 0", field, value)
        return 0.0
    if pd.isna(number):
        logger.warning("Missing %s coerced to 0", field)
        return 0.0
    return number


def normalize_label(value: Optional[str]) -> str:
    """Grouping/sorting form of an optional label: None becomes ''."""
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves towards +infinity."""
    shifted = Decimal(str(value)) + Decimal("0.5")
    return float(shifted.to_integral_value(rounding=ROUND_FLOOR))


def quantize_half_up(value: float, decimals: int) -> Decimal:
    """Round the decimal form of ``value``, halves away from zero."""
    return Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_grouped(value: float, decimals: int, group_separator: str, decimal_separator: str) -> str:
    text = f"{quantize_half_up(value, decimals):,.{decimals}f}"
    return (
        text.replace(",", "\0")
        .replace(".", decimal_separator)
        .replace("\0", group_separator)
    )


def parse_german_decimal(value: Optional[str]) -> float:
    """Parse ``"12,5"`` style input.

    Like a browser ``parseFloat`` only the leading number counts, so
    ``"12,5 %"`` gives 12.5; input without a leading number gives 0.
    """
    if not value:
        return 0.0
    match = _LEADING_NUMBER.match(str(value).strip().replace(",", ".", 1))
    if match is None:
        return 0.0
    return float(match.group())


def format_german_decimal(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}".replace(".", ",")


def format_percentage(fraction: float) -> str:
    """``0.125`` -> ``"12,5%"``."""
    return f"{format_german_decimal(fraction * 100, 1)}%"
