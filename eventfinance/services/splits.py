"""Trainer split validation and payout amounts."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List

from ..messages import ServiceMessage
from ..models import TrainerSplit
from ..numbers import coerce_number

logger = logging.getLogger(__name__)

MAX_TOTAL_PERCENT = 100.0


@dataclass(frozen=True)
class SplitValidationResult:
    valid: bool
    total_percent: float
    errors: List[str]

    @property
    def messages(self) -> List[ServiceMessage]:
        return [ServiceMessage.error(error) for error in self.errors]


class SplitValidator:
    """Checks the business rules for the splits of one event.

    Percentages are independent of each other; only a total above 100 is an
    error, exactly 100 is fine. Errors are reported, never raised.
    """

    def __init__(self, max_total_percent: float = MAX_TOTAL_PERCENT) -> None:
        self._max_total = max_total_percent

    def validate(self, splits: Iterable[TrainerSplit]) -> SplitValidationResult:
        splits = list(splits)
        errors: List[str] = []
        total = total_percent(splits)

        if total > self._max_total:
            errors.append(f"Total percentage cannot exceed {self._max_total:g}%")

        for index, split in enumerate(splits, start=1):
            if not (split.name or "").strip():
                errors.append(f"Row {index}: Name is required")
            if coerce_number(split.percent, "percent") < 0:
                errors.append(f"Row {index}: Percentage cannot be negative")
            if coerce_number(split.cash_received, "cash_received") < 0:
                errors.append(f"Row {index}: Cash received cannot be negative")

        if errors:
            logger.info("Split validation failed with %d error(s)", len(errors))
        return SplitValidationResult(valid=not errors, total_percent=total, errors=errors)

    def apply(self, splits: Iterable[TrainerSplit], balance: float) -> List[TrainerSplit]:
        """Return copies of ``splits`` with trainer fee and payable filled in."""
        applied = []
        for split in splits:
            fee = balance * (coerce_number(split.percent, "percent") / 100)
            applied.append(
                replace(
                    split,
                    trainer_fee=fee,
                    payable=fee - coerce_number(split.cash_received, "cash_received"),
                )
            )
        return applied


def total_percent(splits: Iterable[TrainerSplit]) -> float:
    return sum(coerce_number(split.percent, "percent") for split in splits)


def remaining_percent(splits: Iterable[TrainerSplit]) -> float:
    return MAX_TOTAL_PERCENT - total_percent(splits)


def validate_splits(splits: Iterable[TrainerSplit]) -> SplitValidationResult:
    return SplitValidator().validate(splits)


def apply_splits(splits: Iterable[TrainerSplit], balance: float) -> List[TrainerSplit]:
    return SplitValidator().apply(splits, balance)
