"""Trainer fee, cash sales, balance and event profit calculations."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..config import (
    CASH_PAYMENT_METHOD,
    GROSS_FEE_TRAINER_KEYWORDS,
    JAPAN_COUNTRY_CODES,
    JAPAN_COUNTRY_MARKERS,
)
from ..messages import ServiceMessage
from ..models import (
    Commission,
    EventOverview,
    EventProfit,
    Expense,
    SupportedCurrency,
    Ticket,
)
from ..numbers import coerce_number
from .fx import CurrencyConverter

logger = logging.getLogger(__name__)


class FeeCalculator:
    """Computes the overview figures shown on an event report.

    ``price_total`` is already a line total, so neither the trainer fee nor the
    cash sales multiply it by the quantity again.
    """

    def __init__(
        self,
        cash_payment_method: str = CASH_PAYMENT_METHOD,
        gross_fee_trainer_keywords: Sequence[str] | None = None,
    ) -> None:
        self._cash_payment_method = cash_payment_method
        if gross_fee_trainer_keywords is None:
            gross_fee_trainer_keywords = GROSS_FEE_TRAINER_KEYWORDS
        self._gross_fee_keywords = tuple(k.lower() for k in gross_fee_trainer_keywords)

    def compute_overview(
        self,
        tickets: Iterable[Ticket],
        commission: Optional[Commission] = None,
        trainer_name: Optional[str] = None,
    ) -> EventOverview:
        tickets = list(tickets)
        commission = commission or Commission()
        gross_fee = self.is_gross_fee_trainer(trainer_name)

        trainer_fee = 0.0
        cash_sales = 0.0
        for ticket in tickets:
            price_total = coerce_number(ticket.price_total, "price_total")
            if gross_fee:
                trainer_fee += price_total
            else:
                trainer_fee += price_total * coerce_number(ticket.trainer_fee_pct, "trainer_fee_pct")
            if ticket.payment_method == self._cash_payment_method:
                cash_sales += price_total

        balance = trainer_fee - cash_sales
        # Commissions are reported but not deducted from the payable.
        payable = balance

        logger.info(
            "Overview for %d tickets: fee=%.2f cash=%.2f balance=%.2f",
            len(tickets),
            trainer_fee,
            cash_sales,
            balance,
        )
        return EventOverview(
            trainer_fee=trainer_fee,
            cash_sales=cash_sales,
            grace_commission=coerce_number(commission.grace, "grace commission"),
            nanna_fee=coerce_number(commission.nanna, "nanna fee"),
            balance=balance,
            payable_to_trainer=payable,
        )

    def is_gross_fee_trainer(self, trainer_name: Optional[str]) -> bool:
        if not isinstance(trainer_name, str) or not trainer_name:
            return False
        name = trainer_name.lower()
        return any(keyword in name for keyword in self._gross_fee_keywords)


def compute_overview(
    tickets: Iterable[Ticket],
    commission: Optional[Commission] = None,
    trainer_name: Optional[str] = None,
) -> EventOverview:
    return FeeCalculator().compute_overview(tickets, commission, trainer_name)


def event_currency_for_country(country: Optional[str]) -> SupportedCurrency:
    """Japanese events are reported in JPY, everything else in EUR."""
    if isinstance(country, str):
        lowered = country.strip().lower()
        if lowered in JAPAN_COUNTRY_CODES or any(m in lowered for m in JAPAN_COUNTRY_MARKERS):
            return SupportedCurrency.JPY
    return SupportedCurrency.EUR


def validate_expenses(expenses: Iterable[Expense]) -> List[str]:
    errors: List[str] = []
    for index, expense in enumerate(expenses, start=1):
        if not (expense.description or "").strip():
            errors.append(f"Row {index}: Description is required")
        if coerce_number(expense.amount, "expense amount") < 0:
            errors.append(f"Row {index}: Amount cannot be negative")
    return errors


def compute_event_profit(
    tickets: Iterable[Ticket],
    expenses: Iterable[Expense],
    currency: SupportedCurrency | str = SupportedCurrency.EUR,
    converter: CurrencyConverter | None = None,
) -> EventProfit:
    """Revenue minus expenses, with every expense converted to ``currency``."""
    converter = converter or CurrencyConverter()
    target = converter.parse_currency(currency)
    messages: List[ServiceMessage] = []

    revenue = sum(coerce_number(ticket.price_total, "price_total") for ticket in tickets)

    total_expenses = 0.0
    for expense in expenses:
        amount = coerce_number(expense.amount, "expense amount")
        source = converter.parse_currency(expense.currency or SupportedCurrency.EUR)
        converted = converter.convert(amount, source, target)
        if source != target:
            messages.append(
                ServiceMessage.info(
                    f"{expense.description}: {converter.format_amount(amount, source)}"
                    f" → {converter.format_amount(converted, target)}",
                )
            )
        total_expenses += converted

    profit = revenue - total_expenses
    logger.info(
        "Event profit in %s: revenue=%.2f expenses=%.2f profit=%.2f",
        target.value,
        revenue,
        total_expenses,
        profit,
    )
    return EventProfit(
        revenue=revenue,
        expenses=total_expenses,
        profit=profit,
        currency=target,
        messages=messages,
    )
