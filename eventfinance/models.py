"""Domain models for the event finance engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .messages import ServiceMessage


class SupportedCurrency(str, Enum):
    EUR = "EUR"
    JPY = "JPY"
    USD = "USD"
    GBP = "GBP"
    AUD = "AUD"
    CAD = "CAD"
    CHF = "CHF"


@dataclass(frozen=True)
class CurrencyInfo:
    """Rate against EUR plus the display conventions of one currency."""

    code: SupportedCurrency
    rate: float
    symbol: str
    locale: str
    decimals: int = 2
    label: str = ""
    group_separator: str = ","
    decimal_separator: str = "."
    symbol_after: bool = False
    symbol_space: bool = False
    # Symbol used by locale-styled strings when it differs from the table symbol.
    locale_symbol: str = ""


@dataclass(frozen=True)
class Ticket:
    """One sold ticket line as read from storage."""

    attendance: str
    payment_method: Optional[str]
    tier_level: Optional[str]
    unit_price: float
    price_total: float
    trainer_fee_pct: float
    quantity: int
    currency: Optional[str] = None


@dataclass
class SummaryRow:
    """Aggregation bucket for one (attendance, payment method, tier) group."""

    attendance: str
    payment_method: Optional[str]
    tier_level: Optional[str]
    unit_price: float
    price_total: float
    trainer_fee_pct: float
    sum_quantity: int = 0
    sum_price_total: float = 0.0
    sum_trainer_fee: float = 0.0


@dataclass(frozen=True)
class Commission:
    grace: float = 0.0
    nanna: float = 0.0


@dataclass(frozen=True)
class TrainerSplit:
    """A named share of an event payout."""

    name: str
    percent: float
    cash_received: float = 0.0
    trainer_fee: float = 0.0
    payable: float = 0.0
    prod_id: Optional[int] = None
    row_id: Optional[int] = None


@dataclass(frozen=True)
class EventOverview:
    trainer_fee: float
    cash_sales: float
    grace_commission: float
    nanna_fee: float
    balance: float
    payable_to_trainer: float


@dataclass(frozen=True)
class Expense:
    description: str
    amount: float
    currency: str = SupportedCurrency.EUR.value


@dataclass(frozen=True)
class EventProfit:
    """Revenue, expenses and profit expressed in the event currency."""

    revenue: float
    expenses: float
    profit: float
    currency: SupportedCurrency
    messages: List[ServiceMessage] = field(default_factory=list)
