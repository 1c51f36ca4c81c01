"""Event finance domain package."""

from .config import CASH_PAYMENT_METHOD, DEFAULT_CURRENCY_TABLE
from .errors import UnsupportedCurrencyError
from .messages import MessageLevel, ServiceMessage
from .models import (
    Commission,
    CurrencyInfo,
    EventOverview,
    EventProfit,
    Expense,
    SummaryRow,
    SupportedCurrency,
    Ticket,
    TrainerSplit,
)
from .repositories import EventRepository
from .services import (
    CurrencyConverter,
    FeeCalculator,
    LiveRatesService,
    SplitValidationResult,
    SplitValidator,
    TicketAggregator,
    aggregate_tickets,
    apply_splits,
    compute_event_profit,
    compute_overview,
    convert_currency,
    event_currency_for_country,
    format_amount,
    format_currency,
    summary_frame,
    summary_totals,
    validate_expenses,
    validate_splits,
)

__all__ = [
    "CASH_PAYMENT_METHOD",
    "Commission",
    "CurrencyConverter",
    "CurrencyInfo",
    "DEFAULT_CURRENCY_TABLE",
    "EventOverview",
    "EventProfit",
    "EventRepository",
    "Expense",
    "FeeCalculator",
    "LiveRatesService",
    "MessageLevel",
    "ServiceMessage",
    "SplitValidationResult",
    "SplitValidator",
    "SummaryRow",
    "SupportedCurrency",
    "Ticket",
    "TicketAggregator",
    "TrainerSplit",
    "UnsupportedCurrencyError",
    "aggregate_tickets",
    "apply_splits",
    "compute_event_profit",
    "compute_overview",
    "convert_currency",
    "event_currency_for_country",
    "format_amount",
    "format_currency",
    "summary_frame",
    "summary_totals",
    "validate_expenses",
    "validate_splits",
]
