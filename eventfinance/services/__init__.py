"""Calculation services for event finance reports."""
from .aggregation import (
    SummaryTotals,
    TicketAggregator,
    aggregate_tickets,
    summary_frame,
    summary_totals,
)
from .fees import (
    FeeCalculator,
    compute_event_profit,
    compute_overview,
    event_currency_for_country,
    validate_expenses,
)
from .fx import (
    CurrencyConverter,
    LiveRatesResult,
    LiveRatesService,
    convert_currency,
    format_amount,
    format_currency,
)
from .splits import (
    SplitValidationResult,
    SplitValidator,
    apply_splits,
    remaining_percent,
    total_percent,
    validate_splits,
)

__all__ = [
    "CurrencyConverter",
    "FeeCalculator",
    "LiveRatesResult",
    "LiveRatesService",
    "SplitValidationResult",
    "SplitValidator",
    "SummaryTotals",
    "TicketAggregator",
    "aggregate_tickets",
    "apply_splits",
    "compute_event_profit",
    "compute_overview",
    "convert_currency",
    "event_currency_for_country",
    "format_amount",
    "format_currency",
    "remaining_percent",
    "summary_frame",
    "summary_totals",
    "total_percent",
    "validate_expenses",
    "validate_splits",
]
