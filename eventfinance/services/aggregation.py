"""Ticket summary pivot."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from ..models import SummaryRow, Ticket
from ..numbers import coerce_number, normalize_label

logger = logging.getLogger(__name__)

GroupKey = Tuple[str, str, str]

SUMMARY_COLUMNS = [
    "Attendance",
    "Payment Method",
    "Tier Level",
    "Unit Price",
    "Price Total",
    "Trainer Fee %",
    "Quantity",
    "Sum Price Total",
    "Sum Trainer Fee",
]


@dataclass(frozen=True)
class SummaryTotals:
    quantity: int
    price_total: float
    trainer_fee: float


def group_key(ticket: Ticket) -> GroupKey:
    return (
        normalize_label(ticket.attendance),
        normalize_label(ticket.payment_method),
        normalize_label(ticket.tier_level),
    )


class TicketAggregator:
    """Groups ticket lines by attendance, payment method and tier level.

    The first ticket of a group supplies the representative unit price, price
    total and fee percentage. Every ticket of the group, the first included,
    adds its quantity, ``price_total * quantity`` and
    ``price_total * quantity * trainer_fee_pct`` to the accumulators.
    """

    def aggregate(self, tickets: Iterable[Ticket]) -> List[SummaryRow]:
        grouped: Dict[GroupKey, SummaryRow] = {}

        for ticket in tickets:
            key = group_key(ticket)
            price_total = coerce_number(ticket.price_total, "price_total")
            fee_pct = coerce_number(ticket.trainer_fee_pct, "trainer_fee_pct")
            quantity = int(coerce_number(ticket.quantity, "quantity"))

            row = grouped.get(key)
            if row is None:
                row = SummaryRow(
                    attendance=ticket.attendance,
                    payment_method=ticket.payment_method,
                    tier_level=ticket.tier_level,
                    unit_price=coerce_number(ticket.unit_price, "unit_price"),
                    price_total=price_total,
                    trainer_fee_pct=fee_pct,
                )
                grouped[key] = row

            row.sum_quantity += quantity
            row.sum_price_total += price_total * quantity
            row.sum_trainer_fee += price_total * quantity * fee_pct

        rows = [grouped[key] for key in sorted(grouped)]
        logger.info("Aggregated tickets into %d summary rows", len(rows))
        return rows


def aggregate_tickets(tickets: Iterable[Ticket]) -> List[SummaryRow]:
    return TicketAggregator().aggregate(tickets)


def summary_totals(rows: Iterable[SummaryRow]) -> SummaryTotals:
    quantity = 0
    price_total = 0.0
    trainer_fee = 0.0
    for row in rows:
        quantity += row.sum_quantity
        price_total += row.sum_price_total
        trainer_fee += row.sum_trainer_fee
    return SummaryTotals(quantity=quantity, price_total=price_total, trainer_fee=trainer_fee)


def summary_frame(rows: Iterable[SummaryRow]) -> pd.DataFrame:
    """Summary rows as a display table; empty input keeps the columns."""
    records = [
        {
            "Attendance": row.attendance,
            "Payment Method": row.payment_method or "",
            "Tier Level": row.tier_level or "",
            "Unit Price": row.unit_price,
            "Price Total": row.price_total,
            "Trainer Fee %": row.trainer_fee_pct,
            "Quantity": row.sum_quantity,
            "Sum Price Total": row.sum_price_total,
            "Sum Trainer Fee": row.sum_trainer_fee,
        }
        for row in rows
    ]
    return pd.DataFrame(records, columns=SUMMARY_COLUMNS)
