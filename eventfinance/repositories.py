"""Repositories responsible for loading event snapshots from CSV files."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, TypeVar

import pandas as pd
from dateutil import parser as date_parser

from .messages import ServiceMessage
from .models import Expense, Ticket, TrainerSplit

T = TypeVar("T")

EVENT_COLUMNS = ["ProdID", "ProdName", "EventDate", "Country", "Venue", "Trainer_1"]
TICKET_COLUMNS = ["Attendance", "PaymentMethod", "TierLevel", "UnitPrice", "PriceTotal", "TrainerFeePct", "Quantity"]
SPLIT_COLUMNS = ["Name", "Percent", "CashReceived"]
EXPENSE_COLUMNS = ["Description", "Amount"]
EVENT_TEXT_COLUMNS = ["ProdName", "Country", "Venue", "Trainer_1", "Currency"]


def _text(value: object) -> Optional[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    text = str(value).strip()
    return text or None


def _parse_date(value: object):
    text = _text(value)
    if text is None:
        return None
    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError):
        return None


class EventRepository:
    """Reads event, ticket, split and expense snapshots from a data folder.

    Files follow the report exports: ``events.csv`` plus
    ``tickets_<ProdID>.csv``, ``splits_<ProdID>.csv`` and
    ``expenses_<ProdID>.csv`` per event. Nothing is ever written back.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        self._base_path = base_path or Path.cwd()

    def load_events(self) -> tuple[pd.DataFrame, list[ServiceMessage]]:
        df, messages = self._read("events.csv", EVENT_COLUMNS, required=True)
        if df.empty:
            return df, messages
        df["EventDate"] = df["EventDate"].map(_parse_date)
        if "Currency" not in df.columns:
            df["Currency"] = None
        for column in EVENT_TEXT_COLUMNS:
            df[column] = df[column].map(_text).astype(object)
        return df.sort_values(["EventDate", "ProdID"], na_position="last").reset_index(drop=True), messages

    def load_tickets(self, prod_id: int) -> tuple[List[Ticket], list[ServiceMessage]]:
        df, messages = self._read(f"tickets_{prod_id}.csv", TICKET_COLUMNS, required=True)

        def build(row: pd.Series) -> Ticket:
            return Ticket(
                attendance=_text(row["Attendance"]) or "",
                payment_method=_text(row["PaymentMethod"]),
                tier_level=_text(row["TierLevel"]),
                unit_price=row["UnitPrice"],
                price_total=row["PriceTotal"],
                trainer_fee_pct=row["TrainerFeePct"],
                quantity=row["Quantity"],
                currency=_text(row.get("Currency")),
            )

        return self._rows(df, build), messages

    def load_splits(self, prod_id: int) -> tuple[List[TrainerSplit], list[ServiceMessage]]:
        df, messages = self._read(f"splits_{prod_id}.csv", SPLIT_COLUMNS, required=False)

        def build(row: pd.Series) -> TrainerSplit:
            return TrainerSplit(
                name=_text(row["Name"]) or "",
                percent=row["Percent"],
                cash_received=row["CashReceived"],
                prod_id=prod_id,
                row_id=int(row["RowId"]) if "RowId" in row and not pd.isna(row["RowId"]) else None,
            )

        return self._rows(df, build), messages

    def load_expenses(self, prod_id: int) -> tuple[List[Expense], list[ServiceMessage]]:
        df, messages = self._read(f"expenses_{prod_id}.csv", EXPENSE_COLUMNS, required=False)

        def build(row: pd.Series) -> Expense:
            return Expense(
                description=_text(row["Description"]) or "",
                amount=row["Amount"],
                currency=_text(row.get("Currency")) or "EUR",
            )

        return self._rows(df, build), messages

    def _read(
        self,
        filename: str,
        columns: List[str],
        *,
        required: bool,
    ) -> tuple[pd.DataFrame, list[ServiceMessage]]:
        csv_path = self._base_path / filename
        messages: list[ServiceMessage] = []

        if not csv_path.exists():
            build = ServiceMessage.error if required else ServiceMessage.info
            messages.append(build(f"File not found: {filename}"))
            return pd.DataFrame(columns=columns), messages

        df = pd.read_csv(csv_path)
        missing = [column for column in columns if column not in df.columns]
        if missing:
            messages.append(
                ServiceMessage.error(
                    f"{filename} is missing column(s): {', '.join(missing)}",
                )
            )
            return pd.DataFrame(columns=columns), messages

        return df, messages

    @staticmethod
    def _rows(df: pd.DataFrame, build: Callable[[pd.Series], T]) -> List[T]:
        return [build(row) for _, row in df.iterrows()]
