"""Pytest configuration and shared fixtures."""

import pytest

from eventfinance import CurrencyConverter, Ticket, TrainerSplit


def make_ticket(
    attendance="Attended",
    payment_method="Paypal",
    tier_level=None,
    unit_price=50.0,
    price_total=50.0,
    trainer_fee_pct=0.5,
    quantity=1,
    currency=None,
) -> Ticket:
    return Ticket(
        attendance=attendance,
        payment_method=payment_method,
        tier_level=tier_level,
        unit_price=unit_price,
        price_total=price_total,
        trainer_fee_pct=trainer_fee_pct,
        quantity=quantity,
        currency=currency,
    )


@pytest.fixture
def ticket_factory():
    return make_ticket


@pytest.fixture
def mixed_tickets() -> list:
    return [
        make_ticket("Unattended", "Paypal", "Early", 40.0, 40.0, 0.5, 1),
        make_ticket("Attended", "Cash", None, 60.0, 120.0, 0.4, 2),
        make_ticket("Attended", "Paypal", "Early", 40.0, 80.0, 0.5, 2),
        make_ticket("Attended", "Cash", None, 60.0, 60.0, 0.4, 1),
        make_ticket("Attended", None, "VIP", 0.0, 0.0, 0.5, 3),
    ]


@pytest.fixture
def converter() -> CurrencyConverter:
    return CurrencyConverter()


@pytest.fixture
def two_splits() -> list:
    return [
        TrainerSplit(name="Ana", percent=60, cash_received=100),
        TrainerSplit(name="Ben", percent=40, cash_received=0),
    ]
