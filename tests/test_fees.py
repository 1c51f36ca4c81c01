"""Tests for the event overview and profit calculations."""

import pytest

from eventfinance import (
    Commission,
    Expense,
    FeeCalculator,
    MessageLevel,
    SupportedCurrency,
    compute_event_profit,
    compute_overview,
    event_currency_for_country,
    validate_expenses,
)


class TestComputeOverview:
    """Trainer fee, cash sales, balance and payable."""

    def test_empty_tickets_give_zero_overview(self):
        overview = compute_overview([])

        assert overview.trainer_fee == 0
        assert overview.cash_sales == 0
        assert overview.balance == 0
        assert overview.payable_to_trainer == 0
        assert overview.grace_commission == 0
        assert overview.nanna_fee == 0

    def test_single_cash_ticket_example(self, ticket_factory):
        """Quantity is not applied: price_total is already a line total."""
        ticket = ticket_factory("A", "Cash", None, 50.0, 100.0, 0.5, 2)

        overview = compute_overview([ticket])

        assert overview.trainer_fee == pytest.approx(50.0)
        assert overview.cash_sales == pytest.approx(100.0)
        assert overview.balance == pytest.approx(-50.0)
        assert overview.payable_to_trainer == pytest.approx(-50.0)

    def test_only_cash_tickets_count_as_cash_sales(self, mixed_tickets):
        overview = compute_overview(mixed_tickets)

        assert overview.cash_sales == pytest.approx(180.0)
        assert overview.trainer_fee == pytest.approx(20 + 48 + 40 + 24 + 0)
        assert overview.balance == pytest.approx(overview.trainer_fee - 180.0)

    def test_commission_is_passed_through_without_changing_payable(self, mixed_tickets):
        plain = compute_overview(mixed_tickets)
        with_commission = compute_overview(mixed_tickets, Commission(grace=0.1, nanna=0.05))

        assert with_commission.grace_commission == 0.1
        assert with_commission.nanna_fee == 0.05
        assert with_commission.balance == pytest.approx(plain.balance)
        assert with_commission.payable_to_trainer == pytest.approx(plain.payable_to_trainer)

    def test_partial_commission_defaults_missing_part_to_zero(self):
        overview = compute_overview([], Commission(grace=0.2))

        assert overview.grace_commission == 0.2
        assert overview.nanna_fee == 0.0


class TestGrossFeeTrainers:
    """Configured trainers are paid on the gross ticket total."""

    def test_gross_fee_trainer_ignores_percentage(self, mixed_tickets):
        overview = compute_overview(mixed_tickets, trainer_name="Alejandro Angulo")

        assert overview.trainer_fee == pytest.approx(40 + 120 + 80 + 60 + 0)

    def test_other_trainers_use_percentage(self, mixed_tickets):
        assert compute_overview(mixed_tickets, trainer_name="Maria").trainer_fee == pytest.approx(132.0)

    def test_keywords_are_configurable(self, mixed_tickets):
        calculator = FeeCalculator(gross_fee_trainer_keywords=["MARIA"])

        assert calculator.is_gross_fee_trainer("maria lopez")
        assert not calculator.is_gross_fee_trainer("Alejandro")
        assert not calculator.is_gross_fee_trainer(None)

    def test_blank_trainer_cell_uses_percentage(self, mixed_tickets):
        overview = compute_overview(mixed_tickets, trainer_name=float("nan"))

        assert overview.trainer_fee == pytest.approx(132.0)
        assert not FeeCalculator().is_gross_fee_trainer(float("nan"))

    def test_cash_method_is_configurable(self, ticket_factory):
        calculator = FeeCalculator(cash_payment_method="Bar")
        tickets = [
            ticket_factory(payment_method="Bar", price_total=30.0),
            ticket_factory(payment_method="Cash", price_total=70.0),
        ]

        assert calculator.compute_overview(tickets).cash_sales == pytest.approx(30.0)


class TestEventCurrency:
    @pytest.mark.parametrize(
        "country, expected",
        [
            ("Japan", SupportedCurrency.JPY),
            ("JAPAN (Tokyo)", SupportedCurrency.JPY),
            ("jp", SupportedCurrency.JPY),
            ("Germany", SupportedCurrency.EUR),
            (None, SupportedCurrency.EUR),
            ("", SupportedCurrency.EUR),
            (float("nan"), SupportedCurrency.EUR),
        ],
    )
    def test_event_currency_for_country(self, country, expected):
        assert event_currency_for_country(country) == expected


class TestEventProfit:
    """Revenue minus expenses converted into the event currency."""

    def test_expenses_are_converted_to_event_currency(self, ticket_factory, converter):
        tickets = [ticket_factory(price_total=50000.0), ticket_factory(price_total=20000.0)]
        expenses = [
            Expense("Venue", 100.0, "EUR"),
            Expense("Snacks", 3000.0, "JPY"),
        ]

        profit = compute_event_profit(tickets, expenses, SupportedCurrency.JPY, converter)

        assert profit.currency == SupportedCurrency.JPY
        assert profit.revenue == pytest.approx(70000.0)
        assert profit.expenses == pytest.approx(16350.0 + 3000.0)
        assert profit.profit == pytest.approx(70000.0 - 19350.0)

    def test_conversion_notes_only_for_converted_expenses(self, converter):
        expenses = [Expense("Venue", 100.0, "EUR"), Expense("Taxi", 20.0, "JPY")]

        profit = compute_event_profit([], expenses, "JPY", converter)

        assert len(profit.messages) == 1
        assert profit.messages[0].level == MessageLevel.INFO
        assert profit.messages[0].text.startswith("Venue:")

    def test_no_expenses_means_profit_equals_revenue(self, ticket_factory):
        profit = compute_event_profit([ticket_factory(price_total=80.0)], [])

        assert profit.currency == SupportedCurrency.EUR
        assert profit.expenses == 0
        assert profit.profit == pytest.approx(80.0)


class TestValidateExpenses:
    def test_valid_expenses_have_no_errors(self):
        assert validate_expenses([Expense("Venue", 0.0)]) == []

    def test_description_and_amount_rules(self):
        errors = validate_expenses([Expense("  ", 10.0), Expense("Hotel", -1.0)])

        assert errors == [
            "Row 1: Description is required",
            "Row 2: Amount cannot be negative",
        ]
