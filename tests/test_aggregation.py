"""Tests for the ticket summary pivot."""

import pytest

from eventfinance import Ticket, aggregate_tickets, summary_frame, summary_totals
from eventfinance.services.aggregation import SUMMARY_COLUMNS


class TestAggregateTickets:
    """Grouping, accumulation and ordering of summary rows."""

    def test_empty_input_gives_no_rows(self):
        assert aggregate_tickets([]) == []

    def test_single_ticket_example(self, ticket_factory):
        """One cash ticket of 100 x2 at 50% gives the documented sums."""
        ticket = ticket_factory("A", "Cash", None, 50.0, 100.0, 0.5, 2)

        rows = aggregate_tickets([ticket])

        assert len(rows) == 1
        row = rows[0]
        assert row.sum_quantity == 2
        assert row.sum_price_total == pytest.approx(200.0)
        assert row.sum_trainer_fee == pytest.approx(100.0)

    def test_equal_keys_merge_and_keep_first_representative(self, ticket_factory):
        first = ticket_factory("A", "Paypal", "Early", 40.0, 40.0, 0.5, 1)
        second = ticket_factory("A", "Paypal", "Early", 45.0, 90.0, 0.3, 2)

        rows = aggregate_tickets([first, second])

        assert len(rows) == 1
        row = rows[0]
        assert row.unit_price == 40.0
        assert row.price_total == 40.0
        assert row.trainer_fee_pct == 0.5
        assert row.sum_quantity == 3
        assert row.sum_price_total == pytest.approx(40.0 + 180.0)
        assert row.sum_trainer_fee == pytest.approx(20.0 + 54.0)

    def test_none_and_empty_labels_share_a_group(self, ticket_factory):
        rows = aggregate_tickets(
            [
                ticket_factory("A", None, None, quantity=1),
                ticket_factory("A", "", "", quantity=2),
            ]
        )

        assert len(rows) == 1
        assert rows[0].payment_method is None
        assert rows[0].sum_quantity == 3

    def test_rows_sorted_by_attendance_payment_and_tier(self, mixed_tickets):
        rows = aggregate_tickets(mixed_tickets)

        keys = [(r.attendance, r.payment_method, r.tier_level) for r in rows]
        assert keys == [
            ("Attended", None, "VIP"),
            ("Attended", "Cash", None),
            ("Attended", "Paypal", "Early"),
            ("Unattended", "Paypal", "Early"),
        ]

    def test_total_quantity_is_preserved(self, mixed_tickets):
        rows = aggregate_tickets(mixed_tickets)

        assert sum(r.sum_quantity for r in rows) == sum(t.quantity for t in mixed_tickets)

    def test_totals_do_not_depend_on_input_order(self, mixed_tickets):
        forward = aggregate_tickets(mixed_tickets)
        backward = aggregate_tickets(list(reversed(mixed_tickets)))

        assert [(r.attendance, r.payment_method, r.tier_level) for r in forward] == [
            (r.attendance, r.payment_method, r.tier_level) for r in backward
        ]
        for a, b in zip(forward, backward):
            assert a.sum_quantity == b.sum_quantity
            assert a.sum_price_total == pytest.approx(b.sum_price_total)
            assert a.sum_trainer_fee == pytest.approx(b.sum_trainer_fee)

    def test_input_tickets_are_not_mutated(self, mixed_tickets):
        snapshot = list(mixed_tickets)

        aggregate_tickets(mixed_tickets)

        assert mixed_tickets == snapshot

    def test_missing_numbers_are_treated_as_zero(self):
        ticket = Ticket(
            attendance="A",
            payment_method="Cash",
            tier_level=None,
            unit_price=None,
            price_total=float("nan"),
            trainer_fee_pct=None,
            quantity=2,
        )

        row = aggregate_tickets([ticket])[0]

        assert row.unit_price == 0.0
        assert row.sum_quantity == 2
        assert row.sum_price_total == 0.0
        assert row.sum_trainer_fee == 0.0


class TestSummaryHelpers:
    """Tabular view and totals used by the dashboard."""

    def test_summary_totals(self, mixed_tickets):
        totals = summary_totals(aggregate_tickets(mixed_tickets))

        assert totals.quantity == 9
        assert totals.price_total == pytest.approx(40 + 240 + 160 + 60 + 0)

    def test_summary_frame_keeps_columns_when_empty(self):
        df = summary_frame([])

        assert df.empty
        assert list(df.columns) == SUMMARY_COLUMNS

    def test_summary_frame_blanks_missing_labels(self, ticket_factory):
        df = summary_frame(aggregate_tickets([ticket_factory("A", None, None)]))

        assert df.loc[0, "Payment Method"] == ""
        assert df.loc[0, "Tier Level"] == ""
        assert df.loc[0, "Quantity"] == 1
