from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Sequence

import pandas as pd
from dateutil.relativedelta import relativedelta
import matplotlib.pyplot as plt
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from eventfinance import (
    Commission,
    CurrencyConverter,
    EventRepository,
    FeeCalculator,
    LiveRatesService,
    MessageLevel,
    ServiceMessage,
    SplitValidator,
    SupportedCurrency,
    TicketAggregator,
    compute_event_profit,
    event_currency_for_country,
    summary_frame,
    summary_totals,
    validate_expenses,
)
from eventfinance.numbers import format_percentage, parse_german_decimal

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ------------------ Page config ------------------ #
st.set_page_config(page_title="Event Finance Report", layout="wide")
st.title("🎟️ Event Finance Report")


# ------------------ Helpers ------------------ #
def format_elapsed(start: date, end: date) -> str:
    """Describe the distance between two days in years/months/days."""
    rd = relativedelta(end, start)
    parts: list[str] = []
    if rd.years:
        parts.append(f"{rd.years} year" + ("s" if rd.years > 1 else ""))
    if rd.months:
        parts.append(f"{rd.months} month" + ("s" if rd.months > 1 else ""))
    if rd.days:
        parts.append(f"{rd.days} day" + ("s" if rd.days > 1 else ""))

    if not parts:
        return "today"
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + f" and {parts[-1]}"


def _hex_to_rgb(hexstr: str):
    h = hexstr.lstrip("#")
    if len(h) != 6:
        return None
    try:
        return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def _theme_is_dark() -> bool:
    base = st.get_option("theme.base")
    if isinstance(base, str):
        return base.lower() == "dark"

    bg = st.get_option("theme.backgroundColor")
    if isinstance(bg, str):
        rgb = _hex_to_rgb(bg)
        if rgb:
            r, g, b = rgb
            return 0.2126 * r + 0.7152 * g + 0.0722 * b < 128

    return False


def _display_messages(messages: Sequence[ServiceMessage], *, stop_on_error: bool = False) -> None:
    has_error = False
    for message in messages:
        if message.is_error:
            st.error(message.text)
            has_error = True
        elif message.level == MessageLevel.WARNING:
            st.warning(message.text)
        else:
            st.info(message.text)
    if stop_on_error and has_error:
        st.stop()


def _splits_frame(splits, converter: CurrencyConverter, currency: SupportedCurrency) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Name": split.name,
                "Percent": split.percent,
                "Trainer Fee": converter.format_amount(split.trainer_fee, currency),
                "Cash Received": converter.format_amount(split.cash_received, currency),
                "Payable": converter.format_amount(split.payable, currency),
            }
            for split in splits
        ],
        columns=["Name", "Percent", "Trainer Fee", "Cash Received", "Payable"],
    )


def main() -> None:
    # ------------------ Sidebar ------------------ #
    data_dir = Path(st.sidebar.text_input("Data folder", value="data"))
    use_live_rates = st.sidebar.toggle(
        "Use live exchange rates",
        value=False,
        help="Fetch EUR rates from Yahoo Finance instead of the static table.",
    )
    grace = parse_german_decimal(st.sidebar.text_input("Grace commission (%)", value="0,0")) / 100
    nanna = parse_german_decimal(st.sidebar.text_input("Nanna fee (%)", value="0,0")) / 100

    converter = CurrencyConverter()
    if use_live_rates:
        live = LiveRatesService().load_table()
        _display_messages(live.messages)
        converter = CurrencyConverter(live.table)

    # --- Events ---
    repo = EventRepository(data_dir)
    events_df, event_messages = repo.load_events()
    _display_messages(event_messages, stop_on_error=True)
    if events_df.empty:
        st.error("No events found in the data folder.")
        st.stop()

    labels = {
        int(row["ProdID"]): f"{row['ProdID']} · {row['ProdName']}"
        for _, row in events_df.iterrows()
    }
    prod_id = st.selectbox("Event", options=list(labels), format_func=labels.get)
    event = events_df.loc[events_df["ProdID"] == prod_id].iloc[0]

    event_currency = event_currency_for_country(event["Country"])
    codes = [code for code, _ in converter.currency_options()]
    display_code = st.selectbox(
        "Display currency",
        options=codes,
        index=codes.index(event_currency.value),
        format_func=lambda code: dict(converter.currency_options())[code]
        + (" (Event Default)" if code == event_currency.value else ""),
    )
    display_currency = converter.parse_currency(display_code)
    if display_currency != event_currency:
        st.caption(
            f"Event data is in {event_currency.value}, amounts will be converted to {display_currency.value}"
        )

    def money(amount: float) -> str:
        return converter.format_currency(converter.convert(amount, event_currency, display_currency), display_currency)

    def cell(amount: float) -> str:
        return converter.format_amount(converter.convert(amount, event_currency, display_currency), display_currency)

    col_date, col_trainer, col_venue = st.columns(3)
    event_date = event["EventDate"]
    if isinstance(event_date, date):
        col_date.markdown(f"**Date:** {event_date:%d/%m/%Y} ({format_elapsed(event_date, date.today())} ago)")
    col_trainer.markdown(f"**Trainer:** {event['Trainer_1'] or 'n/a'}")
    col_venue.markdown(f"**Venue:** {event['Venue'] or 'n/a'}, {event['Country'] or 'n/a'}")

    # --- Tickets ---
    tickets, ticket_messages = repo.load_tickets(prod_id)
    _display_messages(ticket_messages, stop_on_error=True)

    rows = TicketAggregator().aggregate(tickets)
    overview = FeeCalculator().compute_overview(
        tickets,
        Commission(grace=grace, nanna=nanna),
        trainer_name=event["Trainer_1"],
    )

    st.subheader("📈 Overview")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Trainer Fee", money(overview.trainer_fee))
    c2.metric("Cash Sales", money(overview.cash_sales))
    c3.metric("Balance", money(overview.balance))
    c4.metric("Payable to Trainer", money(overview.payable_to_trainer))
    st.caption(
        f"Grace commission {format_percentage(overview.grace_commission)} · "
        f"Nanna fee {format_percentage(overview.nanna_fee)}"
    )

    # --- Summary table ---
    st.subheader("📋 Ticket Summary")
    df_summary = summary_frame(rows)
    totals = summary_totals(rows)
    for column in ["Unit Price", "Price Total", "Sum Price Total", "Sum Trainer Fee"]:
        df_summary[column] = df_summary[column].map(cell)
    df_summary["Trainer Fee %"] = df_summary["Trainer Fee %"].map(format_percentage)
    st.dataframe(df_summary, hide_index=True, use_container_width=True)
    st.caption(
        f"Total: **{totals.quantity}** tickets · {money(totals.price_total)} · "
        f"trainer fee {money(totals.trainer_fee)}"
    )

    if rows:
        df_chart = pd.DataFrame(
            {
                "Attendance": [row.attendance for row in rows],
                "Payment Method": [row.payment_method or "n/a" for row in rows],
                "Quantity": [row.sum_quantity for row in rows],
            }
        )
        fig_qty = px.bar(
            df_chart,
            x="Attendance",
            y="Quantity",
            color="Payment Method",
            barmode="stack",
            title="Tickets by attendance and payment method",
        )
        st.plotly_chart(fig_qty, use_container_width=True)

    # --- Trainer splits ---
    st.subheader("🧮 Trainer Splits")
    splits, split_messages = repo.load_splits(prod_id)
    _display_messages(split_messages)

    validator = SplitValidator()
    validation = validator.validate(splits)
    _display_messages(validation.messages)
    applied = validator.apply(splits, overview.balance)

    if applied:
        converted = [
            replace(
                split,
                cash_received=converter.convert(split.cash_received, event_currency, display_currency),
                trainer_fee=converter.convert(split.trainer_fee, event_currency, display_currency),
                payable=converter.convert(split.payable, event_currency, display_currency),
            )
            for split in applied
        ]
        st.dataframe(_splits_frame(converted, converter, display_currency), hide_index=True)
        st.caption(f"Allocated: {validation.total_percent:g}% of the balance")

        shares = [split.percent for split in applied if split.percent > 0]
        names = [split.name or "?" for split in applied if split.percent > 0]
        if validation.total_percent < 100:
            shares.append(100 - validation.total_percent)
            names.append("Unallocated")
        if shares:
            txt_col = "white" if _theme_is_dark() else "black"
            fig_pie, ax = plt.subplots(facecolor="none")
            ax.set_facecolor("none")
            _, texts, autotexts = ax.pie(
                shares,
                labels=names,
                autopct="%1.1f%%",
                startangle=90,
                counterclock=False,
                wedgeprops={"edgecolor": txt_col, "linewidth": 1.0},
            )
            for t in [*texts, *autotexts]:
                t.set_color(txt_col)
            ax.axis("equal")
            st.pyplot(fig_pie, transparent=True)
    else:
        st.info("No trainer splits recorded for this event.")

    # --- Profit ---
    st.subheader("💶 Event Profit")
    expenses, expense_messages = repo.load_expenses(prod_id)
    _display_messages(expense_messages)
    for error in validate_expenses(expenses):
        st.warning(error)

    profit = compute_event_profit(tickets, expenses, event_currency, converter)
    with st.expander("Expense conversions"):
        _display_messages(profit.messages)

    fig_wf = go.Figure(
        go.Waterfall(
            measure=["absolute", "relative", "total"],
            x=["Revenue", "Expenses", "Profit"],
            y=[
                converter.convert(profit.revenue, event_currency, display_currency),
                -converter.convert(profit.expenses, event_currency, display_currency),
                converter.convert(profit.profit, event_currency, display_currency),
            ],
            connector={"line": {"color": "rgba(128,128,128,0.4)"}},
        )
    )
    fig_wf.update_layout(title="Revenue → Profit", yaxis_title=display_currency.value)
    st.plotly_chart(fig_wf, use_container_width=True)
    st.metric("Profit", money(profit.profit))


if __name__ == "__main__":
    main()
