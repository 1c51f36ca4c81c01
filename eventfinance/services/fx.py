"""Currency conversion, formatting and live rate retrieval."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping

import yfinance as yf

from ..config import DEFAULT_CURRENCY_TABLE, LIVE_RATE_SYMBOLS
from ..errors import UnsupportedCurrencyError
from ..messages import ServiceMessage
from ..models import CurrencyInfo, SupportedCurrency
from ..numbers import format_grouped, round_half_up

logger = logging.getLogger(__name__)

CurrencyTable = Mapping[SupportedCurrency, CurrencyInfo]


class CurrencyConverter:
    """Converts and formats amounts using a EUR-pivoted rate table.

    Every rate is expressed as units of the currency per 1 EUR; there are no
    cross rates, so ``convert`` always goes through EUR.
    """

    def __init__(self, table: CurrencyTable | None = None) -> None:
        if table is None:
            table = DEFAULT_CURRENCY_TABLE
        self._table: Dict[SupportedCurrency, CurrencyInfo] = dict(table)

    @property
    def table(self) -> Dict[SupportedCurrency, CurrencyInfo]:
        return dict(self._table)

    def parse_currency(self, code: SupportedCurrency | str) -> SupportedCurrency:
        try:
            currency = SupportedCurrency(str(getattr(code, "value", code)).upper())
        except ValueError:
            raise UnsupportedCurrencyError(code) from None
        if currency not in self._table:
            raise UnsupportedCurrencyError(code)
        return currency

    def info(self, currency: SupportedCurrency | str) -> CurrencyInfo:
        return self._table[self.parse_currency(currency)]

    def convert(
        self,
        amount: float,
        from_currency: SupportedCurrency | str,
        to_currency: SupportedCurrency | str,
    ) -> float:
        source = self.parse_currency(from_currency)
        target = self.parse_currency(to_currency)
        if source == target:
            return amount

        in_eur = amount
        if source != SupportedCurrency.EUR:
            in_eur = amount / self._table[source].rate
        if target == SupportedCurrency.EUR:
            return in_eur
        return in_eur * self._table[target].rate

    def _rounded(self, amount: float, info: CurrencyInfo) -> float:
        return round_half_up(amount) if info.decimals == 0 else amount

    def format_currency(self, amount: float, currency: SupportedCurrency | str) -> str:
        """Locale-styled string for headline figures, e.g. ``1.234,50 €``."""
        info = self.info(currency)
        rounded = self._rounded(amount, info)
        number = format_grouped(
            abs(rounded), info.decimals, info.group_separator, info.decimal_separator
        )
        symbol = info.locale_symbol or info.symbol
        space = " " if info.symbol_space else ""
        if info.symbol_after:
            body = f"{number}{space}{symbol}"
        else:
            body = f"{symbol}{space}{number}"
        return f"-{body}" if rounded < 0 else body

    def format_amount(self, amount: float, currency: SupportedCurrency | str) -> str:
        """Symbol-prefixed string for table cells, e.g. ``-€1.234,50``."""
        info = self.info(currency)
        rounded = self._rounded(amount, info)
        number = format_grouped(
            abs(rounded), info.decimals, info.group_separator, info.decimal_separator
        )
        sign = "-" if rounded < 0 else ""
        return f"{sign}{info.symbol}{number}"

    def currency_symbol(self, currency: SupportedCurrency | str) -> str:
        return self.info(currency).symbol

    def currency_options(self) -> List[tuple[str, str]]:
        return [(code.value, info.label or code.value) for code, info in self._table.items()]


def convert_currency(
    amount: float,
    from_currency: SupportedCurrency | str,
    to_currency: SupportedCurrency | str,
) -> float:
    return CurrencyConverter().convert(amount, from_currency, to_currency)


def format_currency(amount: float, currency: SupportedCurrency | str) -> str:
    return CurrencyConverter().format_currency(amount, currency)


def format_amount(amount: float, currency: SupportedCurrency | str) -> str:
    return CurrencyConverter().format_amount(amount, currency)


@dataclass(frozen=True)
class LiveRatesResult:
    table: Dict[SupportedCurrency, CurrencyInfo]
    messages: List[ServiceMessage]


class LiveRatesService:
    """Refreshes the EUR-based rates of a currency table from Yahoo Finance."""

    def __init__(self, symbols: Mapping[SupportedCurrency, str] | None = None) -> None:
        self._symbols = dict(LIVE_RATE_SYMBOLS if symbols is None else symbols)

    def load_table(
        self,
        currencies: Iterable[SupportedCurrency] | None = None,
        base_table: CurrencyTable | None = None,
        period: str = "5d",
    ) -> LiveRatesResult:
        table = dict(DEFAULT_CURRENCY_TABLE if base_table is None else base_table)
        messages: List[ServiceMessage] = []

        for currency in list(table) if currencies is None else currencies:
            if currency == SupportedCurrency.EUR or currency not in table:
                continue

            symbol = self._symbols.get(currency)
            if not symbol:
                messages.append(
                    ServiceMessage.warning(
                        f"No live rate symbol configured for {currency.value}; keeping the static rate.",
                    )
                )
                continue

            rate = self._fetch_rate(currency, symbol, period, messages)
            if rate is not None:
                table[currency] = replace(table[currency], rate=rate)

        return LiveRatesResult(table=table, messages=messages)

    def _fetch_rate(
        self,
        currency: SupportedCurrency,
        symbol: str,
        period: str,
        messages: List[ServiceMessage],
    ) -> float | None:
        try:
            hist = yf.Ticker(symbol).history(period=period)
            if hist.empty or "Close" not in hist:
                raise ValueError("empty series")
            closes = hist["Close"].astype(float).dropna()
            closes = closes[closes > 0]
            if closes.empty:
                raise ValueError("no usable close")
            rate = float(closes.iloc[-1])
            logger.info("Live rate EUR/%s = %.4f", currency.value, rate)
            return rate
        except Exception as exc:  # noqa: BLE001 - reported as a message
            logger.warning("Live rate fetch failed for %s: %s", symbol, exc)
            messages.append(
                ServiceMessage.warning(
                    f"Could not fetch EUR/{currency.value} ({symbol}): {exc}. Keeping the static rate.",
                )
            )
            return None
