"""Static configuration for currencies and fee rules."""
from __future__ import annotations

from .models import CurrencyInfo, SupportedCurrency

DEFAULT_CURRENCY_TABLE = {
    SupportedCurrency.EUR: CurrencyInfo(
        SupportedCurrency.EUR,
        rate=1.0,
        symbol="€",
        locale="de-DE",
        decimals=2,
        label="EUR (€) - Euro",
        group_separator=".",
        decimal_separator=",",
        symbol_after=True,
        symbol_space=True,
    ),
    SupportedCurrency.JPY: CurrencyInfo(
        SupportedCurrency.JPY,
        rate=163.5,
        symbol="¥",
        locale="ja-JP",
        decimals=0,
        label="JPY (¥) - Japanese Yen",
        locale_symbol="￥",
    ),
    SupportedCurrency.USD: CurrencyInfo(
        SupportedCurrency.USD,
        rate=1.08,
        symbol="$",
        locale="en-US",
        decimals=2,
        label="USD ($) - US Dollar",
    ),
    SupportedCurrency.GBP: CurrencyInfo(
        SupportedCurrency.GBP,
        rate=0.85,
        symbol="£",
        locale="en-GB",
        decimals=2,
        label="GBP (£) - British Pound",
    ),
    SupportedCurrency.AUD: CurrencyInfo(
        SupportedCurrency.AUD,
        rate=1.65,
        symbol="A$",
        locale="en-AU",
        decimals=2,
        label="AUD (A$) - Australian Dollar",
        locale_symbol="$",
    ),
    SupportedCurrency.CAD: CurrencyInfo(
        SupportedCurrency.CAD,
        rate=1.47,
        symbol="C$",
        locale="en-CA",
        decimals=2,
        label="CAD (C$) - Canadian Dollar",
        locale_symbol="$",
    ),
    SupportedCurrency.CHF: CurrencyInfo(
        SupportedCurrency.CHF,
        rate=0.94,
        symbol="CHF",
        locale="de-CH",
        decimals=2,
        label="CHF - Swiss Franc",
        group_separator="’",
        decimal_separator=".",
        symbol_space=True,
    ),
}

# Yahoo Finance symbols quoting units of the currency per 1 EUR.
LIVE_RATE_SYMBOLS = {
    SupportedCurrency.JPY: "EURJPY=X",
    SupportedCurrency.USD: "EURUSD=X",
    SupportedCurrency.GBP: "EURGBP=X",
    SupportedCurrency.AUD: "EURAUD=X",
    SupportedCurrency.CAD: "EURCAD=X",
    SupportedCurrency.CHF: "EURCHF=X",
}

CASH_PAYMENT_METHOD = "Cash"

# Trainers paid on the gross ticket total instead of a percentage.
GROSS_FEE_TRAINER_KEYWORDS = ("alejandro",)

JAPAN_COUNTRY_MARKERS = ("japan",)
JAPAN_COUNTRY_CODES = ("jp",)
