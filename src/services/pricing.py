"""Price parsing and price history helpers.

Item prices are stored as free text ("$49.99", "£1,200"). ``parse_price``
is the single boundary where that text becomes a structured ``Price``.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

CURRENCY_SYMBOLS = {"$": "USD", "€": "EUR", "£": "GBP", "¥": "JPY"}

_NON_NUMERIC = re.compile(r"[^\d.]")


@dataclass(frozen=True)
class Price:
    """Structured price: a decimal amount and an optional ISO currency code."""

    amount: Decimal
    currency: str | None = None


def parse_price(text: str | None) -> Price | None:
    """Parse free-text price into a ``Price``.

    Every character other than digits and '.' is dropped. Returns None when
    nothing numeric remains or the remainder is not a valid number
    (e.g. "1.2.3"); callers treat that as "no price".
    """
    if not text:
        return None

    cleaned = _NON_NUMERIC.sub("", text)
    if not cleaned:
        return None

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None

    currency = next((code for symbol, code in CURRENCY_SYMBOLS.items() if symbol in text), None)
    return Price(amount=amount, currency=currency)


def to_epoch_millis(at: datetime) -> int:
    return int(at.timestamp() * 1000)


def append_price_history(
    history: list[dict[str, Any]] | None,
    price: str,
    at: datetime,
    limit: int = 30,
) -> list[dict[str, Any]]:
    """Return a new history with ``price`` appended, keeping the newest ``limit`` entries."""
    entries = list(history or [])
    entries.append({"price": price, "date": to_epoch_millis(at)})
    return entries[-limit:]


def previous_price(history: list[dict[str, Any]] | None) -> str | None:
    """Price recorded before the latest history entry, if any."""
    if not history or len(history) < 2:
        return None
    return history[-2].get("price")


def percent_drop(previous: Price, current: Price) -> Decimal | None:
    """Percentage by which ``current`` is below ``previous`` (negative for a rise)."""
    if previous.amount <= 0:
        return None
    return (previous.amount - current.amount) / previous.amount * 100
