from __future__ import annotations

"""backend/loketh/services/formatting.py

Small display helpers for on-chain values: ether/wei conversion, short
addresses, truncated names and event dates.

Everything here is pure; timezone handling is the caller's choice and
defaults to UTC.
"""

from datetime import datetime, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from loketh.services.errors import InvalidArgument

WEI_UNITS: dict[str, int] = {
    "wei": 0,
    "kwei": 3,
    "mwei": 6,
    "gwei": 9,
    "szabo": 12,
    "finney": 15,
    "ether": 18,
}


def _unit_factor(unit: str) -> Decimal:
    try:
        return Decimal(10) ** WEI_UNITS[unit.lower()]
    except KeyError:
        raise InvalidArgument(f"Unknown ether unit: {unit!r}") from None


def _to_decimal(number: int | str | Decimal | float) -> Decimal:
    try:
        # str() first so floats keep their printed value, not binary noise
        value = Decimal(str(number).strip())
    except InvalidOperation:
        raise InvalidArgument(f"Not a number: {number!r}") from None
    if not value.is_finite():
        raise InvalidArgument(f"Not a finite number: {number!r}")
    return value


def to_wei(number: int | str | Decimal | float, unit: str = "ether") -> int:
    """Convert an amount in `unit` to an integer amount of wei."""
    with localcontext() as ctx:
        ctx.prec = 100
        value = _to_decimal(number) * _unit_factor(unit)
    if value != value.to_integral_value():
        raise InvalidArgument(f"{number!r} {unit} is not a whole number of wei")
    return int(value)


def from_wei(number: int | str, unit: str = "ether", digits: int = 4) -> str:
    """Convert wei to `unit`, rendered with exactly `digits` decimals."""
    value = _to_decimal(number)
    if value != value.to_integral_value():
        raise InvalidArgument(f"Wei amount must be whole, got {number!r}")
    with localcontext() as ctx:
        ctx.prec = 100
        converted = value / _unit_factor(unit)
        quantum = Decimal(1).scaleb(-digits)
        return str(converted.quantize(quantum, rounding=ROUND_HALF_UP))


def str_limit(text: str, limit: int = 20) -> str:
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def short_address(address: str) -> str:
    """0x1234567890abcdef... -> 0x1234...cdef"""
    return f"{address[:6]}...{address[-4:]}"


def epoch_to_datetime(seconds: int | str, tz: tzinfo | None = None) -> datetime:
    try:
        return datetime.fromtimestamp(int(seconds), tz=tz or timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise InvalidArgument(f"Timestamp out of range: {seconds!r}") from None


def format_epoch(seconds: int | str, tz: tzinfo | None = None) -> str:
    """e.g. 05 Mar 2021 14:30:00"""
    return epoch_to_datetime(seconds, tz).strftime("%d %b %Y %H:%M:%S")


def epoch_to_event_date(seconds: int | str, tz: tzinfo | None = None) -> str:
    """e.g. Mar 5, 2021"""
    dt = epoch_to_datetime(seconds, tz)
    return f"{dt:%b} {dt.day}, {dt.year}"
