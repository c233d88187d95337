# backend/loketh/models/__init__.py
from __future__ import annotations

"""
Domain models for data read from the Loketh contract.

This module depends on:
- loketh.services.formatting for wei and date rendering

It is used by:
- loketh.schemas (EventRead is built from Event)
- API routes that decode raw contract tuples

Models:
- Event: one ticketed event, wrapping the raw `getEvent` tuple
"""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any, Mapping, Sequence, Union

from loketh.services.errors import InvalidArgument
from loketh.services.formatting import (
    epoch_to_datetime,
    epoch_to_event_date,
    format_epoch,
    from_wei,
    short_address,
    str_limit,
)

RawEvent = Union[Sequence[Any], Mapping[str, Any]]

# Positions inside the contract's event tuple.
EVENT_FIELDS = (
    "name",
    "organizer",
    "start_time",
    "end_time",
    "price",
    "quota",
    "sold_counter",
    "money_collected",
)

SHORT_NAME_LIMIT = 25


def _field(raw: RawEvent, index: int) -> Any:
    # web3 returns results keyed both by position ("0", "1", ...) and by name
    if isinstance(raw, Mapping):
        key = str(index)
        if key in raw:
            return raw[key]
        name = EVENT_FIELDS[index]
        if name in raw:
            return raw[name]
        raise InvalidArgument(f"Event tuple is missing field {index} ({name})")
    try:
        return raw[index]
    except IndexError:
        raise InvalidArgument(
            f"Event tuple has {len(raw)} fields, expected {len(EVENT_FIELDS)}"
        ) from None


@dataclass(frozen=True)
class Event:
    """A ticketed event as stored on-chain, with display helpers."""

    id: int
    name: str
    organizer: str
    start_time: int
    end_time: int
    price: int
    quota: int
    sold_counter: int
    money_collected: int
    tz: tzinfo = timezone.utc

    @classmethod
    def from_raw(cls, raw: RawEvent, id: int = 0, tz: tzinfo | None = None) -> "Event":
        if isinstance(raw, (str, bytes)):
            raise InvalidArgument("Event tuple must be a sequence or mapping")
        values = [_field(raw, i) for i in range(len(EVENT_FIELDS))]
        try:
            event = cls(
                id=int(id),
                name=str(values[0]),
                organizer=str(values[1]),
                start_time=int(values[2]),
                end_time=int(values[3]),
                price=int(values[4]),
                quota=int(values[5]),
                sold_counter=int(values[6]),
                money_collected=int(values[7]),
                tz=tz or timezone.utc,
            )
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Malformed event tuple: {exc}") from exc

        # uint256 timestamps can exceed what datetime can represent
        for seconds in (event.start_time, event.end_time):
            epoch_to_datetime(seconds, event.tz)
        return event

    # ---- Display helpers ----

    @property
    def short_name(self) -> str:
        return str_limit(self.name, SHORT_NAME_LIMIT)

    @property
    def short_organizer(self) -> str:
        return short_address(self.organizer)

    @property
    def start_datetime(self) -> datetime:
        return epoch_to_datetime(self.start_time, self.tz)

    @property
    def end_datetime(self) -> datetime:
        return epoch_to_datetime(self.end_time, self.tz)

    @property
    def start_time_display(self) -> str:
        return format_epoch(self.start_time, self.tz)

    @property
    def end_time_display(self) -> str:
        return format_epoch(self.end_time, self.tz)

    @property
    def only_one_day(self) -> bool:
        return self.start_datetime.date() == self.end_datetime.date()

    @property
    def display_date(self) -> str:
        if self.only_one_day:
            return epoch_to_event_date(self.start_time, self.tz)
        return " - ".join(
            epoch_to_event_date(t, self.tz) for t in (self.start_time, self.end_time)
        )

    def ended(self, now: datetime | None = None) -> bool:
        """True once `now` is strictly after the end time."""
        return (now or datetime.now(timezone.utc)) > self.end_datetime

    # ---- Money / tickets ----

    @property
    def price_in_eth(self) -> str:
        return from_wei(self.price)

    @property
    def is_free(self) -> bool:
        return self.price == 0

    @property
    def sold_out(self) -> bool:
        return not self.sold_counter < self.quota

    @property
    def money_collected_in_eth(self) -> str:
        return from_wei(self.money_collected)

    @property
    def has_money_to_withdraw(self) -> bool:
        return self.money_collected > 0
