# backend/loketh/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for request/response models.

This module is the API contract layer and depends on:
- loketh.models.Event
- loketh.services.pagination.PageWindow
- loketh.services.diagnostics.ErrorRecord

It is used by:
- API routes
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

from loketh.models import Event
from loketh.services.pagination import PageWindow


# ---------- Pagination Schemas ----------


class PageRead(BaseModel):
    max_id: int
    min_id: int
    has_prev: bool
    has_next: bool
    is_empty: bool
    page: int
    per_page: int
    page_count: int
    ids: List[int]

    @classmethod
    def from_window(
        cls, window: PageWindow, *, page: int, per_page: int, page_count: int
    ) -> "PageRead":
        return cls(
            max_id=window.max_id,
            min_id=window.min_id,
            has_prev=window.has_prev,
            has_next=window.has_next,
            is_empty=window.is_empty,
            page=page,
            per_page=per_page,
            page_count=page_count,
            ids=window.ids(),
        )


# ---------- Error Schemas ----------


class ClassifyRequest(BaseModel):
    """
    Raw error as the wallet/provider layer produced it.

    Any JSON value is accepted: a string, an object with a "message"
    key, or anything else (coerced to text).
    """

    error: Any = None


class ErrorRecordRead(BaseModel):
    display_error: bool
    log: bool
    message: str

    class Config:
        from_attributes = True


# ---------- Event Schemas ----------


class EventDecodeRequest(BaseModel):
    """
    A raw `getEvent` result.

    `raw` is either the positional tuple or the web3 style object keyed
    by "0".."7".
    """

    id: int = Field(default=0, ge=0)
    raw: Union[List[Any], Dict[str, Any]]


class EventRead(BaseModel):
    id: int
    name: str
    short_name: str
    organizer: str
    short_organizer: str
    start_time: int
    end_time: int
    start_time_display: str
    end_time_display: str
    display_date: str
    only_one_day: bool
    ended: bool
    price: str
    price_in_eth: str
    is_free: bool
    quota: int
    sold_counter: int
    sold_out: bool
    money_collected: str
    money_collected_in_eth: str
    has_money_to_withdraw: bool

    @classmethod
    def from_event(cls, event: Event) -> "EventRead":
        # wei amounts exceed JS safe integers, so they travel as strings
        return cls(
            id=event.id,
            name=event.name,
            short_name=event.short_name,
            organizer=event.organizer,
            short_organizer=event.short_organizer,
            start_time=event.start_time,
            end_time=event.end_time,
            start_time_display=event.start_time_display,
            end_time_display=event.end_time_display,
            display_date=event.display_date,
            only_one_day=event.only_one_day,
            ended=event.ended(),
            price=str(event.price),
            price_in_eth=event.price_in_eth,
            is_free=event.is_free,
            quota=event.quota,
            sold_counter=event.sold_counter,
            sold_out=event.sold_out,
            money_collected=str(event.money_collected),
            money_collected_in_eth=event.money_collected_in_eth,
            has_money_to_withdraw=event.has_money_to_withdraw,
        )
