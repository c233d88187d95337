# backend/loketh/api/events.py
from __future__ import annotations

from fastapi import APIRouter, Query

from loketh import schemas
from loketh.config import get_settings
from loketh.models import Event
from loketh.services.pagination import page_count, plan

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/pages", response_model=schemas.PageRead)
def get_page(
    total: int = Query(ge=0),
    page: int = Query(default=1, ge=1),
    per_page: int | None = Query(default=None, ge=1),
    zero_based: bool | None = Query(default=None),
) -> schemas.PageRead:
    """
    Ids to fetch for one newest-first page of events.

    `total` is the contract's current event count. Pages past the end come
    back with `is_empty` set rather than as an error.
    """
    settings = get_settings()
    if per_page is None:
        per_page = settings.default_per_page
    per_page = min(per_page, settings.max_per_page)
    if zero_based is None:
        zero_based = settings.zero_based_ids

    window = plan(total, page=page, per_page=per_page, zero_based=zero_based)
    return schemas.PageRead.from_window(
        window,
        page=page,
        per_page=per_page,
        page_count=page_count(total, per_page),
    )


@router.post("/decode", response_model=schemas.EventRead)
def decode_event(payload: schemas.EventDecodeRequest) -> schemas.EventRead:
    """Turn a raw contract event tuple into display-ready values."""
    settings = get_settings()
    event = Event.from_raw(
        payload.raw,
        id=payload.id,
        tz=settings.display_tz(),
    )
    return schemas.EventRead.from_event(event)
