# backend/loketh/api/errors.py
from __future__ import annotations

from fastapi import APIRouter

from loketh import schemas
from loketh.services.diagnostics import classify

router = APIRouter(prefix="/errors", tags=["errors"])


@router.post("/classify", response_model=schemas.ErrorRecordRead)
def classify_error(payload: schemas.ClassifyRequest) -> schemas.ErrorRecordRead:
    """
    Classify a wallet/provider/contract error.

    The caller shows `message` only when `display_error` is set and keeps
    its own copy of the raw error when `log` is set.
    """
    record = classify(payload.error)
    return schemas.ErrorRecordRead.model_validate(record)
