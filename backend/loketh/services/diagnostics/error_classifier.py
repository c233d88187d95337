from __future__ import annotations

"""backend/loketh/services/diagnostics/error_classifier.py

Centralized classification of wallet, provider and contract errors.

Errors reach the client in whatever shape the integration layer raised
them: an exception, a dict-like payload with a "message" key, an object
with a `message` attribute, or a bare string. They are normalized to a
single message string and matched against ERROR_SIGNATURES.

The classification is:
- deterministic (no randomness)
- text-based (substring containment, case sensitive)
- ordered (first signature in declared order wins)
- total (never raises, unknown input yields DEFAULT_ERROR)
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ErrorRecord:
    """What to show the user and whether to keep the raw error."""

    display_error: bool
    log: bool
    message: str


# Order matters: the first pattern contained in the message wins.
ERROR_SIGNATURES: Tuple[Tuple[str, ErrorRecord], ...] = (
    (
        "You have no Metamask installed",
        ErrorRecord(
            display_error=True,
            log=False,
            message="You have no Metamask installed.",
        ),
    ),
    (
        "You are connected to the wrong network",
        ErrorRecord(
            display_error=True,
            log=False,
            message="You are connected to the wrong network.",
        ),
    ),
    (
        "User rejected the request",
        ErrorRecord(
            display_error=True,
            log=False,
            message="You rejected the connect request.",
        ),
    ),
    (
        "User denied transaction signature",
        ErrorRecord(
            display_error=False,
            log=False,
            message="MetaMask Tx Signature: User denied transaction signature.",
        ),
    ),
    (
        "Loketh: Organizer can not buy their own event",
        ErrorRecord(
            display_error=True,
            log=False,
            message="You can not buy a ticket from your own event.",
        ),
    ),
    (
        "Loketh: Participant already bought the ticket",
        ErrorRecord(
            display_error=True,
            log=False,
            message="You are already buy this ticket.",
        ),
    ),
)

DEFAULT_ERROR = ErrorRecord(
    display_error=True,
    log=True,
    message="Something went wrong.",
)


def _as_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        pass
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return type(value).__name__


def _normalize(error: Any) -> str:
    if isinstance(error, BaseException):
        message = getattr(error, "message", None)
        if isinstance(message, str) and message:
            return message
        return _as_text(error)

    if isinstance(error, Mapping):
        message = error.get("message")
        if message:
            return _as_text(message)
        return _as_text(error)

    if not isinstance(error, str):
        message = getattr(error, "message", None)
        if message:
            return _as_text(message)

    return _as_text(error)


def error_message(error: Any) -> str:
    """Normalize any error value into the message string to classify.

    Exceptions use their `message` attribute when present (web3 and
    provider errors carry one), otherwise `str(exc)`. Mappings and plain
    objects contribute their `message` only when it is truthy; anything
    else is coerced to text. Never raises.
    """
    try:
        return _normalize(error)
    except Exception:  # noqa: BLE001
        # getattr on exotic objects can raise; fall back to the type name
        return type(error).__name__


def match_signature(message: str) -> Optional[ErrorRecord]:
    """Return a copy of the first signature record contained in `message`."""
    for pattern, record in ERROR_SIGNATURES:
        if pattern in message:
            return replace(record)
    return None


def classify(error: Any) -> ErrorRecord:
    """Classify an error value into an ErrorRecord.

    It never returns None; at minimum it returns a copy of DEFAULT_ERROR.
    """
    return match_signature(error_message(error)) or replace(DEFAULT_ERROR)
