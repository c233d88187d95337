from __future__ import annotations

"""backend/loketh/services/diagnostics/handler.py

Route a classified error to the display and log sinks.

The record decides: `display_error` sends the sanitized message to the
notify sink, `log` records the *original* error, untouched, for
diagnostics. User cancellations therefore stay out of both the logs and
the user's way.
"""

import logging
from typing import Any, Callable, Optional

from loketh.services.diagnostics.error_classifier import (
    ErrorRecord,
    classify,
    error_message,
)
from loketh.services.statsig_client import log_backend_event

logger = logging.getLogger(__name__)
notify_logger = logging.getLogger("loketh.notify")

Notifier = Callable[[str], None]


def _log_notify(message: str) -> None:
    notify_logger.warning(message)


def handle_error(error: Any, notify: Optional[Notifier] = None) -> ErrorRecord:
    record = classify(error)

    if record.display_error:
        (notify or _log_notify)(record.message)

    if record.log:
        exc_info = None
        if isinstance(error, BaseException):
            exc_info = (type(error), error, error.__traceback__)
        logger.error(
            "Unclassified client error: %s",
            error_message(error),
            exc_info=exc_info,
        )
        log_backend_event(
            "client_error",
            value=type(error).__name__,
            metadata={"message": record.message},
        )

    return record
