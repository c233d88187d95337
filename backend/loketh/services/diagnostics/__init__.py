from __future__ import annotations

"""
Diagnostics and error classification utilities.

This package currently provides:
- error_classifier: map wallet/provider/contract failures onto a fixed
  table of known signatures and produce a user-safe ErrorRecord.
- handler: dispatch an ErrorRecord to the display and log sinks.

The goal is to keep error handling logic centralized and deterministic.
"""

from .error_classifier import (  # noqa: F401
    DEFAULT_ERROR,
    ERROR_SIGNATURES,
    ErrorRecord,
    classify,
    error_message,
    match_signature,
)
from .handler import handle_error  # noqa: F401
