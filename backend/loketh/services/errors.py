from __future__ import annotations

"""backend/loketh/services/errors.py

Exceptions shared by the pure helper modules.
"""


class InvalidArgument(ValueError):
    """Raised when a helper receives an argument outside its domain."""
