# backend/loketh/__init__.py
from __future__ import annotations

"""
Marks `loketh` as a Python package.

Routers live in loketh/api, pure helpers in loketh/services, etc.
"""
