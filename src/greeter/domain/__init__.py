"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting formatting and default-name resolution
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_NAME,
    GREETING_PREFIX,
    GREETING_SUFFIX,
    greet,
    resolve_name,
)

__all__ = [
    "DEFAULT_NAME",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "greet",
    "resolve_name",
]
