"""In-memory adapter implementations for testing.

Contents:
    * :mod:`.config` - Empty configuration, no filesystem access
    * :mod:`.logging` - No-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greeter.application.ports import GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "get_config_in_memory",
    "init_logging_in_memory",
]
