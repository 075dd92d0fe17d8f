"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click command line interface
    * :mod:`.config` - Layered configuration loading and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory stand-ins for tests
"""

from __future__ import annotations

__all__: list[str] = []
