"""Public package surface exposing the greeter, metadata, and configuration.

Importing this package never writes output; only the ``greeter`` console
script and ``python -m greeter`` print the greeting.

- Domain exports: :func:`greet`, :func:`resolve_name`
- Composition exports: :func:`get_config`
- Metadata: :func:`print_info`
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    DEFAULT_NAME,
    greet,
    resolve_name,
)

__all__ = [
    "DEFAULT_NAME",
    "get_config",
    "greet",
    "print_info",
    "resolve_name",
]
