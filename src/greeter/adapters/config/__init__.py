"""Configuration adapter - layered loading and CLI overrides.

Contents:
    * :mod:`.loader` - Configuration loading with caching and profiles
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
