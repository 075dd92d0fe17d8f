"""CLI package providing the ``greeter`` command.

Contents:
    * The command from :mod:`.root`
    * Entry point and exit-code mapping from :mod:`.main`
"""

from __future__ import annotations

from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "cli",
    "main",
]
