"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

GREETING_PREFIX: Final[str] = "Hello, "
GREETING_SUFFIX: Final[str] = "!"
DEFAULT_NAME: Final[str] = "World"


def greet(name: str) -> str:
    """Return the greeting for ``name``.

    The name is embedded unmodified between :data:`GREETING_PREFIX` and
    :data:`GREETING_SUFFIX`; any string is accepted, including the empty one.

    Args:
        name: Who to greet.

    Returns:
        The formatted greeting.

    Example:
        >>> greet("World")
        'Hello, World!'
        >>> greet("")
        'Hello, !'
    """
    return f"{GREETING_PREFIX}{name}{GREETING_SUFFIX}"


def resolve_name(raw: str | None) -> str:
    """Return ``raw`` when it is a non-empty string, else :data:`DEFAULT_NAME`.

    Example:
        >>> resolve_name("Ada")
        'Ada'
        >>> resolve_name(None)
        'World'
        >>> resolve_name("")
        'World'
        >>> resolve_name(" ")
        ' '
    """
    return raw if raw else DEFAULT_NAME


__all__ = [
    "DEFAULT_NAME",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "greet",
    "resolve_name",
]
