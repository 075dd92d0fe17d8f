"""Static package metadata surfaced to the CLI and configuration layers.

Values here mirror ``pyproject.toml``; ``tests/test_metadata.py``
guards against drift.

Contents:
    * Project identity (``name``, ``title``, ``version`` ...).
    * ``LAYEREDCONF_*`` identifiers used to resolve configuration paths.
    * :func:`print_info` - Render the metadata block for ``--info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greeter"
title: Final[str] = "Print a friendly greeting for a name"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/bitranox/greeter"
author: Final[str] = "bitranox"
author_email: Final[str] = "bitranox@gmail.com"
shell_command: Final[str] = "greeter"

#: Vendor segment for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
#: Application segment for macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Greeter"
#: Slug for Linux XDG configuration paths (``~/.config/<slug>/``).
LAYEREDCONF_SLUG: Final[str] = "greeter"


def print_info() -> None:
    """Print the package metadata as an aligned ``label = value`` block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        <BLANKLINE>
            name          = greeter
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
