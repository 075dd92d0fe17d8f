"""Parse ``--set SECTION.KEY=VALUE`` options and merge them into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Types :func:`coerce_value` may return."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` option."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves. The first path segment is the section.

    Args:
        raw: Option value as typed on the command line.

    Returns:
        The parsed override with its value run through :func:`coerce_value`.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or a path
            segment is empty.

    Examples:
        >>> o = parse_override("lib_log_rich.console_level=INFO")
        >>> (o.section, o.key_path, o.value)
        ('lib_log_rich', ('console_level',), 'INFO')
        >>> parse_override("lib_log_rich.queue.size=64").key_path
        ('queue', 'size')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *rest = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(rest):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(rest), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON when possible, otherwise keep the string.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("10")
        10
        >>> coerce_value('{"a": 1}')
        {'a': 1}
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Examples:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="a", key_path=("b", "c"), value=1))
        >>> tree
        {'a': {'b': {'c': 1}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            msg = f"Expected dict at key {part!r}, got {type(existing).__name__}"
            raise TypeError(msg)
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` option deep-merged on top.

    Args:
        config: Configuration loaded from the file and environment layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings, later ones win.

    Returns:
        A new Config, or ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If an override string is malformed.
        TypeError: If an override descends into a non-table value set by an
            earlier override.

    Examples:
        >>> base = Config({"lib_log_rich": {"console_level": "WARNING"}}, {})
        >>> apply_overrides(base, ("lib_log_rich.console_level=DEBUG",))["lib_log_rich"]["console_level"]
        'DEBUG'
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
