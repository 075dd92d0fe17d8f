"""Shared pytest fixtures for CLI, module-entry and adapter tests.

Fixtures use descriptive names that read as plain English; tests pick them up
through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture(autouse=True)
def logging_runtime_is_shut_down() -> Iterator[None]:
    """Tear down any lib_log_rich runtime a CliRunner invocation left running.

    ``main()`` shuts the runtime down itself; ``CliRunner.invoke`` bypasses
    ``main()``, so production-wired invocations would otherwise leak it into
    the next test.
    """
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.2 keeps ``result.stdout`` and ``result.stderr`` apart; compare the
    greeting against ``result.stdout`` so log records cannot leak into it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config and logging)."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory (empty config, no logging)."""
    from greeter.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a test may monkeypatch ``get_config`` away.
    """
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def recording_services() -> Callable[..., tuple[Callable[[], AppServices], dict[str, list[Any]]]]:
    """Return a builder for a services factory that records every port call.

    The builder accepts the Config to hand out and optional exceptions for
    ``get_config`` (``config_error``) and ``init_logging`` (``init_error``)
    to raise. It returns ``(factory, calls)`` where
    ``calls["profiles"]`` lists the profiles requested from ``get_config``
    and ``calls["configs"]`` the Config objects passed to ``init_logging``.

    Example:
        def test_profile(cli_runner, config_factory, recording_services) -> None:
            factory, calls = recording_services(config_factory({}))
            cli_runner.invoke(cli, ["--profile", "staging"], obj=factory)
            assert calls["profiles"] == ["staging"]
    """
    from greeter.composition import AppServices

    def _build(
        config: Config,
        *,
        config_error: BaseException | None = None,
        init_error: BaseException | None = None,
    ) -> tuple[Callable[[], AppServices], dict[str, list[Any]]]:
        calls: dict[str, list[Any]] = {"profiles": [], "configs": []}

        def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            calls["profiles"].append(profile)
            if config_error is not None:
                raise config_error
            return config

        def _init_logging(received: Config) -> None:
            calls["configs"].append(received)
            if init_error is not None:
                raise init_error

        services = AppServices(get_config=_get_config, init_logging=_init_logging)
        return (lambda: services), calls

    return _build
