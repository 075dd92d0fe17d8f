"""The ``greeter`` command: global option handling and the greeting itself.

Contents:
    * :func:`cli` - Root command printing ``Hello, <NAME>!``.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from greeter import __init__conf__
from greeter.adapters.config.loader import validate_profile
from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.behaviors import greet, resolve_name

from .constants import CLICK_CONTEXT_SETTINGS

if TYPE_CHECKING:
    from greeter.composition import AppServices

logger = logging.getLogger(__name__)


def _apply_traceback_preference(enabled: bool) -> None:
    """Switch full (coloured) tracebacks on or off for this run."""
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def _check_profile(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    """Reject unsafe ``--profile`` names as a usage error."""
    if value is None:
        return None
    try:
        validate_profile(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return value


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides to a Config, raising UsageError on failure."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


def _load_config(services: AppServices, profile: str | None) -> Config | None:
    """Return the layered configuration, or ``None`` when a layer is unreadable.

    A malformed ``.env`` or config file anywhere on the lookup path lands
    here; the failure is reported on stderr and the greeting goes on.
    """
    try:
        return services.get_config(profile=profile)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "Configuration could not be loaded, continuing without logging: %s",
            exc,
            exc_info=bool(lib_cli_exit_tools.config.traceback),
        )
        return None


def _start_logging(services: AppServices, config: Config) -> None:
    try:
        services.init_logging(config)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "Logging could not be initialised, continuing without it: %s",
            exc,
            exc_info=bool(lib_cli_exit_tools.config.traceback),
        )


def _show_info(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Eager ``--info`` callback: print metadata and stop before greeting."""
    if not value or ctx.resilient_parsing:
        return
    __init__conf__.print_info()
    ctx.exit(0)


def _log_scope(name: str) -> contextlib.AbstractContextManager[object]:
    """Bind per-run log context when the logging runtime is up."""
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "name": name})
    return contextlib.nullcontext()


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--info",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_show_info,
    help="Show package metadata and exit",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    callback=_check_profile,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.argument("name", required=False, default=None)
@click.pass_context
def cli(
    ctx: click.Context,
    name: str | None,
    traceback: bool,
    profile: str | None,
    set_overrides: tuple[str, ...],
) -> None:
    """Greet NAME, or the World when NAME is missing or empty.

    Names starting with ``-`` are greeted as well; put ``--`` before one
    that clashes with an option of this command.

    Configuration only steers logging. When it cannot be read, or logging
    cannot start, a warning goes to stderr and the greeting is printed
    anyway. Malformed ``--set`` values remain usage errors.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["Ada"], obj=build_testing)
        >>> result.output
        'Hello, Ada!\\n'
    """
    _apply_traceback_preference(traceback)
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any

    loaded = _load_config(services, profile)
    config = _apply_cli_overrides(loaded if loaded is not None else Config({}, {}), set_overrides)
    if loaded is not None:
        _start_logging(services, config)

    target = resolve_name(name)
    with _log_scope(target):
        if ctx.args:
            logger.debug("Ignoring extra arguments: %s", ctx.args)
        logger.debug("Greeting %r", target)
        click.echo(greet(target))


__all__ = ["cli"]
