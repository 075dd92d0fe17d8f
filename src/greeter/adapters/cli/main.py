"""Run the ``greeter`` command and turn its outcome into an exit code.

Exit codes:
    * ``0`` - the greeting was printed, or ``--help``/``--version``/``--info``
      answered. A broken configuration file or logging backend only costs
      a warning on stderr; the greeting and the 0 still follow.
    * ``2`` - Click usage error: malformed ``--set``, invalid ``--profile``
      or a reserved option missing its value. Stdout stays empty.
    * anything else - an unexpected exception, summarised on stderr by
      lib_cli_exit_tools (full traceback with ``--traceback``) and mapped
      through :func:`lib_cli_exit_tools.get_system_exit_code`.

Contents:
    * :func:`main` - Console script and ``python -m greeter`` entry.
"""

from __future__ import annotations

import contextlib
import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .root import cli

if TYPE_CHECKING:
    from greeter.composition import AppServices


@contextlib.contextmanager
def _traceback_flags_kept(restore: bool) -> Iterator[None]:
    """Put the ``lib_cli_exit_tools`` traceback flags back once the run ends."""
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        yield
    finally:
        if restore:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


def _report_failure(exc: BaseException) -> int:
    """Print *exc* the lib_cli_exit_tools way and return its exit code."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli cannot hand the factory to ctx.obj, so Click
    # runs non-standalone and its outcomes are mapped here.
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_failure(exc)
    return 0


def _shut_down_logging() -> None:
    # From a worker thread this would stop logging for the main thread as well.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Greet from the command line and return the exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Reset the traceback flags ``--traceback`` set.
        services_factory: Returns the :class:`AppServices` for the run.
            ``greeter.entry`` passes ``build_production``.

    Raises:
        ValueError: If no services factory is given.

    Example:
        >>> from greeter.composition import build_testing
        >>> main(["Ada"], services_factory=build_testing)
        Hello, Ada!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    with _traceback_flags_kept(restore_traceback):
        try:
            return _invoke(args, services_factory)
        finally:
            _shut_down_logging()


__all__ = ["main"]
