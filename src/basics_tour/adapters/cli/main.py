"""Run the root command group and turn every outcome into an exit code.

The console script and ``python -m basics_tour`` both land here, so the
report, usage errors and crashes are handled the same way for each.

Contents:
    * :func:`main` - run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from basics_tour import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, preserved_traceback_state

if TYPE_CHECKING:
    from basics_tour.composition import AppServices


def _print_crash(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit code.

    The full traceback is shown only when ``--traceback`` switched it on.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Run the group once with *services_factory* in ``ctx.obj``."""
    from .root import cli

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
    except SystemExit as exc:
        # Commands exit this way only after writing their own message to stderr.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        return _print_crash(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI and return the exit code instead of exiting.

    Args:
        argv: CLI arguments; None reads ``sys.argv[1:]``.
        restore_traceback: Put the traceback flags back afterwards.
        services_factory: Factory returning AppServices; pass ``build_production``.

    Returns:
        0 after the report (or any other command) succeeded, otherwise the
        code of the failure.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from basics_tour.composition import build_production
        >>> main(["hello"], services_factory=build_production)  # doctest: +SKIP
        Hello, Go!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        with preserved_traceback_state(restore=restore_traceback):
            return _invoke(args, services_factory)
    finally:
        # Worker threads may still be logging; only the main thread tears the runtime down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
