"""State shared between the root group and its subcommands.

The root command loads configuration once and stores it, together with the
wired services, in a :class:`CLIContext` on the Click context. Subcommands
read it back with :func:`get_cli_context`.

The ``--traceback`` flag lives in ``lib_cli_exit_tools.config``, which is
process-global; the helpers at the bottom snapshot and restore it so one
CLI run cannot leak the setting into the next.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from basics_tour.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as read from lib_cli_exit_tools."""


@dataclass(slots=True)
class CLIContext:
    """What every subcommand needs: flags, effective config and services.

    ``set_overrides`` keeps the raw root ``--set`` values so a subcommand
    that reloads config for another profile can reapply them.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a :class:`CLIContext`."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Raises:
        RuntimeError: If the root command has not run for this context.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=Config({}, {}), services=MagicMock(), profile="classroom")
        >>> get_cli_context(ctx).profile
        'classroom'
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off.

    Example:
        >>> previous = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        (True, True)
        >>> restore_traceback_state(previous)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


@contextmanager
def preserved_traceback_state(*, restore: bool = True) -> Iterator[TracebackState]:
    """Snapshot the traceback flags and put them back on exit.

    With ``restore=False`` the flags keep whatever the block left behind.

    Example:
        >>> with preserved_traceback_state() as before:
        ...     apply_traceback_preferences(not before[0])
        >>> snapshot_traceback_state() == before
        True
    """
    previous = snapshot_traceback_state()
    try:
        yield previous
    finally:
        if restore:
            restore_traceback_state(previous)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
