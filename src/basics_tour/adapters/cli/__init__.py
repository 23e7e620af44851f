"""CLI package providing the command-line interface.

Re-exports the root group, the entry point, context helpers and every
command so consumers stay insulated from internal module boundaries.
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_declarations,
    cli_fail,
    cli_hello,
    cli_info,
    cli_report,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    preserved_traceback_state,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_config",
    "cli_declarations",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_report",
]
