"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Report commands from :mod:`.report`
    * Info commands from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_fail, cli_hello, cli_info
from .report import cli_declarations, cli_report

__all__ = [
    "cli_config",
    "cli_declarations",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_report",
]
