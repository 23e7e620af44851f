"""Where the tour's ports meet their adapters.

The CLI never imports an adapter directly; it calls a factory from here and
works with the returned :class:`AppServices`. ``build_production`` reads real
layered config and starts lib_log_rich, ``build_testing`` keeps everything in
memory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.declarations import load_declarations
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# pyright checks each adapter against its port here.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadDeclarations,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_declarations: LoadDeclarations = load_declarations
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The four callables the CLI needs, fixed for one run."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_declarations: LoadDeclarations
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services backed by lib_layered_config and lib_log_rich."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_declarations=load_declarations,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Services with an empty config, silent display and logging, and the literal declarations."""
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_declarations_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_declarations=load_declarations_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    "load_declarations",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
