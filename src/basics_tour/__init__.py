"""Public package surface exposing the report, declarations, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Core logic (declarations, greeting, report)
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    build_report,
    format_line,
)
from .domain.declarations import (
    MAX_USERS,
    PI,
    Declarations,
    default_declarations,
    list_declarations,
)

__all__ = [
    "CANONICAL_GREETING",
    "MAX_USERS",
    "PI",
    "Declarations",
    "build_greeting",
    "build_report",
    "default_declarations",
    "format_line",
    "get_config",
    "list_declarations",
    "print_info",
]
