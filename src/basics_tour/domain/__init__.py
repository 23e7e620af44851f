"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.declarations` - Named variables and constants of the tour
    * :mod:`.behaviors` - Greeting and the five-line report
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    build_report,
    format_line,
)
from .declarations import (
    MAX_USERS,
    PI,
    Declaration,
    DeclarationForm,
    Declarations,
    default_declarations,
    list_declarations,
)
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    "build_report",
    "format_line",
    # Declarations
    "MAX_USERS",
    "PI",
    "Declaration",
    "DeclarationForm",
    "Declarations",
    "default_declarations",
    "list_declarations",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
