"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[declarations]`` section holds values of the wrong
    type or unknown keys. Caught at the CLI boundary and reported with
    the configuration exit code.

    Example:
        >>> from basics_tour.domain.errors import ConfigurationError
        >>> err = ConfigurationError("declarations.age: Input should be a valid integer")
        >>> str(err)
        'declarations.age: Input should be a valid integer'
    """


__all__ = ["ConfigurationError"]
