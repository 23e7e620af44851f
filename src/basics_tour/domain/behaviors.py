"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .declarations import Declarations

CANONICAL_GREETING = "Hello, Go!"

ReportLines = tuple[str, str, str, str, str]
"""The five report lines in output order."""


def build_greeting() -> str:
    """Return the canonical greeting string.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello, Go!'
    """
    return CANONICAL_GREETING


def format_line(*values: object) -> str:
    """Join the text form of each value with a single space.

    Produces exactly what ``print(*values)`` would write, without the
    trailing newline.

    Example:
        >>> format_line("Value of a:", 10, "Name:", "Gopher")
        'Value of a: 10 Name: Gopher'
        >>> format_line()
        ''
    """
    return " ".join(str(value) for value in values)


def build_report(declarations: Declarations) -> ReportLines:
    """Return the five report lines for *declarations*.

    Args:
        declarations: Variable record whose values are interpolated.

    Returns:
        Five lines in fixed order; the second is always the greeting.

    Example:
        >>> from basics_tour.domain.declarations import default_declarations
        >>> for line in build_report(default_declarations()):
        ...     print(line)
        Value of a: 10 Name: Gopher
        Hello, Go!
        Value of age: 25 city: New York
        Value of count: 10 count: 10
        Value of message: Hello city: New York
    """
    d = declarations
    return (
        format_line("Value of a:", d.a, "Name:", d.name),
        build_greeting(),
        format_line("Value of age:", d.age, "city:", d.city),
        format_line("Value of count:", d.count, "count:", d.count),
        format_line("Value of message:", d.message, "city:", d.city),
    )


__all__ = [
    "CANONICAL_GREETING",
    "ReportLines",
    "build_greeting",
    "build_report",
    "format_line",
]
