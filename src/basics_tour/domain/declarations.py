"""Named values introduced by the tour, grouped by how they are declared.

Contents:
    * :data:`PI` and :data:`MAX_USERS` - immutable named constants.
    * :class:`DeclarationForm` - the syntactic form used to introduce a value.
    * :class:`Declarations` - frozen record of the six tour variables.
    * :class:`Declaration` - one listing row (name, form, type, value).
    * :func:`default_declarations` / :func:`list_declarations`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

PI: Final[float] = 3.14159
MAX_USERS: Final[int] = 100


class DeclarationForm(str, Enum):
    """How a named value was introduced.

    Example:
        >>> DeclarationForm.SHORT.value
        'short'
        >>> DeclarationForm.CONSTANT == "constant"
        True
    """

    TYPED = "typed"
    INFERRED = "inferred"
    SHORT = "short"
    CONSTANT = "constant"


@dataclass(frozen=True, slots=True)
class Declarations:
    """The six tour variables; none of them is reassigned after construction.

    Example:
        >>> decls = Declarations(a=1, name="n", age=2, city="c", count=3, message="m")
        >>> decls.city
        'c'
    """

    a: int
    name: str
    age: int
    city: str
    count: int
    message: str


@dataclass(frozen=True, slots=True)
class Declaration:
    """A single named value as shown by the ``declarations`` listing."""

    name: str
    form: DeclarationForm
    type_name: str
    value: int | float | str


DEFAULT_DECLARATIONS: Final[Declarations] = Declarations(
    a=10,
    name="Gopher",
    age=25,
    city="New York",
    count=10,
    message="Hello",
)

# Declaration order of the variables and the form each one uses.
_VARIABLE_FORMS: Final[tuple[tuple[str, DeclarationForm], ...]] = (
    ("a", DeclarationForm.TYPED),
    ("name", DeclarationForm.TYPED),
    ("age", DeclarationForm.TYPED),
    ("city", DeclarationForm.INFERRED),
    ("count", DeclarationForm.SHORT),
    ("message", DeclarationForm.SHORT),
)


def default_declarations() -> Declarations:
    """Return the record built from the tour's literal values.

    Example:
        >>> default_declarations().name
        'Gopher'
    """
    return DEFAULT_DECLARATIONS


def list_declarations(declarations: Declarations) -> tuple[Declaration, ...]:
    """Return every named value, variables first and constants last.

    Args:
        declarations: The variable record to list.

    Returns:
        Eight rows in declaration order.

    Example:
        >>> rows = list_declarations(default_declarations())
        >>> [row.name for row in rows]
        ['a', 'name', 'age', 'city', 'count', 'message', 'PI', 'MAX_USERS']
        >>> rows[-2].value
        3.14159
    """
    rows = [
        Declaration(
            name=field_name,
            form=form,
            type_name=type(getattr(declarations, field_name)).__name__,
            value=getattr(declarations, field_name),
        )
        for field_name, form in _VARIABLE_FORMS
    ]
    rows.append(Declaration(name="PI", form=DeclarationForm.CONSTANT, type_name="float", value=PI))
    rows.append(Declaration(name="MAX_USERS", form=DeclarationForm.CONSTANT, type_name="int", value=MAX_USERS))
    return tuple(rows)


__all__ = [
    "DEFAULT_DECLARATIONS",
    "MAX_USERS",
    "PI",
    "Declaration",
    "DeclarationForm",
    "Declarations",
    "default_declarations",
    "list_declarations",
]
