"""Declarations configuration model and loader.

Validates the ``[declarations]`` section with Pydantic and converts it into
the domain :class:`~basics_tour.domain.declarations.Declarations` record.
Keys missing from the section fall back to the tour's literal values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from basics_tour.domain.declarations import DEFAULT_DECLARATIONS, Declarations
from basics_tour.domain.errors import ConfigurationError

SECTION = "declarations"


class DeclarationsConfigModel(BaseModel):
    """Pydantic model for the [declarations] config section.

    Unknown keys are rejected so a typo in a config file is reported
    instead of silently ignored.

    Example:
        >>> model = DeclarationsConfigModel(name="Gophers")
        >>> model.name
        'Gophers'
        >>> model.age
        25
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    a: int = DEFAULT_DECLARATIONS.a
    name: str = DEFAULT_DECLARATIONS.name
    age: int = DEFAULT_DECLARATIONS.age
    city: str = DEFAULT_DECLARATIONS.city
    count: int = DEFAULT_DECLARATIONS.count
    message: str = DEFAULT_DECLARATIONS.message

    @field_validator("name", "city", "message", mode="before")
    @classmethod
    def _coerce_scalar_to_text(cls, v: Any) -> Any:
        """Turn numbers and booleans back into text.

        ``--set`` reads values as JSON, so ``declarations.name=42`` arrives as
        an int. Booleans keep their JSON spelling.

        Examples:
            >>> DeclarationsConfigModel._coerce_scalar_to_text(42)
            '42'
            >>> DeclarationsConfigModel._coerce_scalar_to_text(True)
            'true'
            >>> DeclarationsConfigModel._coerce_scalar_to_text("Gopher")
            'Gopher'
        """
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("a", "age", "count", mode="before")
    @classmethod
    def _reject_bool(cls, v: Any) -> Any:
        """Refuse booleans, which pydantic would otherwise read as 0 or 1."""
        if isinstance(v, bool):
            raise ValueError("Input should be a valid integer, not a boolean")
        return v

    def to_domain(self) -> Declarations:
        """Return the validated values as a domain record."""
        return Declarations(
            a=self.a,
            name=self.name,
            age=self.age,
            city=self.city,
            count=self.count,
            message=self.message,
        )


def _describe(exc: ValidationError) -> str:
    """Flatten Pydantic errors into ``declarations.<field>: <message>`` lines."""
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{SECTION}.{location}: {error['msg']}")
    return "; ".join(parts)


def load_declarations_from_dict(section: Mapping[str, Any]) -> Declarations:
    """Validate a ``[declarations]`` mapping and build the domain record.

    Args:
        section: Raw contents of the section (may be empty).

    Returns:
        Declarations with defaults filled in for missing keys.

    Raises:
        ConfigurationError: If a value has the wrong type or a key is unknown.

    Examples:
        >>> load_declarations_from_dict({}).city
        'New York'
        >>> load_declarations_from_dict({"age": "30"}).age
        30
        >>> load_declarations_from_dict({"colour": "red"})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        basics_tour.domain.errors.ConfigurationError: declarations.colour: Extra inputs are not permitted
    """
    try:
        parsed = DeclarationsConfigModel.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc
    return parsed.to_domain()


def load_declarations(config: Config) -> Declarations:
    """Build the variable record from an already-loaded Config.

    Args:
        config: Layered configuration; only the ``[declarations]`` section is read.

    Returns:
        Validated Declarations.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_declarations(Config({"declarations": {"name": "Gophers"}}, {})).name
        'Gophers'
    """
    raw: object = config.get(SECTION, default={})
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{SECTION}] must be a table, got {type(raw).__name__}")
    return load_declarations_from_dict(cast("Mapping[str, Any]", raw))


__all__ = [
    "DeclarationsConfigModel",
    "load_declarations",
    "load_declarations_from_dict",
]
