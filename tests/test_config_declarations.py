"""Declarations config stories: defaults, coercion, and rejected values."""

from __future__ import annotations

from typing import Any

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from basics_tour.adapters.config.declarations import (
    DeclarationsConfigModel,
    load_declarations,
    load_declarations_from_dict,
)
from basics_tour.domain.declarations import Declarations, default_declarations
from basics_tour.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_model_defaults_are_the_literal_values() -> None:
    """An empty section yields the literal record."""
    assert DeclarationsConfigModel().to_domain() == default_declarations()


@pytest.mark.os_agnostic
def test_model_is_frozen() -> None:
    model = DeclarationsConfigModel()

    with pytest.raises(ValidationError):
        model.name = "Gophers"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_partial_section_keeps_the_remaining_literals() -> None:
    """Only the given keys change."""
    result = load_declarations_from_dict({"name": "Gophers", "count": 3})

    assert result == Declarations(a=10, name="Gophers", age=25, city="New York", count=3, message="Hello")


@pytest.mark.os_agnostic
def test_numeric_strings_are_coerced_for_integer_fields() -> None:
    """Environment variables arrive as text; numeric text is accepted for ints."""
    assert load_declarations_from_dict({"age": "30"}).age == 30


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("section", "expected"),
    [
        ({"name": 42}, "42"),
        ({"city": 1.5}, "1.5"),
        ({"message": True}, "true"),
    ],
)
def test_json_scalars_are_read_back_as_text_for_text_fields(section: dict[str, Any], expected: str) -> None:
    """--set parses values as JSON; text fields take numbers and booleans as their text."""
    field = next(iter(section))

    assert getattr(load_declarations_from_dict(section), field) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("section", "field"),
    [
        ({"age": "twenty-five"}, "declarations.age"),
        ({"a": 1.5}, "declarations.a"),
        ({"count": [1, 2]}, "declarations.count"),
        ({"name": ["Go"]}, "declarations.name"),
        ({"age": True}, "declarations.age"),
        ({"city": None}, "declarations.city"),
        ({"PI": 3.0}, "declarations.PI"),
    ],
)
def test_invalid_values_name_the_offending_field(section: dict[str, Any], field: str) -> None:
    """Wrong types and unknown keys raise ConfigurationError naming the key."""
    with pytest.raises(ConfigurationError, match=field.replace(".", r"\.")):
        load_declarations_from_dict(section)


@pytest.mark.os_agnostic
def test_several_errors_are_joined() -> None:
    """Every problem is reported, separated by semicolons."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_declarations_from_dict({"age": "x", "count": "y"})

    message = str(exc_info.value)
    assert "declarations.age" in message
    assert "declarations.count" in message
    assert "; " in message


@pytest.mark.os_agnostic
def test_load_declarations_without_section_uses_literals() -> None:
    assert load_declarations(Config({}, {})) == default_declarations()


@pytest.mark.os_agnostic
def test_load_declarations_reads_the_section() -> None:
    result = load_declarations(Config({"declarations": {"message": "Hi", "city": "Rome"}}, {}))

    assert result.message == "Hi"
    assert result.city == "Rome"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["Gopher", 10, ["a"]])
def test_load_declarations_rejects_non_table_section(raw: object) -> None:
    """The section must be a table."""
    with pytest.raises(ConfigurationError, match="must be a table"):
        load_declarations(Config({"declarations": raw}, {}))


@pytest.mark.os_agnostic
def test_bundled_defaults_load_to_the_literals(clear_config_cache: None) -> None:
    """The shipped configuration produces the literal record."""
    from basics_tour.adapters.config.loader import get_config

    assert load_declarations(get_config()) == default_declarations()
