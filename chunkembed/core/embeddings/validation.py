"""
Configuration validation for the chunking embedding function.

Raw configuration arrives as an untyped mapping (persisted JSON, user input).
It is checked against a fixed rule table before it is ever turned into a
typed snapshot, so every problem is reported against the field that caused it.

Two modes share the table layout:
- Full validation: service_url and model are required, the rest optional.
- Update validation: only chunk_size and splitter may change; every other
  field must be absent.

Every rule is evaluated. When several fail, the first one in FIELD_ORDER is
raised and the full list of messages is attached as context["errors"].
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from chunkembed.utils.exceptions import (
    ConfigValidationError,
    ImmutableFieldError,
    InvalidFieldError,
    MissingFieldError,
    ValidationError,
)

Predicate = Callable[[Any], bool]

FIELD_ORDER = (
    "service_url",
    "model",
    "encoding_format",
    "chunk_size",
    "chunk_overlap",
    "chunk_strategy",
    "splitter",
)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid size
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_positive_number(value: Any) -> bool:
    return is_number(value) and value > 0


def is_non_negative_number(value: Any) -> bool:
    return is_number(value) and value >= 0


def is_callable(value: Any) -> bool:
    return callable(value)


class FieldMode(str, Enum):
    """How a field is treated by a validation mode."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    IMMUTABLE = "immutable"


class FieldRule(BaseModel):
    """Single row of a validation table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Configuration key the rule applies to")
    mode: FieldMode = Field(..., description="Required, optional or immutable")
    predicate: Predicate | None = Field(
        default=None, description="Type/range check for present values (unused for immutable)"
    )

    def check(self, value: Any) -> ConfigValidationError | None:
        """
        Check a raw value against this rule.

        Args:
            value: Raw value, None when the key is absent

        Returns:
            The failure for this field, or None if the value is acceptable
        """
        if self.mode is FieldMode.IMMUTABLE:
            return None if value is None else ImmutableFieldError(self.name)

        if value is None:
            return MissingFieldError(self.name) if self.mode is FieldMode.REQUIRED else None

        if self.predicate is not None and not self.predicate(value):
            return InvalidFieldError(self.name)

        return None


CONFIG_RULES: tuple[FieldRule, ...] = (
    FieldRule(name="service_url", mode=FieldMode.REQUIRED, predicate=is_string),
    FieldRule(name="model", mode=FieldMode.REQUIRED, predicate=is_string),
    FieldRule(name="encoding_format", mode=FieldMode.OPTIONAL, predicate=is_string),
    FieldRule(name="chunk_size", mode=FieldMode.OPTIONAL, predicate=is_positive_number),
    FieldRule(name="chunk_overlap", mode=FieldMode.OPTIONAL, predicate=is_non_negative_number),
    FieldRule(name="chunk_strategy", mode=FieldMode.OPTIONAL, predicate=is_string),
    FieldRule(name="splitter", mode=FieldMode.OPTIONAL, predicate=is_callable),
)

UPDATE_RULES: tuple[FieldRule, ...] = (
    FieldRule(name="service_url", mode=FieldMode.IMMUTABLE),
    FieldRule(name="model", mode=FieldMode.IMMUTABLE),
    FieldRule(name="encoding_format", mode=FieldMode.IMMUTABLE),
    FieldRule(name="chunk_size", mode=FieldMode.OPTIONAL, predicate=is_positive_number),
    FieldRule(name="chunk_overlap", mode=FieldMode.IMMUTABLE),
    FieldRule(name="chunk_strategy", mode=FieldMode.IMMUTABLE),
    FieldRule(name="splitter", mode=FieldMode.OPTIONAL, predicate=is_callable),
)


def collect_errors(
    rules: tuple[FieldRule, ...], raw: Mapping[str, Any]
) -> list[ConfigValidationError]:
    """
    Evaluate every rule against a raw mapping.

    Args:
        rules: Validation table, in the order failures should be reported
        raw: Untyped configuration mapping

    Returns:
        All failures, in rule order (empty when the mapping is acceptable)

    Raises:
        ValidationError: If raw is not a mapping
    """
    if not isinstance(raw, Mapping):
        raise ValidationError(
            "Configuration must be a mapping", {"type": type(raw).__name__}
        )

    errors = []
    for rule in rules:
        error = rule.check(raw.get(rule.name))
        if error is not None:
            errors.append(error)
    return errors


def _raise_first(errors: list[ConfigValidationError]) -> None:
    if not errors:
        return
    first = errors[0]
    first.context["errors"] = [error.message for error in errors]
    raise first


def validate_config(raw: Mapping[str, Any]) -> None:
    """
    Validate a configuration for construction.

    Args:
        raw: Untyped configuration mapping

    Raises:
        MissingFieldError: If service_url or model is absent
        InvalidFieldError: If a present field fails its check
        ValidationError: If raw is not a mapping
    """
    _raise_first(collect_errors(CONFIG_RULES, raw))


def validate_config_update(raw: Mapping[str, Any]) -> None:
    """
    Validate a partial configuration update.

    Absent (missing or None) fields mean "no change" and are always accepted.

    Args:
        raw: Untyped partial configuration mapping

    Raises:
        ImmutableFieldError: If a field fixed after creation is supplied
        InvalidFieldError: If chunk_size or splitter fails its check
        ValidationError: If raw is not a mapping
    """
    _raise_first(collect_errors(UPDATE_RULES, raw))
