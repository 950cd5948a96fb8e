"""Field validators.

Each validator is a named, stateless predicate over a single field value
paired with a fixed failure message. Messages may reference the field's
display name through a ``{field}`` placeholder.

Validators that need a numeric value coerce it with :func:`to_int32`,
which raises :class:`ConversionError` instead of returning a verdict when
the value cannot be read as an integer.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import email_validator
from email_validator import EmailNotValidError, validate_email

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INT32_DIGITS = len(str(INT32_MAX))

_INTEGER_TEXT = re.compile(r"^[+-]?[0-9]+$")

# Address checks are syntax only, so reserved names such as localhost pass.
email_validator.SPECIAL_USE_DOMAIN_NAMES[:] = []


class ConversionError(ValueError):
    """Raised when a value cannot be coerced to the type a validator expects."""

    def __init__(self, value: Any, target: str = "integer"):
        self.value = value
        self.target = target
        super().__init__(f"The value '{value}' is not a valid {target}.")


def to_int32(value: Any) -> int:
    """Coerce a JSON scalar to a signed 32-bit integer.

    ``None`` becomes 0, booleans become 1/0, floats are rounded half to
    even and text must be a plain (optionally signed) decimal integer.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ConversionError(value)
        result = round(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_TEXT.match(text):
            raise ConversionError(value)
        if len(text.lstrip("+-").lstrip("0")) > _INT32_DIGITS:
            raise ConversionError(value, "32-bit integer")
        result = int(text)
    else:
        raise ConversionError(value)

    if not INT32_MIN <= result <= INT32_MAX:
        raise ConversionError(value, "32-bit integer")
    return result


@dataclass(frozen=True)
class Validator:
    """A named field rule: ``check`` returns True when the value is acceptable."""

    name: str
    message: str
    check: Callable[[Any], bool]

    def validate(self, value: Any) -> bool:
        return self.check(value)

    def format_message(self, field: str) -> str:
        return self.message.format(field=field)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def required() -> Validator:
    """Fails on ``None``, empty text or whitespace-only text."""
    def check(value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True

    return Validator("required", "The {field} field is required.", check)


def max_length(limit: int) -> Validator:
    """Fails when a text value is longer than ``limit``."""
    def check(value: Any) -> bool:
        if value is None:
            return True
        return len(value) <= limit

    return Validator(
        "max_length",
        f"The field {{field}} must be a string with a maximum length of {limit}.",
        check,
    )


def value_range(low: int, high: int) -> Validator:
    """Fails when a numeric value falls outside ``[low, high]``."""
    def check(value: Any) -> bool:
        return low <= value <= high

    return Validator(
        "range",
        f"The field {{field}} must be between {low} and {high}.",
        check,
    )


def email_format() -> Validator:
    """Fails when a present text value is not a syntactically valid address."""
    def check(value: Any) -> bool:
        if _is_absent(value):
            return True
        try:
            validate_email(
                value,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
            )
        except EmailNotValidError:
            return False
        return True

    return Validator(
        "email_format", "The {field} field is not a valid e-mail address.", check
    )


def is_even() -> Validator:
    """Fails on odd integers. Non-integer input raises ConversionError."""
    def check(value: Any) -> bool:
        return to_int32(value) % 2 == 0

    return Validator("is_even", "Value is not an even number", check)


# Rule factories by name, used to build field rule sets at startup.
REGISTRY: dict[str, Callable[..., Validator]] = {
    "required": required,
    "max_length": max_length,
    "range": value_range,
    "email_format": email_format,
    "is_even": is_even,
}


def build_rule(name: str, *args: Any) -> Validator:
    """Instantiate a registered rule by name."""
    try:
        factory = REGISTRY[name]
    except KeyError:
        raise ValueError(f"Unknown validation rule: {name}") from None
    return factory(*args)
