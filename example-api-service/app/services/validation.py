"""Example request binding and validation.

The POST handler calls these two steps explicitly:

    record = deserialize(body)
    errors = validate_all(record)

``deserialize`` only checks the shape of the body. ``validate_all`` then
applies every rule in ``FIELD_RULES`` to every field and returns all
failures, not just the first.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from app.models.example import DISPLAY_NAMES, ExampleRequest, FieldError
from app.utils.errors import MalformedInputError
from app.utils.validators import ConversionError, Validator, build_rule

logger = logging.getLogger(__name__)

# Field name -> ordered rules. Built once at import.
FIELD_RULES: dict[str, list[Validator]] = {
    "name": [build_rule("required")],
    "description": [build_rule("max_length", 1000)],
    "some_value": [build_rule("range", 1, 100)],
    "email": [build_rule("email_format")],
    "even_number": [build_rule("is_even")],
}

# Lower-cased JSON key -> model field, for case-insensitive binding.
_KEY_LOOKUP: dict[str, str] = {}
for _name, _info in ExampleRequest.model_fields.items():
    _KEY_LOOKUP[_name.lower()] = _name
    _KEY_LOOKUP[(_info.alias or _name).lower()] = _name


def _normalise_keys(payload: dict) -> dict:
    normalised = {}
    for key, value in payload.items():
        field_name = _KEY_LOOKUP.get(str(key).lower())
        if field_name is not None:
            normalised[field_name] = value
    return normalised


def deserialize(body: bytes | str) -> ExampleRequest:
    """Parse a raw JSON body into an ExampleRequest.

    Raises MalformedInputError if the body is not a JSON object or a field
    has the wrong primitive type.
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise MalformedInputError(f"invalid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedInputError(
            f"expected a JSON object, got {type(payload).__name__}"
        )

    try:
        return ExampleRequest.model_validate(_normalise_keys(payload))
    except ValidationError as exc:
        raise MalformedInputError(
            f"{exc.error_count()} field(s) have the wrong type"
        ) from exc


def validate_field(
    field_name: str, value: object, rules: list[Validator]
) -> list[FieldError]:
    """Apply ``rules`` to one value, collecting every failure."""
    display = DISPLAY_NAMES.get(field_name, field_name)
    errors = []
    for rule in rules:
        try:
            passed = rule.validate(value)
        except ConversionError as exc:
            logger.debug("Conversion failed for %s (%s): %s", display, rule.name, exc)
            errors.append(FieldError(field=display, message=str(exc)))
            continue
        if not passed:
            errors.append(
                FieldError(field=display, message=rule.format_message(display))
            )
    return errors


def validate_all(
    record: ExampleRequest,
    field_rules: dict[str, list[Validator]] | None = None,
) -> list[FieldError]:
    """Run every rule against every field of ``record``."""
    rules_by_field = FIELD_RULES if field_rules is None else field_rules
    errors: list[FieldError] = []
    for field_name, rules in rules_by_field.items():
        errors.extend(validate_field(field_name, getattr(record, field_name), rules))
    return errors
