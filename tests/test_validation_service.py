"""Binding and validation service tests.

Tests cover:
    - deserialize: JSON parsing, case-insensitive keys, malformed bodies
    - validate_all: aggregation across fields, conversion failures
"""

import json

import pytest

from app.models.example import ExampleRequest
from app.services.validation import (
    FIELD_RULES,
    deserialize,
    validate_all,
    validate_field,
)
from app.utils.errors import MalformedInputError
from app.utils.validators import is_even, required


def _fields(errors):
    return [e.field for e in errors]


# -- deserialize --------------------------------------------------------------

def test_deserialize_camel_case_keys():
    record = deserialize(json.dumps({
        "name": "A", "description": "d", "someValue": 5,
        "email": "a@contoso.org", "evenNumber": 4,
    }))
    assert record == ExampleRequest(
        name="A", description="d", some_value=5,
        email="a@contoso.org", even_number=4,
    )


def test_deserialize_keys_are_case_insensitive():
    record = deserialize(b'{"Name": "A", "SomeValue": 2, "EVENNUMBER": 4}')
    assert record.name == "A"
    assert record.some_value == 2
    assert record.even_number == 4


def test_deserialize_defaults_for_missing_fields():
    record = deserialize(b"{}")
    assert record.name is None
    assert record.some_value == 0
    assert record.even_number == 0


def test_deserialize_ignores_unknown_keys():
    record = deserialize(b'{"name": "A", "colour": "blue"}')
    assert record.name == "A"


def test_deserialize_keeps_raw_even_number():
    assert deserialize(b'{"evenNumber": "abc"}').even_number == "abc"


@pytest.mark.parametrize(
    "body",
    [b"", b"{", b"not json", b"[1, 2]", b'"text"', b"42", b"\xff"],
)
def test_deserialize_rejects_malformed_body(body):
    with pytest.raises(MalformedInputError):
        deserialize(body)


@pytest.mark.parametrize(
    "payload",
    [
        {"someValue": "lots"},
        {"someValue": 2.5},
        {"someValue": "5"},
        {"someValue": True},
        {"name": 7},
        {"email": ["a"]},
    ],
)
def test_deserialize_rejects_wrong_primitive_types(payload):
    with pytest.raises(MalformedInputError):
        deserialize(json.dumps(payload))


# -- validate_all -------------------------------------------------------------

def test_valid_record_has_no_errors():
    record = ExampleRequest(name="A", some_value=2, even_number=4)
    assert validate_all(record) == []


def test_all_failures_are_aggregated():
    record = ExampleRequest(
        name="", description="x" * 1001, some_value=0,
        email="nope", even_number=3,
    )
    assert _fields(validate_all(record)) == [
        "Name", "Description", "SomeValue", "Email", "EvenNumber",
    ]


def test_messages_use_display_names():
    errors = validate_all(ExampleRequest(some_value=2))
    assert [e.message for e in errors] == ["The Name field is required."]


@pytest.mark.parametrize("value", [-1, 0, 101, 500])
def test_some_value_out_of_range(value):
    errors = validate_all(ExampleRequest(name="A", some_value=value))
    assert _fields(errors) == ["SomeValue"]


@pytest.mark.parametrize("value", [1, 37, 100])
def test_some_value_in_range(value):
    assert validate_all(ExampleRequest(name="A", some_value=value)) == []


def test_long_description_rejected():
    record = ExampleRequest(name="A", some_value=2, description="y" * 1500)
    assert _fields(validate_all(record)) == ["Description"]


@pytest.mark.parametrize("value", ["abc", "4.5", [4], {"n": 4}])
def test_non_numeric_even_number_reported_on_field(value):
    errors = validate_all(ExampleRequest(name="A", some_value=2, even_number=value))
    assert _fields(errors) == ["EvenNumber"]
    assert "not a valid" in errors[0].message


def test_validate_field_continues_after_conversion_error():
    errors = validate_field("even_number", "abc", [is_even(), required()])
    assert len(errors) == 1


def test_custom_rule_set():
    rules = {"description": [required()]}
    errors = validate_all(ExampleRequest(name="A"), rules)
    assert _fields(errors) == ["Description"]


def test_field_rules_cover_every_model_field():
    assert set(FIELD_RULES) == set(ExampleRequest.model_fields)


@pytest.mark.parametrize("field", ["someValue", "evenNumber"])
def test_deserialize_rejects_oversized_integer_literal(field):
    body = '{"name": "A", "%s": %s}' % (field, "9" * 5000)
    with pytest.raises(MalformedInputError):
        deserialize(body)


def test_oversized_numeric_text_is_even_number_error():
    record = ExampleRequest(name="A", some_value=2, even_number="9" * 5000)
    errors = validate_all(record)
    assert _fields(errors) == ["EvenNumber"]
