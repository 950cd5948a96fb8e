"""Example resource models."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExampleRequest(BaseModel):
    """Input record for the example resource.

    Serialised with camelCase keys. ``name`` is optional at the type level
    so a missing name is reported by the ``required`` rule, and
    ``even_number`` is left untyped so non-numeric input reaches ``is_even``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="ignore",
    )

    name: str | None = None
    description: str | None = None
    some_value: int = 0
    email: str | None = None
    even_number: Any = 0


# Display names used in validation messages and error bodies.
DISPLAY_NAMES: dict[str, str] = {
    "name": "Name",
    "description": "Description",
    "some_value": "SomeValue",
    "email": "Email",
    "even_number": "EvenNumber",
}


class FieldError(BaseModel):
    """A single (field, message) validation failure."""

    field: str
    message: str
