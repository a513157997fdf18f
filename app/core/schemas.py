# app/core/schemas.py
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from app.core.time import as_utc


def not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def empty_as_none(value):
    return None if value == "" else value


def bounded_text(max_length: int):
    """Required, non-blank string of at most ``max_length`` characters."""
    return Annotated[
        str,
        StringConstraints(min_length=1, max_length=max_length),
        AfterValidator(not_blank),
    ]


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


def optional(annotation):
    """Nullable field where an empty string also means "not provided"."""
    return Annotated[annotation | None, BeforeValidator(empty_as_none)]


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
