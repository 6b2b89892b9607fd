"""Post metadata decoded from a front-matter JSON object.

Wire keys are ``Title``, ``Date`` and ``Tags``. Keys match
case-insensitively, unknown keys are ignored, and absent or ``null``
values fall back to the zero value of the field.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer, model_validator

from rafall.domain.errors import TimestampParseError
from rafall.domain.timestamps import ZERO_TIMESTAMP, decode, encode


def _coerce_timestamp(value: Any) -> datetime:
    if isinstance(value, str):
        return decode(value)
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    msg = f"timestamp must be a string, got {type(value).__name__}"
    raise TimestampParseError(msg)


Timestamp = Annotated[
    datetime,
    BeforeValidator(_coerce_timestamp),
    PlainSerializer(encode, return_type=str),
]

_WIRE_KEYS: dict[str, str] = {
    "title": "Title",
    "date": "Date",
    "tags": "Tags",
}


class Metadata(BaseModel):
    """Title, date and tags describing one post."""

    model_config = {"frozen": True}

    title: str = Field(default="", alias="Title")
    date: Timestamp = Field(default=ZERO_TIMESTAMP, alias="Date")
    tags: list[str] = Field(default_factory=list, alias="Tags")

    @model_validator(mode="before")
    @classmethod
    def fold_wire_keys(cls, data: Any) -> Any:
        """Map any casing of the wire keys onto the aliases, dropping nulls."""
        if not isinstance(data, dict):
            return data
        folded: dict[str, Any] = {}
        for key, value in data.items():
            wire = _WIRE_KEYS.get(str(key).lower())
            if wire is None or value is None:
                continue
            # An exact-case key wins over a case-insensitive match.
            if wire in folded and key != wire:
                continue
            folded[wire] = value
        return folded

    def to_json(self) -> str:
        """Serialize with wire key names and the RFC 822 date text."""
        return self.model_dump_json(by_alias=True)
