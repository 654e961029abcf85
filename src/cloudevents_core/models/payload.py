"""Event payload — a closed set of data representations carried by an event."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from cloudevents_core.exceptions import MalformedPayload


class PayloadKind(StrEnum):
    EMPTY = "empty"
    TEXT = "text"
    STRUCTURED = "structured"
    BINARY = "binary"


def freeze_json(value: Any) -> Any:
    """Return a read-only view of a JSON value: objects as mapping proxies, arrays as tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_json(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze_json(item) for item in value)
    return value


def thaw_json(value: Any) -> Any:
    """Return a plain, mutable copy of a frozen JSON value."""
    if isinstance(value, Mapping):
        return {key: thaw_json(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw_json(item) for item in value]
    return value


def to_json_value(value: Any) -> Any:
    """Return a detached, frozen copy of ``value`` restricted to the JSON data model.

    Raises ``TypeError`` or ``ValueError`` when ``value`` is not representable.
    """
    return freeze_json(json.loads(json.dumps(thaw_json(value), allow_nan=False)))


class Payload(BaseModel):
    """The ``data`` of a CloudEvent.

    Exactly one representation is active. Equality is representation
    sensitive: ``Payload.from_string("5") != Payload.from_json(5)``.
    Structured values are read-only (objects are ``MappingProxyType``, arrays
    are tuples). Binary payloads travel as base64 in the JSON format.
    """

    model_config = ConfigDict(frozen=True)

    __hash__ = None  # type: ignore[assignment]

    kind: PayloadKind = PayloadKind.EMPTY
    value: Any = None

    @field_validator("value")
    @classmethod
    def freeze_structured_value(cls, value: Any, info: ValidationInfo) -> Any:
        if info.data.get("kind") is not PayloadKind.STRUCTURED or value is None:
            return value
        try:
            return to_json_value(value)
        except (TypeError, ValueError) as exc:
            raise MalformedPayload(f"value is not representable as JSON ({exc})") from exc

    @model_validator(mode="after")
    def check_value_matches_kind(self) -> Payload:
        if self.kind is PayloadKind.EMPTY and self.value is not None:
            raise MalformedPayload("an empty payload cannot carry a value")
        if self.kind is PayloadKind.TEXT and not isinstance(self.value, str):
            raise MalformedPayload("a text payload must hold a str")
        if self.kind is PayloadKind.BINARY and not isinstance(self.value, bytes):
            raise MalformedPayload("a binary payload must hold bytes")
        if self.kind is PayloadKind.STRUCTURED and self.value is None:
            raise MalformedPayload("a structured payload cannot be null, use Payload.empty()")
        return self

    @field_serializer("value")
    def serialize_value(self, value: Any) -> Any:
        return thaw_json(value) if self.kind is PayloadKind.STRUCTURED else value

    @classmethod
    def empty(cls) -> Payload:
        """Create a payload with no data."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> Payload:
        """Create a text payload, serialized as a JSON string."""
        return cls(kind=PayloadKind.TEXT, value=text)

    @classmethod
    def from_json(cls, value: Any) -> Payload:
        """Create a structured payload from a JSON value (dict, list, str, number, bool)."""
        return cls(kind=PayloadKind.STRUCTURED, value=value)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Payload:
        """Create a binary payload."""
        return cls(kind=PayloadKind.BINARY, value=bytes(data))

    @classmethod
    def from_serializable(cls, obj: Any) -> Payload:
        """Create a structured payload from a pydantic model or any JSON-serializable object."""
        if isinstance(obj, BaseModel):
            return cls.from_json(obj.model_dump(mode="json"))
        return cls.from_json(obj)

    @property
    def is_empty(self) -> bool:
        return self.kind is PayloadKind.EMPTY
