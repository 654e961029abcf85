"""Shared behaviour for the version-specific CloudEvent records."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar, Self
from urllib.parse import urlsplit

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from cloudevents_core.exceptions import InvalidFieldValue, MissingRequiredField
from cloudevents_core.models.payload import Payload, thaw_json, to_json_value

DATA_KEY = "data"
DATA_BASE64_KEY = "data_base64"

_RFC3339 = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})[Tt ]"
    r"(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


class SpecVersion(StrEnum):
    """CloudEvents specification versions understood by this package."""

    V0_2 = "0.2"
    V1_0 = "1.0"


def check_uri_reference(field_name: str, value: str) -> str:
    """Accept absolute URIs, relative references, URNs and ``mailto:`` addresses."""
    try:
        parts = urlsplit(value)
        _ = parts.port
    except ValueError as exc:
        raise InvalidFieldValue(field_name, f"not a valid URI reference ({exc})") from exc
    return value


def check_timestamp(field_name: str, value: str) -> str:
    """Require an RFC 3339 ``date-time`` such as ``2018-04-05T17:31:00Z``."""
    match = _RFC3339.fullmatch(value)
    if match is None:
        raise InvalidFieldValue(field_name, "not an RFC 3339 timestamp")
    # fromisoformat only range-checks the fields; the shape is fixed by the pattern
    fraction = f".{match['fraction'][:6].ljust(6, '0')}" if match["fraction"] else ""
    offset = "+00:00" if match["offset"] in {"Z", "z"} else match["offset"]
    try:
        datetime.fromisoformat(f"{match['date']}T{match['time']}{fraction}{offset}")
    except ValueError as exc:
        raise InvalidFieldValue(field_name, f"not an RFC 3339 timestamp ({exc})") from exc
    return value


class CloudEventRecord(BaseModel):
    """Attributes common to every specification version.

    Subclasses pin ``specversion`` and add their own optional attributes. The
    JSON member name of every attribute is its alias (or its field name), which
    makes ``wire_keys()`` the version's field table.

    Records are immutable all the way down: ``extensions`` is a read-only
    mapping and its values are frozen like structured payloads. Records are
    deliberately unhashable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    __hash__ = None  # type: ignore[assignment]

    content_type_field: ClassVar[str]

    event_id: str = Field(alias="id")
    source: str
    event_type: str = Field(alias="type")
    time: str | None = None
    data: Payload = Field(default_factory=Payload.empty)
    extensions: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("event_id", "source", "event_type")
    @classmethod
    def require_non_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise MissingRequiredField(info.field_name)
        return value

    @field_validator("source")
    @classmethod
    def check_source(cls, value: str) -> str:
        return check_uri_reference("source", value)

    @field_validator("time")
    @classmethod
    def check_time(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return check_timestamp("time", value)

    @field_validator("extensions")
    @classmethod
    def check_extensions(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        reserved = cls.wire_keys()
        checked: dict[str, Any] = {}
        for name, item in value.items():
            if not name:
                raise InvalidFieldValue("extensions", "extension names cannot be empty")
            if name in reserved:
                raise InvalidFieldValue(
                    "extensions", f"'{name}' is a reserved attribute name for this version"
                )
            try:
                checked[name] = to_json_value(item)
            except (TypeError, ValueError) as exc:
                raise InvalidFieldValue(
                    "extensions", f"value of '{name}' is not representable as JSON"
                ) from exc
        return MappingProxyType(checked)

    @field_serializer("extensions")
    def serialize_extensions(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return thaw_json(value)

    @classmethod
    def attribute_keys(cls) -> tuple[str, ...]:
        """JSON member names of the context attributes, in field order."""
        return tuple(
            info.alias or name
            for name, info in cls.model_fields.items()
            if name not in {"data", "extensions"}
        )

    @classmethod
    def wire_keys(cls) -> frozenset[str]:
        """Every JSON member name this version assigns a meaning to."""
        return frozenset((*cls.attribute_keys(), DATA_KEY, DATA_BASE64_KEY))

    @property
    def content_type(self) -> str | None:
        """The version's content-type attribute, whatever its name."""
        return getattr(self, self.content_type_field)

    def _replace(self, **changes: Any) -> Self:
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self).model_validate(values)

    def with_event_id(self, event_id: str) -> Self:
        return self._replace(event_id=event_id)

    def with_source(self, source: str) -> Self:
        return self._replace(source=source)

    def with_event_type(self, event_type: str) -> Self:
        return self._replace(event_type=event_type)

    def with_time(self, time: str | None) -> Self:
        return self._replace(time=time)

    def with_data(self, data: Payload) -> Self:
        return self._replace(data=data)

    def with_extensions(self, extensions: Mapping[str, Any]) -> Self:
        return self._replace(extensions=extensions)


def invalid_field_from(
    exc: ValidationError, record_class: type[CloudEventRecord]
) -> InvalidFieldValue:
    """Collapse a pydantic ``ValidationError`` into the first offending attribute.

    JSON member names are reported as field names (``id`` as ``event_id``).
    """
    field_names = {
        info.alias: name for name, info in record_class.model_fields.items() if info.alias
    }
    first = exc.errors()[0]
    location = str((first.get("loc") or ("event",))[0])
    return InvalidFieldValue(field_names.get(location, location), first.get("msg", "invalid value"))
