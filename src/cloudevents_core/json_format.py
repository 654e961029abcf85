"""JSON event format — encode a ``CloudEvent`` to a JSON object and back.

Decoding reads ``specversion`` first and commits to that version's field
table before looking at anything else. Members the table does not know are
extension attributes; they are kept in ``extensions`` and written back at the
top level on encode.

Payload mapping:

* text → JSON string under ``data``
* structured → nested JSON value under ``data``
* binary → base64 string under ``data_base64``
* empty → no data member
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cloudevents_core.config import FormatConfig
from cloudevents_core.exceptions import (
    MalformedEvent,
    MalformedPayload,
    MissingRequiredField,
    UnknownOrMissingVersion,
)
from cloudevents_core.models.base import (
    DATA_BASE64_KEY,
    DATA_KEY,
    CloudEventRecord,
    SpecVersion,
    invalid_field_from,
)
from cloudevents_core.models.event import CloudEvent
from cloudevents_core.models.payload import Payload, PayloadKind, thaw_json
from cloudevents_core.models.v0_2 import CloudEventV0_2
from cloudevents_core.models.v1_0 import CloudEventV1_0

logger = logging.getLogger(__name__)

SPECVERSION_KEY = "specversion"

_RECORD_CLASSES: dict[str, type[CloudEventRecord]] = {
    SpecVersion.V0_2.value: CloudEventV0_2,
    SpecVersion.V1_0.value: CloudEventV1_0,
}

# (error field name, JSON member) in the order they are checked
_REQUIRED_MEMBERS = (("event_id", "id"), ("source", "source"), ("event_type", "type"))


def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in {"application/json", "text/json"} or media_type.endswith("+json")


def _encode_payload(payload: Payload) -> dict[str, Any]:
    if payload.kind is PayloadKind.EMPTY:
        return {}
    if payload.kind is PayloadKind.BINARY:
        return {DATA_BASE64_KEY: base64.b64encode(payload.value).decode("ascii")}
    return {DATA_KEY: thaw_json(payload.value)}


def _decode_payload(document: Mapping[str, Any]) -> Payload:
    data = document.get(DATA_KEY)
    data_base64 = document.get(DATA_BASE64_KEY)
    if data is not None and data_base64 is not None:
        raise MalformedPayload(f"'{DATA_KEY}' and '{DATA_BASE64_KEY}' are mutually exclusive")
    if data_base64 is not None:
        if not isinstance(data_base64, str):
            raise MalformedPayload(f"'{DATA_BASE64_KEY}' must be a string")
        try:
            return Payload.from_bytes(base64.b64decode(data_base64, validate=True))
        except binascii.Error as exc:
            raise MalformedPayload(f"'{DATA_BASE64_KEY}' is not valid base64") from exc
    if data is None:
        return Payload.empty()
    if isinstance(data, str):
        return Payload.from_string(data)
    return Payload.from_json(data)


def to_dict(event: CloudEvent) -> dict[str, Any]:
    """Encode an event as a JSON-ready dict, omitting absent attributes."""
    record = event.record
    attributes = record.model_dump(by_alias=True, exclude_none=True, exclude={"data", "extensions"})
    document: dict[str, Any] = {SPECVERSION_KEY: record.specversion}
    for key in record.attribute_keys():
        if key != SPECVERSION_KEY and key in attributes:
            document[key] = attributes[key]
    document.update(_encode_payload(record.data))
    reserved = record.wire_keys()
    for key, value in record.extensions.items():
        # extensions never shadow the version's own members
        if key not in reserved:
            document[key] = thaw_json(value)
    return document


def to_json(event: CloudEvent, *, compact: bool | None = None) -> str:
    """Encode an event as JSON text."""
    if compact is None:
        compact = FormatConfig().compact
    separators = (",", ":") if compact else None
    return json.dumps(to_dict(event), separators=separators)


def from_dict(document: Mapping[str, Any], *, strict: bool | None = None) -> CloudEvent:
    """Decode a JSON object into a ``CloudEvent`` of the version it declares.

    Args:
        document: The parsed JSON object.
        strict: Reject structured ``data`` whose content type is not JSON.
            Defaults to ``FormatConfig.strict_data``.

    Raises:
        MalformedEvent: ``document`` is not an object.
        UnknownOrMissingVersion: ``specversion`` is absent or unsupported.
        MissingRequiredField: ``id``, ``source`` or ``type`` is absent or blank.
        MalformedPayload: the data members are inconsistent.
        InvalidFieldValue: an attribute has the wrong type or format.
    """
    if not isinstance(document, Mapping):
        raise MalformedEvent(f"expected a JSON object, got {type(document).__name__}")

    version = document.get(SPECVERSION_KEY)
    record_class = _RECORD_CLASSES.get(version) if isinstance(version, str) else None
    if record_class is None:
        logger.debug("Rejected CloudEvent with specversion=%r", version)
        raise UnknownOrMissingVersion(version)

    for field_name, key in _REQUIRED_MEMBERS:
        value = document.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingRequiredField(field_name)

    known = record_class.wire_keys()
    attributes = {key: document[key] for key in record_class.attribute_keys() if key in document}
    extensions = {key: value for key, value in document.items() if key not in known}
    payload = _decode_payload(document)

    if strict is None:
        strict = FormatConfig().strict_data
    content_type = attributes.get(record_class.content_type_field)
    if (
        strict
        and payload.kind is PayloadKind.STRUCTURED
        and isinstance(content_type, str)
        and not _is_json_media_type(content_type)
    ):
        raise MalformedPayload(
            f"structured data is not allowed with content type '{content_type}'"
        )

    try:
        record = record_class.model_validate(
            {**attributes, "data": payload, "extensions": extensions}
        )
    except ValidationError as exc:
        raise invalid_field_from(exc, record_class) from exc

    logger.debug("Decoded CloudEvent specversion=%s id=%s", record.specversion, record.event_id)
    return CloudEvent(record)


def from_json(text: str | bytes, *, strict: bool | None = None) -> CloudEvent:
    """Decode JSON text into a ``CloudEvent``.

    ``bytes`` input must be UTF-8, UTF-16 or UTF-32; undecodable bytes raise
    ``MalformedEvent`` like any other unparseable text.
    """
    try:
        document = json.loads(text)
    except ValueError as exc:  # JSONDecodeError and UnicodeDecodeError
        raise MalformedEvent(f"invalid JSON ({exc})") from exc
    return from_dict(document, strict=strict)
