"""Shared accumulator and validation for the per-version builders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import ValidationError

from cloudevents_core.exceptions import (
    BuilderConsumedError,
    InvalidFieldValue,
    MissingRequiredField,
)
from cloudevents_core.models.base import CloudEventRecord, invalid_field_from
from cloudevents_core.models.event import CloudEvent
from cloudevents_core.models.payload import Payload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("event_id", "source", "event_type")


def require_field(field_name: str, value: object) -> str:
    """Return ``value`` if it is a non-blank string, else raise."""
    if value is None:
        raise MissingRequiredField(field_name)
    if not isinstance(value, str):
        raise InvalidFieldValue(field_name, "must be a string")
    if not value.strip():
        raise MissingRequiredField(field_name)
    return value


class CloudEventBuilderBase:
    """Accumulate attributes and validate them into a ``CloudEvent``.

    Setters return the builder so calls can be chained. A failed ``build()``
    leaves the builder untouched so the caller can add what is missing and try
    again; a successful one hands the values over to the event and the builder
    refuses further use.
    """

    record_class: ClassVar[type[CloudEventRecord]]

    def __init__(self) -> None:
        self._required: dict[str, str | None] = dict.fromkeys(REQUIRED_FIELDS)
        self._optional: dict[str, Any] = {}
        self._data: Payload | None = None
        self._extensions: dict[str, Any] = {}
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderConsumedError

    def _set(self, name: str, value: Any) -> Self:
        self._ensure_open()
        self._optional[name] = value
        return self

    def event_id(self, event_id: str) -> Self:
        """Set the event id."""
        self._ensure_open()
        self._required["event_id"] = event_id
        return self

    def source(self, source: str) -> Self:
        """Set the source."""
        self._ensure_open()
        self._required["source"] = source
        return self

    def event_type(self, event_type: str) -> Self:
        """Set the event type."""
        self._ensure_open()
        self._required["event_type"] = event_type
        return self

    def time(self, time: str) -> Self:
        """Set the event time as an RFC 3339 timestamp."""
        return self._set("time", time)

    def data(self, data: Payload) -> Self:
        """Set the payload."""
        self._ensure_open()
        self._data = data
        return self

    def extensions(self, extensions: Mapping[str, Any]) -> Self:
        """Replace all extension attributes."""
        self._ensure_open()
        self._extensions = dict(extensions)
        return self

    def extension(self, name: str, value: Any) -> Self:
        """Set a single extension attribute."""
        self._ensure_open()
        self._extensions[name] = value
        return self

    def _resolve_optional(self) -> dict[str, Any]:
        return dict(self._optional)

    def build(self) -> CloudEvent:
        """Validate the accumulated attributes and produce a ``CloudEvent``.

        Required attributes are checked in a fixed order (event id, source,
        event type) and the first one missing is reported.
        """
        self._ensure_open()
        try:
            values: dict[str, Any] = {
                name: require_field(name, self._required[name]) for name in REQUIRED_FIELDS
            }
            values.update(self._resolve_optional())
            if self._data is not None:
                values["data"] = self._data
            values["extensions"] = self._extensions
            try:
                record = self.record_class.model_validate(values)
            except ValidationError as exc:
                raise invalid_field_from(exc, self.record_class) from exc
        except (MissingRequiredField, InvalidFieldValue) as exc:
            logger.debug("CloudEvent build failed for %s: %s", self.record_class.__name__, exc)
            raise

        self._built = True
        logger.debug(
            "Built CloudEvent specversion=%s id=%s", record.specversion, record.event_id
        )
        return CloudEvent(record)
