"""Tests for the CloudEvent builders."""

from __future__ import annotations

from datetime import datetime

import pytest

from cloudevents_core.builders import (
    CloudEventBuilder,
    CloudEventBuilderBase,
    CloudEventV0_2Builder,
    CloudEventV1_0Builder,
)
from cloudevents_core.exceptions import (
    BuilderConsumedError,
    InvalidFieldValue,
    MissingRequiredField,
)
from cloudevents_core.models import CloudEventV0_2, CloudEventV1_0, Payload, SpecVersion


def _complete_v1_0_builder() -> CloudEventV1_0Builder:
    return (
        CloudEventBuilder.v1_0()
        .event_id("id")
        .source("http://www.google.com")
        .event_type("test type")
    )


def test_default_builder_targets_v1_0() -> None:
    """The unqualified builder produces a v1.0 event."""
    event = (
        CloudEventBuilder.default()
        .event_id("id")
        .source("http://www.google.com")
        .event_type("test type")
        .datacontenttype("application/json")
        .build()
    )

    assert event.version is SpecVersion.V1_0
    assert isinstance(event.record, CloudEventV1_0)
    assert event.event_id == "id"
    assert event.source == "http://www.google.com"
    assert event.event_type == "test type"
    assert event.record.datacontenttype == "application/json"
    assert event.extensions == {}
    assert event.payload.is_empty
    assert event.time is None


def test_v0_2_builder() -> None:
    """The v0.2 builder produces a v0.2 event with its own attributes."""
    event = (
        CloudEventBuilder.v0_2()
        .event_id("id")
        .source("http://www.google.com")
        .event_type("test type")
        .contenttype("application/json")
        .schemaurl("http://example.com/schema")
        .data(Payload.from_string("test"))
        .build()
    )

    assert event.version is SpecVersion.V0_2
    assert isinstance(event.record, CloudEventV0_2)
    assert event.record.contenttype == "application/json"
    assert event.record.schemaurl == "http://example.com/schema"
    assert event.payload == Payload.from_string("test")


def test_v1_0_optional_attributes() -> None:
    """Every v1.0 optional attribute reaches the record."""
    event = (
        _complete_v1_0_builder()
        .subject("sub")
        .dataschema("http://example.com/schema")
        .time("2020-03-01T10:00:00Z")
        .extension("traceparent", "00-abc")
        .data(Payload.from_bytes(b"\x00\x01"))
        .build()
    )

    record = event.record
    assert isinstance(record, CloudEventV1_0)
    assert record.subject == "sub"
    assert record.dataschema == "http://example.com/schema"
    assert record.time == "2020-03-01T10:00:00Z"
    assert record.extensions == {"traceparent": "00-abc"}
    assert record.data == Payload.from_bytes(b"\x00\x01")


def test_generation_specific_setters_are_not_shared() -> None:
    """v1.0-only setters do not exist on the v0.2 builder and vice versa."""
    assert not hasattr(CloudEventV0_2Builder(), "subject")
    assert not hasattr(CloudEventV0_2Builder(), "datacontenttype")
    assert not hasattr(CloudEventV1_0Builder(), "contenttype")
    assert not hasattr(CloudEventV1_0Builder(), "schemaurl")


def test_empty_builder_reports_event_id_first() -> None:
    """With nothing set, the event id is the reported missing field."""
    with pytest.raises(MissingRequiredField) as excinfo:
        CloudEventBuilder.default().build()
    assert excinfo.value.field_name == "event_id"


@pytest.mark.parametrize(
    ("builder", "missing"),
    [
        (CloudEventBuilder.v1_0().source("/src").event_type("t"), "event_id"),
        (CloudEventBuilder.v1_0().event_id("id").event_type("t"), "source"),
        (CloudEventBuilder.v1_0().event_id("id").source("/src"), "event_type"),
        (CloudEventBuilder.v0_2().event_type("t"), "event_id"),
        (CloudEventBuilder.v0_2().event_id("id"), "source"),
    ],
)
def test_validation_order(builder: CloudEventBuilderBase, missing: str) -> None:
    """The first missing field in order id, source, type is reported."""
    with pytest.raises(MissingRequiredField) as excinfo:
        builder.build()
    assert excinfo.value.field_name == missing


@pytest.mark.parametrize("blank", ["", "  "])
def test_blank_source_fails_like_missing_source(blank: str) -> None:
    """An empty source fails exactly as an unset one does."""
    with pytest.raises(MissingRequiredField) as blank_info:
        CloudEventBuilder.default().event_id("id").source(blank).event_type("t").build()
    with pytest.raises(MissingRequiredField) as unset_info:
        CloudEventBuilder.default().event_id("id").event_type("t").build()
    assert blank_info.value.field_name == unset_info.value.field_name == "source"


def test_failed_build_keeps_builder_usable() -> None:
    """A builder can be completed and built after a failed build."""
    builder = CloudEventBuilder.default().event_id("id").source("/src")
    with pytest.raises(MissingRequiredField):
        builder.build()

    event = builder.event_type("t").build()
    assert event.event_type == "t"


def test_successful_build_consumes_builder() -> None:
    """A builder cannot be reused after it produced an event."""
    builder = _complete_v1_0_builder()
    builder.build()

    with pytest.raises(BuilderConsumedError):
        builder.build()
    with pytest.raises(BuilderConsumedError):
        builder.subject("late")


def test_time_now_is_resolved() -> None:
    """The v1.0 builder stamps "now" with the current UTC time."""
    event = _complete_v1_0_builder().time("now").build()
    assert event.time is not None
    parsed = datetime.fromisoformat(event.time)
    assert parsed.utcoffset() is not None
    assert parsed.utcoffset().total_seconds() == 0


def test_v0_2_does_not_resolve_now() -> None:
    """The v0.2 builder only accepts real timestamps."""
    builder = CloudEventBuilder.v0_2().event_id("id").source("/src").event_type("t").time("now")
    with pytest.raises(InvalidFieldValue) as excinfo:
        builder.build()
    assert excinfo.value.field_name == "time"


def test_invalid_dataschema_fails_build() -> None:
    """Malformed URIs are reported as invalid values."""
    with pytest.raises(InvalidFieldValue) as excinfo:
        _complete_v1_0_builder().dataschema("http://[::1").build()
    assert excinfo.value.field_name == "dataschema"


def test_non_string_event_id_is_invalid() -> None:
    """Required attributes must be strings."""
    with pytest.raises(InvalidFieldValue) as excinfo:
        CloudEventBuilder.default().event_id(42).source("/src").event_type("t").build()  # type: ignore[arg-type]
    assert excinfo.value.field_name == "event_id"


def test_extensions_replace_and_extend() -> None:
    """``extensions`` replaces the mapping and ``extension`` adds to it."""
    event = (
        _complete_v1_0_builder()
        .extension("dropped", "x")
        .extensions({"comexampleextension1": "value"})
        .extension("comexampleothervalue", 5)
        .build()
    )
    assert event.extensions == {"comexampleextension1": "value", "comexampleothervalue": 5}


def test_builder_extensions_are_copied() -> None:
    """Mutating the mapping passed to the builder does not affect the event."""
    extensions = {"traceparent": "00-abc"}
    event = _complete_v1_0_builder().extensions(extensions).build()
    extensions["traceparent"] = "changed"
    assert event.extensions == {"traceparent": "00-abc"}


def test_reserved_extension_name_fails_build() -> None:
    """Extension names cannot collide with attribute names."""
    with pytest.raises(InvalidFieldValue) as excinfo:
        _complete_v1_0_builder().extension("datacontenttype", "text/plain").build()
    assert excinfo.value.field_name == "extensions"
