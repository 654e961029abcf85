"""CloudEvent record for specification version 1.0."""

from __future__ import annotations

from typing import ClassVar, Literal, Self

from pydantic import field_validator

from cloudevents_core.models.base import CloudEventRecord, check_uri_reference


class CloudEventV1_0(CloudEventRecord):  # noqa: N801
    """A CloudEvent as defined by the v1.0 specification and JSON event format."""

    __hash__ = None  # type: ignore[assignment]

    content_type_field: ClassVar[str] = "datacontenttype"

    specversion: Literal["1.0"] = "1.0"
    subject: str | None = None
    dataschema: str | None = None
    datacontenttype: str | None = None

    @field_validator("dataschema")
    @classmethod
    def check_dataschema_reference(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return check_uri_reference("dataschema", value)

    def with_subject(self, subject: str | None) -> Self:
        return self._replace(subject=subject)

    def with_dataschema(self, dataschema: str | None) -> Self:
        return self._replace(dataschema=dataschema)

    def with_datacontenttype(self, datacontenttype: str | None) -> Self:
        return self._replace(datacontenttype=datacontenttype)
