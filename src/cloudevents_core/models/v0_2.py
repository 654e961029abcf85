"""CloudEvent record for specification version 0.2."""

from __future__ import annotations

from typing import ClassVar, Literal, Self

from pydantic import field_validator

from cloudevents_core.models.base import CloudEventRecord, check_uri_reference


class CloudEventV0_2(CloudEventRecord):  # noqa: N801
    """A CloudEvent as defined by the v0.2 specification and JSON event format."""

    __hash__ = None  # type: ignore[assignment]

    content_type_field: ClassVar[str] = "contenttype"

    specversion: Literal["0.2"] = "0.2"
    schemaurl: str | None = None
    contenttype: str | None = None

    @field_validator("schemaurl")
    @classmethod
    def check_schemaurl_reference(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return check_uri_reference("schemaurl", value)

    def with_schemaurl(self, schemaurl: str | None) -> Self:
        return self._replace(schemaurl=schemaurl)

    def with_contenttype(self, contenttype: str | None) -> Self:
        return self._replace(contenttype=contenttype)
