"""Builder for CloudEvents specification version 1.0."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Self

from cloudevents_core.builders.base import CloudEventBuilderBase
from cloudevents_core.models.v1_0 import CloudEventV1_0

_NOW = "now"


class CloudEventV1_0Builder(CloudEventBuilderBase):  # noqa: N801
    """Build a v1.0 ``CloudEvent``.

    ``time("now")`` stamps the event with the current UTC time when it is built.
    """

    record_class = CloudEventV1_0

    def subject(self, subject: str) -> Self:
        """Set the subject."""
        return self._set("subject", subject)

    def dataschema(self, dataschema: str) -> Self:
        """Set the data schema URI."""
        return self._set("dataschema", dataschema)

    def datacontenttype(self, datacontenttype: str) -> Self:
        """Set the data content type."""
        return self._set("datacontenttype", datacontenttype)

    def _resolve_optional(self) -> dict[str, Any]:
        values = super()._resolve_optional()
        if values.get("time") == _NOW:
            values["time"] = datetime.now(UTC).isoformat()
        return values
