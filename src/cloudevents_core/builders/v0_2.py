"""Builder for CloudEvents specification version 0.2."""

from __future__ import annotations

from typing import Self

from cloudevents_core.builders.base import CloudEventBuilderBase
from cloudevents_core.models.v0_2 import CloudEventV0_2


class CloudEventV0_2Builder(CloudEventBuilderBase):  # noqa: N801
    """Build a v0.2 ``CloudEvent``.

    Only attributes defined by v0.2 have setters here.
    """

    record_class = CloudEventV0_2

    def schemaurl(self, schemaurl: str) -> Self:
        """Set the schema URL."""
        return self._set("schemaurl", schemaurl)

    def contenttype(self, contenttype: str) -> Self:
        """Set the content type."""
        return self._set("contenttype", contenttype)
