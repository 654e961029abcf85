"""The version-agnostic CloudEvent type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import ConfigDict, Field, RootModel

from cloudevents_core.models.base import SpecVersion
from cloudevents_core.models.payload import Payload
from cloudevents_core.models.v0_2 import CloudEventV0_2
from cloudevents_core.models.v1_0 import CloudEventV1_0

AnyCloudEventRecord = Annotated[
    CloudEventV0_2 | CloudEventV1_0,
    Field(discriminator="specversion"),
]


class CloudEvent(RootModel[AnyCloudEventRecord]):
    """A CloudEvent of any supported specification version.

    This is the type external code works with. The wrapped record is tagged by
    its ``specversion``, so the version reported here always matches the one
    written on the wire. Common attributes are readable without caring which
    version is held; version-specific ones are reached through ``record``.
    """

    model_config = ConfigDict(frozen=True)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_v0_2(cls, record: CloudEventV0_2) -> CloudEvent:
        return cls(record)

    @classmethod
    def from_v1_0(cls, record: CloudEventV1_0) -> CloudEvent:
        return cls(record)

    @property
    def record(self) -> CloudEventV0_2 | CloudEventV1_0:
        return self.root

    @property
    def specversion(self) -> str:
        return self.root.specversion

    def discriminator(self) -> str:
        """Return the wire-format ``specversion`` string."""
        return self.root.specversion

    @property
    def version(self) -> SpecVersion:
        return SpecVersion(self.root.specversion)

    @property
    def event_id(self) -> str:
        return self.root.event_id

    @property
    def source(self) -> str:
        return self.root.source

    @property
    def event_type(self) -> str:
        return self.root.event_type

    @property
    def time(self) -> str | None:
        return self.root.time

    @property
    def content_type(self) -> str | None:
        return self.root.content_type

    @property
    def payload(self) -> Payload:
        return self.root.data

    @property
    def extensions(self) -> Mapping[str, Any]:
        return self.root.extensions
