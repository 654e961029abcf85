"""CloudEvent data models for every supported specification version."""

from cloudevents_core.models.base import CloudEventRecord, SpecVersion
from cloudevents_core.models.event import CloudEvent
from cloudevents_core.models.payload import Payload, PayloadKind
from cloudevents_core.models.v0_2 import CloudEventV0_2
from cloudevents_core.models.v1_0 import CloudEventV1_0

__all__ = [
    "CloudEvent",
    "CloudEventRecord",
    "CloudEventV0_2",
    "CloudEventV1_0",
    "Payload",
    "PayloadKind",
    "SpecVersion",
]
