"""CloudEvents 0.2 and 1.0 envelopes, builders and the JSON event format.

Transport bindings (HTTP, brokers, batching) are meant to be layered on top.
"""

from cloudevents_core.builders import (
    CloudEventBuilder,
    CloudEventV0_2Builder,
    CloudEventV1_0Builder,
)
from cloudevents_core.exceptions import (
    BuilderConsumedError,
    CloudEventError,
    InvalidFieldValue,
    MalformedEvent,
    MalformedPayload,
    MissingRequiredField,
    UnknownOrMissingVersion,
)
from cloudevents_core.json_format import from_dict, from_json, to_dict, to_json
from cloudevents_core.models import (
    CloudEvent,
    CloudEventV0_2,
    CloudEventV1_0,
    Payload,
    PayloadKind,
    SpecVersion,
)

__all__ = [
    "BuilderConsumedError",
    "CloudEvent",
    "CloudEventBuilder",
    "CloudEventError",
    "CloudEventV0_2",
    "CloudEventV0_2Builder",
    "CloudEventV1_0",
    "CloudEventV1_0Builder",
    "InvalidFieldValue",
    "MalformedEvent",
    "MalformedPayload",
    "MissingRequiredField",
    "Payload",
    "PayloadKind",
    "SpecVersion",
    "UnknownOrMissingVersion",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
