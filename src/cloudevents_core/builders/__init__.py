"""Builders that validate attributes into a ``CloudEvent``."""

from __future__ import annotations

from cloudevents_core.builders.base import CloudEventBuilderBase
from cloudevents_core.builders.v0_2 import CloudEventV0_2Builder
from cloudevents_core.builders.v1_0 import CloudEventV1_0Builder

DefaultCloudEventBuilder = CloudEventV1_0Builder


class CloudEventBuilder:
    """Entry point for creating a builder in the desired specification version.

    Example::

        event = (
            CloudEventBuilder.default()
            .event_id("id")
            .source("http://www.google.com")
            .event_type("test type")
            .datacontenttype("application/json")
            .build()
        )
    """

    @staticmethod
    def default() -> DefaultCloudEventBuilder:
        """Create a builder for the current specification version."""
        return DefaultCloudEventBuilder()

    @staticmethod
    def v0_2() -> CloudEventV0_2Builder:
        return CloudEventV0_2Builder()

    @staticmethod
    def v1_0() -> CloudEventV1_0Builder:
        return CloudEventV1_0Builder()


__all__ = [
    "CloudEventBuilder",
    "CloudEventBuilderBase",
    "CloudEventV0_2Builder",
    "CloudEventV1_0Builder",
    "DefaultCloudEventBuilder",
]
