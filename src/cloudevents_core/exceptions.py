"""Error types raised while building, validating and decoding CloudEvents."""

from __future__ import annotations


class CloudEventError(Exception):
    """Base class for every error raised by this package."""


class MissingRequiredField(CloudEventError):  # noqa: N818
    """A required attribute is absent, empty or whitespace-only."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing or empty")


class UnknownOrMissingVersion(CloudEventError):  # noqa: N818
    """The ``specversion`` attribute is absent or names an unsupported version."""

    def __init__(self, value: object | None) -> None:
        self.value = value
        if value is None:
            message = "Document has no specversion attribute"
        else:
            message = f"Unsupported specversion {value!r}"
        super().__init__(message)


class InvalidFieldValue(CloudEventError):  # noqa: N818
    """An attribute is present but its value is not acceptable."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid value for '{field_name}': {reason}")


class MalformedPayload(CloudEventError):  # noqa: N818
    """The event data does not match the shape its representation requires."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed payload: {reason}")


class MalformedEvent(CloudEventError):  # noqa: N818
    """The document is not a JSON object and cannot hold a CloudEvent."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed event: {reason}")


class BuilderConsumedError(CloudEventError):
    """A builder was used again after it produced an event."""

    def __init__(self) -> None:
        super().__init__("Builder has already produced an event and cannot be reused")
