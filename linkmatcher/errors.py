"""Error taxonomy for link extraction."""

from enum import Enum


class FailureKind(str, Enum):
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    CONNECTION_FAILURE = "connection_failure"
    PROTOCOL_FAILURE = "protocol_failure"


class LinkMatcherError(Exception):
    """Base class for failures that end an extraction operation."""

    kind: FailureKind


class ResourceUnavailable(LinkMatcherError):
    """Raised when a local document cannot be opened or read."""

    kind = FailureKind.RESOURCE_UNAVAILABLE


class ConnectionFailure(LinkMatcherError):
    """Raised when the remote host is unusable, unreachable or the exchange breaks."""

    kind = FailureKind.CONNECTION_FAILURE


class ProtocolFailure(LinkMatcherError):
    """Raised when the response cannot be split into headers and an HTML body."""

    kind = FailureKind.PROTOCOL_FAILURE
