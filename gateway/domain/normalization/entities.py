"""
Domain entities for the normalization bounded context.

Value objects describing one finished HTTP exchange and the
standard envelope that may replace its body.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DELETED_MESSAGE = "Deleted successfully."
CLIENT_ERROR_MESSAGE = "An unexpected failure occurred while attempting this operation."
SERVER_ERROR_MESSAGE = "An unexpected failure occurred. Please try again later."
UNCLASSIFIED_ERROR_MESSAGE = (
    "An unexpected failure occurred; if it persists, contact support."
)


class HttpMethod(Enum):
    """Request verbs the gateway distinguishes.

    Every verb outside the four recognized ones collapses to OTHER.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OTHER = "OTHER"

    @classmethod
    def from_verb(cls, verb: str) -> "HttpMethod":
        """Map a raw request verb to its enum member. Never fails."""
        try:
            return cls((verb or "").strip().upper())
        except ValueError:
            return cls.OTHER

    @property
    def is_recognized(self) -> bool:
        return self is not HttpMethod.OTHER


class Severity(Enum):
    """Severity tag carried in the envelope's ``type`` field."""

    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"


class StatusCategory(Enum):
    """Behavior bucket a response status code falls into."""

    SUCCESS_FAMILY = "success_family"
    PASS_THROUGH = "pass_through"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNCLASSIFIED_ERROR = "unclassified_error"


@dataclass(frozen=True)
class ResponseEnvelope:
    """The standardized body returned to callers.

    Attributes:
        messages: Ordered user-facing messages.
        severity: Severity tag, or None when the ``type`` key is omitted.
    """

    messages: tuple[str, ...]
    severity: Optional[Severity] = None

    def to_payload(self) -> dict:
        """Return the JSON-ready mapping for this envelope."""
        payload: dict = {"messages": list(self.messages)}
        if self.severity is not None:
            payload["type"] = self.severity.value
        return payload


@dataclass(frozen=True)
class ExchangeSnapshot:
    """Immutable view of one finished exchange.

    Attributes:
        method: The request verb.
        status_code: Status produced by the downstream handler.
        body: The fully buffered response body.
        content_encoding: Downstream Content-Encoding, if any.
    """

    method: HttpMethod
    status_code: int
    body: bytes = b""
    content_encoding: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        """The body as text, or None when it is compressed or otherwise encoded."""
        encoding = (self.content_encoding or "").strip().lower()
        if encoding not in ("", "identity"):
            return None
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of normalizing one exchange.

    Either ``envelope`` is None and the original body passes through,
    or the body is replaced entirely by ``envelope``.
    """

    status_code: int
    category: StatusCategory
    envelope: Optional[ResponseEnvelope] = None

    @property
    def rewritten(self) -> bool:
        return self.envelope is not None


@dataclass(frozen=True)
class NormalizationPolicy:
    """User-facing texts and the severity used on fixed error paths.

    Attributes:
        deleted_message: Sent for a successful DELETE.
        client_error_message: Sent for a 400 on an unrecognized verb.
        server_error_message: Sent for 500-503.
        unclassified_error_message: Sent for any unclassified status.
        error_severity: Tag for the server and unclassified paths.
            None leaves the ``type`` key out of the envelope.
    """

    deleted_message: str = DELETED_MESSAGE
    client_error_message: str = CLIENT_ERROR_MESSAGE
    server_error_message: str = SERVER_ERROR_MESSAGE
    unclassified_error_message: str = UNCLASSIFIED_ERROR_MESSAGE
    error_severity: Optional[Severity] = None
