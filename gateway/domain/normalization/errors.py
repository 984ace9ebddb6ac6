"""
Domain-specific errors for the normalization bounded context.

Downstream handlers raise these to produce the upstream payloads the
envelope middleware understands. They are mapped to HTTP responses
in the shared error handlers.
No framework imports allowed.
"""

from typing import Iterable


class GatewayDomainError(Exception):
    """Base error for all gateway domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ClientValidationError(GatewayDomainError):
    """Raised when a request is rejected with caller-facing messages."""

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Validation failed")


class ResourceNotFoundError(GatewayDomainError):
    """Raised when the requested resource does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"Resource not found: {resource}")
        self.resource = resource


class UpstreamUnavailableError(GatewayDomainError):
    """Raised when a service behind the gateway cannot be reached."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Upstream unavailable: {reason}")
        self.reason = reason
