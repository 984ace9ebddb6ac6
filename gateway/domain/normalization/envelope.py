from typing import Iterable, Optional

from gateway.domain.normalization.entities import ResponseEnvelope, Severity


def build_envelope(
    messages: Iterable[str], severity: Optional[Severity] = None
) -> ResponseEnvelope:
    """Construct the standard envelope from messages and a severity tag."""
    return ResponseEnvelope(messages=tuple(messages), severity=severity)
