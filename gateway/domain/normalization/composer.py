"""
Method-aware composition of response envelopes.

Each status category has one composer. ``normalize`` dispatches a
finished exchange through them and is total: every (status, method)
pair ends in either a pass-through or a complete envelope.
"""

from typing import Optional

from gateway.domain.normalization.classifier import CLIENT_ERROR_CODE, classify
from gateway.domain.normalization.entities import (
    ExchangeSnapshot,
    HttpMethod,
    NormalizationPolicy,
    NormalizationResult,
    ResponseEnvelope,
    Severity,
    StatusCategory,
)
from gateway.domain.normalization.envelope import build_envelope
from gateway.domain.normalization.parser import parse_error_body
from gateway.domain.normalization.ports import MessageDecoder

# A rewritten body cannot travel with 204 No Content.
NO_CONTENT_CODE = 204
BODY_STATUS_CODE = 200


def compose_success(
    method: HttpMethod, policy: NormalizationPolicy
) -> Optional[ResponseEnvelope]:
    """Return the envelope for a 2xx response, or None to pass through."""
    if method is HttpMethod.DELETE:
        return build_envelope([policy.deleted_message], Severity.SUCCESS)
    return None


def compose_client_error(
    text: Optional[str],
    method: HttpMethod,
    decoder: MessageDecoder,
    policy: NormalizationPolicy,
) -> ResponseEnvelope:
    """Return the warning envelope for a 400 response.

    Upstream messages survive only for the four recognized verbs;
    anything else gets the generic message, as does a body that
    cannot be read as text (None).
    """
    if text is None or not method.is_recognized:
        return build_envelope([policy.client_error_message], Severity.WARNING)
    outcome = parse_error_body(text, decoder)
    return build_envelope(outcome.messages, Severity.WARNING)


def compose_server_error(policy: NormalizationPolicy) -> ResponseEnvelope:
    return build_envelope([policy.server_error_message], policy.error_severity)


def compose_unclassified_error(policy: NormalizationPolicy) -> ResponseEnvelope:
    return build_envelope([policy.unclassified_error_message], policy.error_severity)


def normalize(
    snapshot: ExchangeSnapshot,
    decoder: MessageDecoder,
    policy: NormalizationPolicy,
) -> NormalizationResult:
    """Decide the final status and body for one exchange.

    Args:
        snapshot: Method, status and buffered body of the exchange.
        decoder: JSON decode capability used on the 400 path.
        policy: Messages and default severity to emit.

    Returns:
        The final status code and, when the body is replaced, the envelope.
    """
    category = classify(snapshot.status_code)
    status_code = snapshot.status_code
    envelope: Optional[ResponseEnvelope]

    if category is StatusCategory.CLIENT_ERROR:
        envelope = compose_client_error(
            snapshot.text, snapshot.method, decoder, policy
        )
        status_code = CLIENT_ERROR_CODE
    elif category is StatusCategory.SUCCESS_FAMILY:
        envelope = compose_success(snapshot.method, policy)
    elif category is StatusCategory.PASS_THROUGH:
        envelope = None
    elif category is StatusCategory.SERVER_ERROR:
        envelope = compose_server_error(policy)
    else:
        envelope = compose_unclassified_error(policy)

    if envelope is not None and status_code == NO_CONTENT_CODE:
        status_code = BODY_STATUS_CODE

    return NormalizationResult(
        status_code=status_code, category=category, envelope=envelope
    )
