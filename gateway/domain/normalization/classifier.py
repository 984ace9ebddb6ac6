"""Status code classification."""

from gateway.domain.normalization.entities import StatusCategory

SUCCESS_CODES = frozenset({200, 201, 202, 204})
PASS_THROUGH_CODES = frozenset({304, 401, 403, 404, 422, 429})
SERVER_ERROR_CODES = frozenset({500, 501, 502, 503})
CLIENT_ERROR_CODE = 400


def classify(status_code: int) -> StatusCategory:
    """Return the behavior category for a response status code."""
    if status_code == CLIENT_ERROR_CODE:
        return StatusCategory.CLIENT_ERROR
    if status_code in SUCCESS_CODES:
        return StatusCategory.SUCCESS_FAMILY
    if status_code in PASS_THROUGH_CODES:
        return StatusCategory.PASS_THROUGH
    if status_code in SERVER_ERROR_CODES:
        return StatusCategory.SERVER_ERROR
    return StatusCategory.UNCLASSIFIED_ERROR
