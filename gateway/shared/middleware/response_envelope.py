"""
Response envelope middleware.

Buffers every downstream response body, lets the normalization use
case decide its fate, and replays exactly one final body:
- Pass-through responses keep their bytes and headers unchanged.
- Rewritten responses become a JSON envelope. Headers that describe
  the old body (length, type, encoding, validators) are dropped.

Cancellation is not handled here: asyncio.CancelledError is not an
Exception subclass and propagates from the server untouched.
"""

import io
import logging
from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from gateway.application.normalization.normalize_response import (
    NormalizeResponseUseCase,
)
from gateway.domain.normalization.entities import (
    ExchangeSnapshot,
    HttpMethod,
    NormalizationResult,
)
from gateway.infrastructure.normalization.json_message_decoder import (
    PydanticMessageDecoder,
)

logger = logging.getLogger(__name__)

DOWNSTREAM_FAILURE_STATUS = 500

# Headers describing the downstream body; they are wrong for the envelope.
BODY_DESCRIBING_HEADERS = (
    "content-length",
    "content-type",
    "content-encoding",
    "content-range",
    "content-md5",
    "etag",
    "last-modified",
)


class ResponseEnvelopeMiddleware(BaseHTTPMiddleware):
    """Middleware that normalizes every response into one contract.

    Callers see either the downstream payload untouched or a
    ``{"messages": [...], "type": ...}`` envelope, never a
    per-endpoint error format or a stack trace.
    """

    def __init__(
        self,
        app: ASGIApp,
        use_case: Optional[NormalizeResponseUseCase] = None,
    ) -> None:
        super().__init__(app)
        self._use_case = use_case or NormalizeResponseUseCase(
            decoder=PydanticMessageDecoder()
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the downstream handler and replay the normalized body."""
        method = HttpMethod.from_verb(request.method)

        try:
            response = await call_next(request)
            body = await _drain(response)
        except Exception:
            logger.exception(
                "Downstream handler failed: %s %s", request.method, request.url.path
            )
            snapshot = ExchangeSnapshot(
                method=method, status_code=DOWNSTREAM_FAILURE_STATUS
            )
            return _render_envelope(self._use_case.execute(snapshot), None)

        snapshot = ExchangeSnapshot(
            method=method,
            status_code=response.status_code,
            body=body,
            content_encoding=response.headers.get("content-encoding"),
        )
        result = self._use_case.execute(snapshot)

        if not result.rewritten:
            return Response(
                content=body,
                status_code=response.status_code,
                headers=response.headers,
            )
        return _render_envelope(result, response)


async def _drain(response: Response) -> bytes:
    """Read the whole streamed body into memory, rewound to the start."""
    with io.BytesIO() as buffer:
        async for chunk in response.body_iterator:
            buffer.write(chunk if isinstance(chunk, bytes) else chunk.encode("utf-8"))
        buffer.seek(0)
        return buffer.read()


def _render_envelope(
    result: NormalizationResult, original: Optional[Response]
) -> JSONResponse:
    """Serialize the envelope, carrying over headers unrelated to the old body."""
    raw = list(original.raw_headers) if original is not None else []
    headers = MutableHeaders(raw=raw)
    for name in BODY_DESCRIBING_HEADERS:
        del headers[name]

    return JSONResponse(
        content=result.envelope.to_payload(),
        status_code=result.status_code,
        headers=headers,
    )
