"""
Use case: Normalize one finished HTTP exchange.

Input: ExchangeSnapshot (method, status code, buffered body)
Output: NormalizationResult
Side effects: None.
Failure cases: None. Every exchange ends in a pass-through or an envelope.
"""

import logging
from typing import Optional

from gateway.domain.normalization.composer import normalize
from gateway.domain.normalization.entities import (
    ExchangeSnapshot,
    NormalizationPolicy,
    NormalizationResult,
)
from gateway.domain.normalization.ports import MessageDecoder

logger = logging.getLogger(__name__)


class NormalizeResponseUseCase:
    """Orchestrates classification and envelope composition.

    Delegates decoding of upstream error bodies to the MessageDecoder
    port and the message texts to the NormalizationPolicy.
    """

    def __init__(
        self,
        decoder: MessageDecoder,
        policy: Optional[NormalizationPolicy] = None,
    ) -> None:
        self._decoder = decoder
        self._policy = policy or NormalizationPolicy()

    @property
    def policy(self) -> NormalizationPolicy:
        return self._policy

    def execute(self, snapshot: ExchangeSnapshot) -> NormalizationResult:
        """Run the normalization use case.

        Args:
            snapshot: The finished exchange.

        Returns:
            Final status code and the envelope, if the body is replaced.
        """
        result = normalize(snapshot, self._decoder, self._policy)

        if result.rewritten:
            logger.debug(
                "Rewrote response: method=%s, status=%d->%d, category=%s",
                snapshot.method.value,
                snapshot.status_code,
                result.status_code,
                result.category.value,
            )
        return result
