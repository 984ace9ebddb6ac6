"""
Adapter: decodes upstream error bodies with Pydantic.

Implements the MessageDecoder port. Validation errors are the normal
"not a message list" signal and are converted to None here so the
domain never sees a serialization exception.
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from gateway.domain.normalization.ports import MessageDecoder

logger = logging.getLogger(__name__)


class EnvelopeBody(BaseModel):
    """Wire shape of a body the gateway has already normalized."""

    model_config = ConfigDict(extra="forbid")

    messages: list[str]
    type: Optional[Literal["Success", "Warning", "Error"]] = None


_MESSAGE_LIST = TypeAdapter(list[str])


class PydanticMessageDecoder(MessageDecoder):
    """Decode a JSON array of strings, or an existing envelope."""

    def decode_messages(self, text: str) -> Optional[tuple[str, ...]]:
        try:
            return tuple(_MESSAGE_LIST.validate_json(text))
        except ValidationError:
            pass

        try:
            envelope = EnvelopeBody.model_validate_json(text)
        except ValidationError:
            logger.debug("Error body is not a message list, keeping it raw")
            return None
        return tuple(envelope.messages)
