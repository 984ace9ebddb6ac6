"""
Port interfaces (ABCs) for the normalization bounded context.

The domain needs to decode JSON but must not depend on a
serialization library. Infrastructure adapters implement this port.
"""

from abc import ABC, abstractmethod
from typing import Optional


class MessageDecoder(ABC):
    """Port for decoding an upstream error body into messages."""

    @abstractmethod
    def decode_messages(self, text: str) -> Optional[tuple[str, ...]]:
        """Decode ``text`` as a list of messages.

        Accepts a JSON array of strings, or a body that is already a
        response envelope (so a second pass does not wrap it again).

        Args:
            text: The raw response body.

        Returns:
            The decoded messages, or None when the text is not in a
            recognized shape. Implementations must not raise.
        """
        raise NotImplementedError
