"""
Best-effort parsing of upstream error bodies.

A body either decodes into discrete messages or is kept verbatim as a
single message. Both outcomes are explicit values; nothing is raised.
"""

from dataclasses import dataclass
from typing import Union

from gateway.domain.normalization.ports import MessageDecoder


@dataclass(frozen=True)
class ParsedMessages:
    """The body decoded into discrete messages."""

    messages: tuple[str, ...]


@dataclass(frozen=True)
class RawFallback:
    """The body could not be decoded and is carried as-is."""

    text: str

    @property
    def messages(self) -> tuple[str, ...]:
        return (self.text,)


ParseOutcome = Union[ParsedMessages, RawFallback]


def parse_error_body(text: str, decoder: MessageDecoder) -> ParseOutcome:
    """Interpret an error body as a list of messages.

    Args:
        text: The raw response body.
        decoder: JSON decode capability.

    Returns:
        ParsedMessages when the decoder recognizes the body,
        otherwise RawFallback holding the text verbatim.
    """
    decoded = decoder.decode_messages(text)
    if decoded is None:
        return RawFallback(text=text)
    return ParsedMessages(messages=tuple(decoded))
