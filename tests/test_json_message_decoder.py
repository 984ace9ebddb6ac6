"""
Tests for the Pydantic JSON decode adapter.
"""

import pytest

from gateway.infrastructure.normalization.json_message_decoder import (
    PydanticMessageDecoder,
)

decoder = PydanticMessageDecoder()


class TestPydanticMessageDecoder:
    """Tests for PydanticMessageDecoder.decode_messages()."""

    def test_array_of_strings(self) -> None:
        assert decoder.decode_messages('["a", "b"]') == ("a", "b")

    def test_empty_array(self) -> None:
        assert decoder.decode_messages("[]") == ()

    def test_existing_envelope_is_unwrapped(self) -> None:
        text = '{"messages":["Required field missing."],"type":"Warning"}'
        assert decoder.decode_messages(text) == ("Required field missing.",)

    def test_envelope_without_type_is_unwrapped(self) -> None:
        assert decoder.decode_messages('{"messages":["x"]}') == ("x",)

    @pytest.mark.parametrize(
        "text",
        [
            "not-json-at-all",
            "",
            "null",
            "[1, 2]",
            '"just a string"',
            '{"error": "bad"}',
            '{"messages": ["x"], "extra": true}',
            '{"messages": ["x"], "type": "Fatal"}',
        ],
    )
    def test_unrecognized_bodies_return_none(self, text: str) -> None:
        assert decoder.decode_messages(text) is None
