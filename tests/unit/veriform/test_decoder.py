# -*- coding: utf-8 -*-
"""Location: ./tests/unit/veriform/test_decoder.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for the message tree decoder.
"""

# Third-Party
import pytest

# First-Party
from veriform.decoder import Decoder
from veriform.errors import DecoderFinishedError, DecoderStateError, IncompleteStackError, StackUnderflowError
from veriform.handler import Handler


@pytest.fixture
def decoder() -> Decoder:
    """Create a fresh decoder."""
    return Decoder()


class TestScalarFields:
    """Test uint64 and binary fields in the root message."""

    @pytest.mark.parametrize("field_id,value", [(0, 0), (1, 42), (7, 2**64 - 1), (1000, 300)])
    def test_uint64(self, decoder: Decoder, field_id, value):
        """A single uint64 decodes to a one-entry dict."""
        decoder.uint64(field_id, value)
        assert decoder.finish() == {field_id: value}

    @pytest.mark.parametrize("value", [b"", b"hi", bytes(range(256))])
    def test_binary(self, decoder: Decoder, value):
        """Binary values, including empty ones, are stored as-is."""
        decoder.binary(3, value)
        assert decoder.finish() == {3: value}

    def test_last_write_wins(self, decoder: Decoder):
        """Repeated field ids overwrite earlier values."""
        decoder.uint64(1, 1)
        decoder.uint64(1, 2)
        assert decoder.finish() == {1: 2}

    def test_overwrite_across_types(self, decoder: Decoder):
        """A later binary value replaces an earlier uint64 with the same id."""
        decoder.uint64(1, 1)
        decoder.binary(1, b"x")
        assert decoder.finish() == {1: b"x"}

    def test_empty_message(self, decoder: Decoder):
        """Finishing immediately yields an empty dict."""
        assert decoder.finish() == {}


class TestNesting:
    """Test nested message assembly."""

    def test_nested_message(self, decoder: Decoder):
        """A nested message is attached under the id passed to end_nested."""
        decoder.begin_nested()
        decoder.uint64(2, 7)
        decoder.end_nested(5)
        assert decoder.finish() == {5: {2: 7}}

    def test_fields_after_nested_go_to_parent(self, decoder: Decoder):
        """Writes after end_nested land in the enclosing message."""
        decoder.uint64(1, 1)
        decoder.begin_nested()
        decoder.binary(1, b"inner")
        decoder.end_nested(2)
        decoder.uint64(3, 3)
        assert decoder.finish() == {1: 1, 2: {1: b"inner"}, 3: 3}

    def test_nested_overwrites_scalar(self, decoder: Decoder):
        """A nested message replaces a scalar stored under the same id."""
        decoder.uint64(4, 1)
        decoder.begin_nested()
        decoder.end_nested(4)
        assert decoder.finish() == {4: {}}

    @pytest.mark.parametrize("depth", [0, 1, 2, 5, 50])
    def test_depth_chain(self, decoder: Decoder, depth):
        """n opens followed by n closes build an n-deep chain."""
        ids = list(range(10, 10 + depth))
        for _ in ids:
            decoder.begin_nested()
        for field_id in ids:
            decoder.end_nested(field_id)

        result = decoder.finish()

        # Innermost message was closed first, so the root holds the last id
        node = result
        for field_id in reversed(ids):
            assert list(node) == [field_id]
            node = node[field_id]
        assert node == {}

    def test_deep_nesting_has_no_limit(self, decoder: Decoder):
        """Nesting far beyond the recursion limit is accepted."""
        for _ in range(5000):
            decoder.begin_nested()
        assert decoder.depth == 5000
        for _ in range(5000):
            decoder.end_nested(0)
        assert decoder.depth == 0
        assert 0 in decoder.finish()

    def test_depth_tracks_open_messages(self, decoder: Decoder):
        """depth counts unterminated nested messages."""
        assert decoder.depth == 0
        decoder.begin_nested()
        decoder.begin_nested()
        assert decoder.depth == 2
        decoder.end_nested(1)
        assert decoder.depth == 1


class TestProtocolErrors:
    """Test rejection of unbalanced event sequences."""

    def test_end_nested_at_root(self, decoder: Decoder):
        """end_nested without an open message underflows."""
        with pytest.raises(StackUnderflowError, match="not inside a nested message"):
            decoder.end_nested(1)

    def test_end_nested_after_balanced_pair(self, decoder: Decoder):
        """An extra end_nested after a balanced pair underflows."""
        decoder.begin_nested()
        decoder.end_nested(1)
        with pytest.raises(StackUnderflowError):
            decoder.end_nested(2)

    def test_finish_with_open_message(self, decoder: Decoder):
        """finish with an unterminated nested message fails."""
        decoder.begin_nested()
        with pytest.raises(IncompleteStackError, match="objects remaining in stack") as exc_info:
            decoder.finish()
        assert exc_info.value.remaining == 1

    def test_finish_reports_remaining(self, decoder: Decoder):
        """remaining counts every container left after the pop."""
        for _ in range(3):
            decoder.begin_nested()
        with pytest.raises(IncompleteStackError) as exc_info:
            decoder.finish()
        assert exc_info.value.remaining == 3

    def test_errors_share_base(self):
        """Both protocol errors are decoder state errors."""
        assert issubclass(StackUnderflowError, DecoderStateError)
        assert issubclass(IncompleteStackError, DecoderStateError)


class TestTerminalState:
    """Test that a decoder cannot be reused."""

    def test_use_after_finish(self, decoder: Decoder):
        """Every event after a successful finish is rejected."""
        decoder.finish()
        assert decoder.finished
        for call in (lambda: decoder.uint64(1, 1), lambda: decoder.binary(1, b""), decoder.begin_nested, lambda: decoder.end_nested(1), decoder.finish):
            with pytest.raises(DecoderFinishedError, match="decoder already finished"):
                call()

    def test_use_after_underflow(self, decoder: Decoder):
        """A rejected end_nested leaves the decoder spent."""
        with pytest.raises(StackUnderflowError):
            decoder.end_nested(1)
        assert decoder.finished
        with pytest.raises(DecoderFinishedError):
            decoder.finish()

    def test_use_after_incomplete_finish(self, decoder: Decoder):
        """A rejected finish leaves the decoder spent."""
        decoder.begin_nested()
        with pytest.raises(IncompleteStackError):
            decoder.finish()
        with pytest.raises(DecoderFinishedError):
            decoder.end_nested(1)


def test_decoder_is_a_handler(decoder: Decoder):
    """Decoder satisfies the parser's handler protocol."""
    assert isinstance(decoder, Handler)
