# -*- coding: utf-8 -*-
"""Location: ./veriform/decoder.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Veriform message decoder.

Builds an in-memory tree of field-keyed dictionaries from the flat stream of
events emitted by :class:`veriform.parser.Parser`. Values are ``int`` for
uint64 fields, ``bytes`` for binary fields and nested ``dict`` objects for
nested messages.

A decoder decodes exactly one message. Once ``finish`` returns, or once an
event sequence is rejected, the instance is spent and every further call
raises :class:`~veriform.errors.DecoderFinishedError`.

Examples:
    >>> from veriform.decoder import Decoder
    >>> decoder = Decoder()
    >>> decoder.uint64(1, 42)
    >>> decoder.begin_nested()
    >>> decoder.binary(2, b"hi")
    >>> decoder.end_nested(3)
    >>> decoder.finish()
    {1: 42, 3: {2: b'hi'}}

    >>> decoder = Decoder()
    >>> decoder.end_nested(1)
    Traceback (most recent call last):
    ...
    veriform.errors.StackUnderflowError: not inside a nested message
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from .errors import DecoderFinishedError, IncompleteStackError, StackUnderflowError

logger = logging.getLogger(__name__)

Value = Union[int, bytes, "Container"]
Container = Dict[int, Value]


class Decoder:
    """Assemble decode events into nested dictionaries.

    Attributes:
        _stack: Containers under construction, innermost last. ``None`` once
            the decoder has finished or failed.
    """

    def __init__(self) -> None:
        self._stack: Optional[List[Container]] = [{}]

    @property
    def depth(self) -> int:
        """Number of currently open nested messages.

        Returns:
            int: 0 at the root.

        Raises:
            DecoderFinishedError: If the decoder is spent.

        Examples:
            >>> d = Decoder()
            >>> d.begin_nested()
            >>> d.depth
            1
        """
        return len(self._live_stack()) - 1

    @property
    def finished(self) -> bool:
        """Whether the decoder has reached a terminal state."""
        return self._stack is None

    def uint64(self, field_id: int, value: int) -> None:
        """Add a uint64 to the current message.

        Args:
            field_id: Field identifier; an existing value is overwritten.
            value: Unsigned integer value.
        """
        self._current()[field_id] = value

    def binary(self, field_id: int, value: bytes) -> None:
        """Add binary data to the current message.

        Args:
            field_id: Field identifier; an existing value is overwritten.
            value: Raw bytes, possibly empty.
        """
        self._current()[field_id] = value

    def begin_nested(self) -> None:
        """Push down the stack, starting a new nested message."""
        self._live_stack().append({})

    def end_nested(self, field_id: int) -> None:
        """End a nested message, setting it under ``field_id`` on its parent.

        The nested message is popped before the parent is checked, so a
        rejected call leaves the decoder spent.

        Args:
            field_id: Field identifier in the parent message.

        Raises:
            StackUnderflowError: If no nested message is open.
        """
        stack = self._live_stack()
        value = stack.pop()

        if not stack:
            self._stack = None
            logger.debug(f"end_nested({field_id}) called at root depth")
            raise StackUnderflowError()

        stack[-1][field_id] = value

    def finish(self) -> Container:
        """Finish decoding, returning the root message.

        Returns:
            Container: The decoded message tree.

        Raises:
            IncompleteStackError: If nested messages were left open.
        """
        stack = self._live_stack()
        result = stack.pop()
        self._stack = None

        if stack:
            logger.debug(f"finish() called with {len(stack)} unterminated nested message(s)")
            raise IncompleteStackError(remaining=len(stack))

        return result

    def _live_stack(self) -> List[Container]:
        if self._stack is None:
            raise DecoderFinishedError()
        return self._stack

    def _current(self) -> Container:
        return self._live_stack()[-1]
