# -*- coding: utf-8 -*-
"""Location: ./veriform/parser.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Veriform wire format parser.

A message is a sequence of fields. Each field starts with a varint tag
holding ``(field_id << 3) | wire_type``:

- ``0``: uint64, followed by a varint value
- ``2``: nested message, followed by a varint length and the message body
- ``3``: binary data, followed by a varint length and the raw bytes

The parser does not build anything itself; it reports each field to a
:class:`~veriform.handler.Handler` and returns whatever ``finish`` produces.

Examples:
    >>> from veriform.parser import decode
    >>> decode(b"\\x11\\x55")
    {1: 42}
    >>> decode(b"\\x35\\x05\\x11\\x55\\x27\\x05hi")
    {3: {1: 42}, 2: b'hi'}
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, Tuple, TypeVar

from .config import settings
from .decoder import Container, Decoder
from .errors import MessageTooLargeError, TruncatedMessageError, UnknownWireTypeError
from .handler import Handler
from . import varint

logger = logging.getLogger(__name__)

T = TypeVar("T")

WIRE_TYPE_UINT64 = 0
WIRE_TYPE_MESSAGE = 2
WIRE_TYPE_BINARY = 3


class Parser(Generic[T]):
    """Tokenize Veriform messages and drive a handler.

    Nested messages are tracked with an explicit stack of end offsets, so
    nesting depth is bounded only by the message size.

    Examples:
        >>> p = Parser(Decoder(), max_length=16)
        >>> p.max_length
        16
    """

    def __init__(self, handler: Handler[T], max_length: Optional[int] = None) -> None:
        """Initialize the parser.

        Args:
            handler: Event sink receiving parsed fields.
            max_length: Largest message accepted, in bytes. Defaults to the
                ``max_message_size`` setting.
        """
        self.handler = handler
        self.max_length = max_length if max_length is not None else settings.max_message_size

    def parse(self, data: bytes) -> T:
        """Parse a complete message.

        Args:
            data: Encoded message.

        Returns:
            The result of ``handler.finish()``.

        Raises:
            MessageTooLargeError: If ``data`` exceeds ``max_length``.
            TruncatedMessageError: If a field runs past its enclosing message.
            UnknownWireTypeError: If a tag carries an unsupported wire type.
            MalformedVarintError: If a varint is not minimally encoded.
        """
        if len(data) > self.max_length:
            raise MessageTooLargeError(f"message is {len(data)} bytes, maximum is {self.max_length}")

        view = memoryview(data)
        # (end offset, field id) of each open nested message
        open_messages: List[Tuple[int, int]] = []
        end = len(view)
        pos = 0

        while True:
            if pos == end:
                if not open_messages:
                    break
                field_id = open_messages.pop()[1]
                self.handler.end_nested(field_id)
                end = open_messages[-1][0] if open_messages else len(view)
                continue

            tag, pos = varint.decode(view[:end], pos)
            field_id, wire_type = tag >> 3, tag & 0x7

            if wire_type == WIRE_TYPE_UINT64:
                value, pos = varint.decode(view[:end], pos)
                self.handler.uint64(field_id, value)
            elif wire_type in (WIRE_TYPE_MESSAGE, WIRE_TYPE_BINARY):
                length, pos = varint.decode(view[:end], pos)
                if pos + length > end:
                    raise TruncatedMessageError(f"field {field_id} length {length} exceeds remaining {end - pos} bytes")
                if wire_type == WIRE_TYPE_BINARY:
                    self.handler.binary(field_id, bytes(view[pos:pos + length]))
                    pos += length
                else:
                    self.handler.begin_nested()
                    end = pos + length
                    open_messages.append((end, field_id))
            else:
                raise UnknownWireTypeError(field_id, wire_type)

        logger.debug(f"Parsed {len(view)} byte message")
        return self.handler.finish()


def decode(data: bytes, max_length: Optional[int] = None) -> Container:
    """Decode a message into nested dictionaries.

    Args:
        data: Encoded message.
        max_length: Largest message accepted, in bytes.

    Returns:
        Container: Decoded message tree.
    """
    return Parser(Decoder(), max_length=max_length).parse(data)
