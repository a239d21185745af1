# -*- coding: utf-8 -*-
"""Location: ./veriform/varint.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Prefix varint decoding.

Veriform integers are little-endian with the total length stored as unary
trailing zero bits of the first byte: ``1`` marks a one-byte value, ``10`` a
two-byte value and so on up to eight bytes. A first byte of ``0`` is followed
by a full 8-byte little-endian integer. Encodings must be minimal.

Examples:
    >>> from veriform.varint import decode
    >>> decode(b"\\x01")
    (0, 1)
    >>> decode(b"\\xff")
    (127, 1)
    >>> decode(b"\\xb2\\x04")
    (300, 2)
    >>> decode(b"\\x00\\x11\\x55", offset=1)
    (8, 2)
"""

from typing import Tuple, Union

from .errors import MalformedVarintError, TruncatedMessageError

# Longest encoding, used for full-width 64-bit values
MAX_LENGTH = 9

Buffer = Union[bytes, bytearray, memoryview]


def decode(data: Buffer, offset: int = 0) -> Tuple[int, int]:
    """Decode a varint starting at ``offset``.

    Args:
        data: Buffer to read from.
        offset: Index of the first byte of the varint.

    Returns:
        Tuple of (decoded value, offset just past the varint).

    Raises:
        TruncatedMessageError: If the buffer ends inside the varint.
        MalformedVarintError: If the varint is not minimally encoded.

    Examples:
        >>> decode(b"\\x16\\x00")
        Traceback (most recent call last):
        ...
        veriform.errors.MalformedVarintError: malformed varint
    """
    if offset >= len(data):
        raise TruncatedMessageError("unexpected end of input reading varint")

    prefix = data[offset]

    if prefix == 0:
        end = offset + MAX_LENGTH
        if end > len(data):
            raise TruncatedMessageError("unexpected end of input reading varint")
        result = int.from_bytes(data[offset + 1:end], "little")
        if result < (1 << 56):
            raise MalformedVarintError("malformed varint")
        return result, end

    length = (prefix & -prefix).bit_length()
    end = offset + length
    if end > len(data):
        raise TruncatedMessageError("unexpected end of input reading varint")

    result = int.from_bytes(data[offset:end], "little") >> length
    if length > 1 and result < (1 << (7 * (length - 1))):
        raise MalformedVarintError("malformed varint")

    return result, end
