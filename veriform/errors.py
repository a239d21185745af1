# -*- coding: utf-8 -*-
"""Location: ./veriform/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Veriform decoding errors.

Every failure raised while turning a Veriform message into a tree derives from
:class:`DecodeError`, so callers can catch one type at the boundary. Two
families exist:

- :class:`DecoderStateError`: the event stream driving the decoder was
  structurally inconsistent (unbalanced nesting, use after finish).
- :class:`ParseError`: the wire bytes themselves could not be tokenized.

Examples:
    >>> from veriform.errors import DecodeError, StackUnderflowError
    >>> issubclass(StackUnderflowError, DecodeError)
    True
    >>> str(StackUnderflowError())
    'not inside a nested message'
"""


class DecodeError(Exception):
    """Base class for all Veriform decoding errors."""


class DecoderStateError(DecodeError):
    """Raised when decoder events arrive in an order that breaks nesting."""


class StackUnderflowError(DecoderStateError):
    """Raised by ``end_nested`` when no nested message is open.

    Examples:
        >>> StackUnderflowError().args
        ('not inside a nested message',)
    """

    def __init__(self, message: str = "not inside a nested message") -> None:
        """Initialize the error.

        Args:
            message: Human readable description.
        """
        super().__init__(message)


class IncompleteStackError(DecoderStateError):
    """Raised by ``finish`` while nested messages are still open.

    Attributes:
        remaining: Number of containers left on the stack after the root was popped.

    Examples:
        >>> err = IncompleteStackError(remaining=2)
        >>> err.remaining
        2
        >>> str(err)
        'objects remaining in stack'
    """

    def __init__(self, message: str = "objects remaining in stack", remaining: int = 0) -> None:
        """Initialize the error.

        Args:
            message: Human readable description.
            remaining: Number of unterminated containers.
        """
        super().__init__(message)
        self.remaining = remaining


class DecoderFinishedError(DecoderStateError):
    """Raised when a decoder is used after finishing or failing."""

    def __init__(self, message: str = "decoder already finished") -> None:
        super().__init__(message)


class ParseError(DecodeError):
    """Base class for errors in the Veriform wire encoding."""


class MalformedVarintError(ParseError):
    """Raised for varints that are not minimally encoded."""


class TruncatedMessageError(ParseError):
    """Raised when input ends before a varint or length-delimited value does."""


class UnknownWireTypeError(ParseError):
    """Raised for a field tag carrying an unsupported wire type.

    Examples:
        >>> err = UnknownWireTypeError(field_id=4, wire_type=7)
        >>> (err.field_id, err.wire_type)
        (4, 7)
        >>> str(err)
        'unknown wire type 7 for field 4'
    """

    def __init__(self, field_id: int, wire_type: int) -> None:
        """Initialize the error.

        Args:
            field_id: Identifier decoded from the tag.
            wire_type: Offending wire type.
        """
        super().__init__(f"unknown wire type {wire_type} for field {field_id}")
        self.field_id = field_id
        self.wire_type = wire_type


class MessageTooLargeError(ParseError):
    """Raised when a message exceeds the configured maximum size."""
