# -*- coding: utf-8 -*-
"""Location: ./veriform/handler.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Event sink interface driven by the Veriform parser.

The parser tokenizes wire bytes and pushes one event per field, in the order
the fields appear, so the nesting of ``begin_nested``/``end_nested`` calls
mirrors the nesting of the encoded message. ``finish`` is called exactly once
after the outermost message has been consumed.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Handler(Protocol[T_co]):
    """Receiver of parse events producing a result of type ``T_co``."""

    def uint64(self, field_id: int, value: int) -> None:
        """Store an unsigned 64-bit integer in the current message."""
        ...

    def binary(self, field_id: int, value: bytes) -> None:
        """Store a binary blob in the current message."""
        ...

    def begin_nested(self) -> None:
        """Open a nested message."""
        ...

    def end_nested(self, field_id: int) -> None:
        """Close the innermost nested message, attaching it to its parent under ``field_id``."""
        ...

    def finish(self) -> T_co:
        """Close the root message and return the result."""
        ...
