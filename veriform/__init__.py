# -*- coding: utf-8 -*-
"""Veriform message decoder.

Decodes Veriform-encoded messages into nested dictionaries keyed by field
identifier.

SPDX-License-Identifier: Apache-2.0
"""

__version__ = "0.1.0"

from veriform.decoder import Container, Decoder, Value
from veriform.errors import (
    DecodeError,
    DecoderFinishedError,
    DecoderStateError,
    IncompleteStackError,
    MalformedVarintError,
    MessageTooLargeError,
    ParseError,
    StackUnderflowError,
    TruncatedMessageError,
    UnknownWireTypeError,
)
from veriform.handler import Handler
from veriform.parser import decode, Parser

__all__ = [
    "Container",
    "DecodeError",
    "Decoder",
    "DecoderFinishedError",
    "DecoderStateError",
    "Handler",
    "IncompleteStackError",
    "MalformedVarintError",
    "MessageTooLargeError",
    "ParseError",
    "Parser",
    "StackUnderflowError",
    "TruncatedMessageError",
    "UnknownWireTypeError",
    "Value",
    "decode",
]
