# -*- coding: utf-8 -*-
"""Location: ./veriform/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Veriform CLI.
Decodes a Veriform message from a file or stdin and prints it as JSON.
Field identifiers become JSON object keys and binary values are rendered
as base64 strings.

Examples:
    >>> from veriform.cli import render_json
    >>> print(render_json({1: 42, 2: b"hi"}).decode())
    {
      "1": 42,
      "2": "aGk="
    }
"""

# Standard
import argparse
import base64
import logging
import sys
from typing import Any, List, Optional

# Third-Party
import orjson

# First-Party
from veriform import __version__
from veriform.config import settings
from veriform.decoder import Container
from veriform.errors import DecodeError
from veriform.parser import decode

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Raised when CLI input cannot be read."""


def _default(obj: Any) -> str:
    """Serialize values orjson does not handle natively.

    Args:
        obj: Value to serialize.

    Returns:
        str: Base64 text for binary values.

    Raises:
        TypeError: If the value is not binary data.
    """
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(obj)).decode()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def render_json(message: Container) -> bytes:
    """Render a decoded message as indented JSON.

    Args:
        message: Decoded message tree.

    Returns:
        bytes: UTF-8 JSON document.
    """
    return orjson.dumps(message, default=_default, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS)


def read_input(path: Optional[str], hex_input: bool = False) -> bytes:
    """Read a message from ``path`` or stdin.

    Args:
        path: File to read, or None / "-" for stdin.
        hex_input: Treat the input as hex text rather than raw bytes.

    Returns:
        bytes: The encoded message.

    Raises:
        CLIError: If the file cannot be read or the hex text is invalid.
    """
    try:
        if path is None or path == "-":
            raw = sys.stdin.buffer.read()
        else:
            with open(path, "rb") as f:
                raw = f.read()
    except OSError as e:
        raise CLIError(f"Cannot read {path}: {e}")

    if not hex_input:
        return raw

    try:
        return bytes.fromhex(raw.decode("ascii"))
    except (UnicodeDecodeError, ValueError) as e:
        raise CLIError(f"Invalid hex input: {e}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the decode command.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(prog="veriform", description="Decode a Veriform message and print it as JSON")

    parser.add_argument("--version", "-V", action="version", version=f"veriform {__version__}")
    parser.add_argument("input_file", nargs="?", help="File containing the encoded message (default: stdin)")
    parser.add_argument("--hex", action="store_true", help="Input is hex text rather than raw bytes")
    parser.add_argument("--max-size", type=int, help=f"Largest message accepted in bytes (default: VERIFORM_MAX_MESSAGE_SIZE or {settings.max_message_size})")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level (default: VERIFORM_LOG_LEVEL)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit status.
    """
    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    try:
        data = read_input(args.input_file, hex_input=args.hex)
        message = decode(data, max_length=args.max_size)
    except (CLIError, DecodeError) as e:
        logger.debug("Decoding failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(render_json(message) + b"\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
