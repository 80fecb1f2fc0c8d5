"""Syntax parser adapters for HCL and its JSON variant."""

import json
from collections.abc import Sequence
from typing import Any, Protocol

import hcl2
from lark.exceptions import LarkError


Document = dict[str, Any]


class ParseFailure(Exception):
    """Raised when a parser rejects its input."""

    def __init__(self, syntax: str, message: str) -> None:
        """Initialize the failure.

        Args:
            syntax: Name of the syntax that was attempted.
            message: Underlying parser message.
        """
        self.syntax = syntax
        self.message = message
        super().__init__(f"{syntax}: {message}")


class Parser(Protocol):
    """Parses raw bytes into a configuration document."""

    name: str

    def parse(self, content: bytes) -> Document:
        """Parse content or raise ParseFailure."""
        ...


class HclParser:
    """Parser for native HCL syntax.

    String values are unquoted and blocks carry no marker keys, so a
    document matches what JsonParser returns for the JSON encoding.
    """

    name = "hcl"
    options = hcl2.SerializationOptions(
        strip_string_quotes=True, explicit_blocks=False
    )

    def parse(self, content: bytes) -> Document:
        """Parse HCL bytes.

        Raises:
            ParseFailure: If the content is not UTF-8 or not valid HCL.
        """
        try:
            document: Document = hcl2.loads(
                content.decode("utf-8"), serialization_options=self.options
            )
        except (UnicodeDecodeError, LarkError, ValueError) as e:
            raise ParseFailure(self.name, str(e)) from e
        return document


class JsonParser:
    """Parser for the JSON encoding of HCL."""

    name = "json"

    def parse(self, content: bytes) -> Document:
        """Parse JSON bytes whose top level must be an object.

        Raises:
            ParseFailure: If the content is not a JSON object.
        """
        try:
            document = json.loads(content)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ParseFailure(self.name, str(e)) from e
        if not isinstance(document, dict):
            raise ParseFailure(self.name, "top-level value must be an object")
        return document


def parse_first(
    content: bytes, parsers: Sequence[Parser]
) -> tuple[Document | None, list[ParseFailure]]:
    """Try parsers in order and return the first successful document.

    Args:
        content: Raw bytes to parse.
        parsers: Parsers to attempt, in order.

    Returns:
        Tuple of (document or None, failures from parsers tried before it).
    """
    failures: list[ParseFailure] = []
    for parser in parsers:
        try:
            return parser.parse(content), failures
        except ParseFailure as e:
            failures.append(e)
    return None, failures
