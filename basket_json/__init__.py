"""
basket-json: Incremental parsing of incomplete JSON.

This package parses JSON text that may be cut off at any character, such as
structured output streamed token by token from an LLM, and reports the
best-effort value of what has arrived so far.
"""

from basket_json.convert import convert_value
from basket_json.errors import (
    AlreadyFinishedError,
    ConversionError,
    EmptyInputError,
    IncompleteJsonError,
    MissingFieldsError,
    NullValueError,
    ParseError,
    StructuralRejectError,
)
from basket_json.parser import IncompleteJsonParser, parse, parse_as
from basket_json.stream import aiter_snapshots, iter_snapshots
from basket_json.types import JsonValue, ParserOptions, TrailingPolicy

__version__ = "0.1.0"

__all__ = [
    # Parser
    "IncompleteJsonParser",
    "parse",
    "parse_as",
    "convert_value",
    # Streaming
    "iter_snapshots",
    "aiter_snapshots",
    # Types
    "JsonValue",
    "ParserOptions",
    "TrailingPolicy",
    # Errors
    "IncompleteJsonError",
    "ParseError",
    "StructuralRejectError",
    "AlreadyFinishedError",
    "EmptyInputError",
    "ConversionError",
    "NullValueError",
    "MissingFieldsError",
]
