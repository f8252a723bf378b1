"""
Snapshot streaming for basket-json.

Wraps a parser around an iterable (or async iterable) of text chunks, such
as the deltas of a streaming LLM response, and yields the best-effort value
after every chunk.
"""

from __future__ import annotations

from typing import Any, AsyncIterable, AsyncIterator, Iterable, Iterator, Optional

from basket_json.parser import IncompleteJsonParser
from basket_json.types import JsonValue, ParserOptions


def iter_snapshots(
    chunks: Iterable[str],
    options: Optional[ParserOptions] = None,
    **overrides: Any,
) -> Iterator[JsonValue]:
    """
    Yield the current value after each chunk.

    Chunks that arrive before any value has started (leading whitespace)
    produce no snapshot.

    Args:
        chunks: Text chunks in arrival order
        options: Parser options
        **overrides: Option fields to override

    Yields:
        Best-effort value after each chunk

    Raises:
        ParseError: If a chunk contains a character the parser refuses

    Examples:
        >>> list(iter_snapshots(['{"a": "x', 'y"}']))
        [{'a': 'x'}, {'a': 'xy'}]
    """
    parser = IncompleteJsonParser(options, **overrides)
    for chunk in chunks:
        parser.write(chunk)
        if parser.started:
            yield parser.current_value()


async def aiter_snapshots(
    chunks: AsyncIterable[str],
    options: Optional[ParserOptions] = None,
    **overrides: Any,
) -> AsyncIterator[JsonValue]:
    """
    Async variant of iter_snapshots() for streaming clients.

    Args:
        chunks: Async iterable of text chunks
        options: Parser options
        **overrides: Option fields to override

    Yields:
        Best-effort value after each chunk
    """
    parser = IncompleteJsonParser(options, **overrides)
    async for chunk in chunks:
        parser.write(chunk)
        if parser.started:
            yield parser.current_value()


__all__ = [
    "iter_snapshots",
    "aiter_snapshots",
]
