"""
Partial JSON parsing utilities.

Provides best-effort parsing of incomplete JSON strings during streaming,
for callers that only want an object back and never an exception.
"""

import logging
from typing import Any

from basket_json.errors import IncompleteJsonError
from basket_json.parser import IncompleteJsonParser
from basket_json.types import TrailingPolicy

logger = logging.getLogger(__name__)


def parse_partial_json(text: str) -> dict[str, Any]:
    """
    Parse incomplete JSON strings with best-effort completion.

    During streaming, tool call arguments may arrive as incomplete JSON.
    The text is fed through an IncompleteJsonParser, so unterminated
    strings, numbers and keys are completed from what has arrived.
    Anything after a complete object is ignored.

    Args:
        text: Potentially incomplete JSON string

    Returns:
        Parsed JSON object, or empty dict if unparseable or not an object

    Examples:
        >>> parse_partial_json('{"name": "test"')
        {'name': 'test'}

        >>> parse_partial_json('{"items": [1, 2')
        {'items': [1.0, 2.0]}

        >>> parse_partial_json('{"status":')
        {'status': None}
    """
    parser = IncompleteJsonParser(trailing=TrailingPolicy.IGNORE)
    try:
        parser.write(text)
        result = parser.current_value()
    except IncompleteJsonError as e:
        logger.debug("Partial JSON not parseable: %s", e)
        return {}

    if not isinstance(result, dict):
        return {}
    return result


__all__ = [
    "parse_partial_json",
]
