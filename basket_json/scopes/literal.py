"""
Literal scope: strings, numbers, booleans and null.

The scope keeps the exact characters it consumed (quotes included) and only
accepts a character while the buffer stays a valid prefix of some literal.
Strings cut off mid-way are repaired and decoded on demand.
"""

import json
import re
from typing import Optional

from basket_json.scopes.base import Scope
from basket_json.types import JsonValue

_KEYWORDS = ("null", "true", "false")

# Exponents are not part of the accepted grammar.
_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]*)?")

_PARTIAL_UNICODE_ESCAPE_RE = re.compile(r"\\u[0-9a-fA-F]{0,3}\Z")

# High surrogate whose low half has not arrived yet
_HIGH_SURROGATE_ESCAPE_RE = re.compile(r"\\u[dD][89abAB][0-9a-fA-F]{2}\Z")

_CONTROL_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _backslashes_before(text: str, index: int) -> int:
    """Length of the run of backslashes ending just before ``text[index]``."""
    count = 0
    i = index - 1
    while i >= 0 and text[i] == "\\":
        count += 1
        i -= 1
    return count


def _is_completed_string(text: str) -> bool:
    if len(text) < 2 or not text.startswith('"') or not text.endswith('"'):
        return False
    return _backslashes_before(text, len(text) - 1) % 2 == 0


def _escape_control_characters(text: str) -> str:
    """Escape raw newline/CR/tab that are not already escaped."""
    out = []
    backslashes = 0
    for char in text:
        if char in _CONTROL_ESCAPES and backslashes % 2 == 0:
            out.append(_CONTROL_ESCAPES[char])
        else:
            out.append(char)
        backslashes = backslashes + 1 if char == "\\" else 0
    return "".join(out)


def _strip_escape(text: str, pattern: "re.Pattern[str]") -> str:
    """Remove a trailing escape matched by ``pattern`` if its backslash is live."""
    match = pattern.search(text)
    if match and _backslashes_before(text, match.start()) % 2 == 0:
        return text[: match.start()]
    return text


def repair_string(text: str, allow_control_characters: bool = False) -> Optional[str]:
    """
    Decode a possibly unterminated JSON string literal.

    Args:
        text: Buffer starting with the opening quote
        allow_control_characters: Escape raw newline/CR/tab before decoding

    Returns:
        The decoded string, or None if no repair produces valid JSON

    Examples:
        >>> repair_string('"Hello, wor')
        'Hello, wor'

        >>> repair_string('"caf\\\\u00')
        'caf'

        >>> repair_string('"smile \\\\ud83d')
        'smile '
    """
    if not _is_completed_string(text):
        # Drop an escape sequence that was cut off before it could be decoded
        text = _strip_escape(text, _PARTIAL_UNICODE_ESCAPE_RE)
        while _backslashes_before(text, len(text)) % 2 == 1:
            text = text[:-1]
        text = _strip_escape(text, _HIGH_SURROGATE_ESCAPE_RE)
        text += '"'

    if allow_control_characters:
        text = _escape_control_characters(text)

    while True:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            if len(text) <= 2:
                return None
            text = text[: max(1, len(text) - 3)] + '"'


class LiteralScope(Scope):
    """
    Scope for a single leaf value.

    Accepts a character only if the buffer plus that character is still a
    prefix of ``null``, ``true``, ``false``, a quoted string, or a number
    matching ``-?[0-9]+(\\.[0-9]*)?``. Numbers never finish on their own;
    the enclosing scope decides when they end.
    """

    def __init__(self, allow_control_characters: bool = False):
        super().__init__(allow_control_characters)
        self._content = ""

    @property
    def content(self) -> str:
        """Raw characters consumed so far."""
        return self._content

    def write(self, char: str) -> bool:
        if self._finished:
            return False

        candidate = self._content + char
        if not self._accepts(candidate):
            return False

        self._content = candidate
        if candidate in _KEYWORDS or _is_completed_string(candidate):
            self._finished = True
        return True

    def _accepts(self, candidate: str) -> bool:
        if any(keyword.startswith(candidate) for keyword in _KEYWORDS):
            return True

        if candidate.startswith('"'):
            # Earlier characters were checked when they arrived
            char = candidate[-1]
            if len(candidate) > 1 and char in _CONTROL_ESCAPES and not self.allow_control_characters:
                return _backslashes_before(candidate, len(candidate) - 1) % 2 == 1
            return True

        return candidate == "-" or _NUMBER_RE.fullmatch(candidate) is not None

    def assume(self) -> JsonValue:
        content = self._content
        if not content or "null".startswith(content):
            return None
        if "true".startswith(content):
            return True
        if "false".startswith(content):
            return False
        if content.startswith('"'):
            return repair_string(content, self.allow_control_characters)
        if content == "-":
            return 0.0
        try:
            return float(content)
        except ValueError:
            return None


__all__ = ["LiteralScope", "repair_string"]
