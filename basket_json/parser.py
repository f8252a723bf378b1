"""
Incremental JSON parser.

This module provides the main entry points for basket-json. The parser feeds
characters into a tree of scopes and can report the best-effort value of
the input seen so far at any point, even when the input stops in the middle
of a string, number or key.
"""

import logging
from typing import Any, Optional, Type, TypeVar

from basket_json.convert import convert_value
from basket_json.errors import AlreadyFinishedError, EmptyInputError, StructuralRejectError
from basket_json.scopes.base import Scope, is_whitespace, open_scope
from basket_json.types import JsonValue, ParserOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IncompleteJsonParser:
    """
    Resumable parser for JSON text that may arrive in arbitrary chunks.

    State persists across write() calls: writing the concatenation of
    several chunks at once behaves exactly like writing them one by one.
    Not safe for concurrent use; give each input stream its own parser.

    Example:
        >>> parser = IncompleteJsonParser()
        >>> parser.write('{"name": "Jo')
        >>> parser.current_value()
        {'name': 'Jo'}
    """

    def __init__(self, options: Optional[ParserOptions] = None, **overrides: Any):
        """
        Initialize parser.

        Args:
            options: Parser options (default: ParserOptions())
            **overrides: Option fields to override, e.g. trailing="ignore"
        """
        if options is None:
            options = ParserOptions(**overrides)
        elif overrides:
            options = options.model_copy(update=ParserOptions(**overrides).model_dump(exclude_unset=True))

        self.options = options
        self._scope: Optional[Scope] = None
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once the root value is syntactically complete."""
        return self._finished

    @property
    def started(self) -> bool:
        """True once the first non-whitespace character has been seen."""
        return self._scope is not None

    def reset(self) -> None:
        """Discard all parsed state. Options are kept."""
        self._scope = None
        self._finished = False
        logger.debug("Parser reset")

    def write(self, chunk: str) -> None:
        """
        Consume a chunk of input.

        Args:
            chunk: Next piece of the JSON text, split anywhere

        Raises:
            StructuralRejectError: If the root scope refuses a character
            AlreadyFinishedError: If non-whitespace follows a complete value
                and trailing characters are not ignored
        """
        discarded = 0

        for char in chunk:
            if self._finished:
                if self.options.ignore_trailing:
                    discarded += 1
                    continue
                if is_whitespace(char):
                    continue
                logger.debug("Trailing character %r after completed value", char)
                raise AlreadyFinishedError(char)

            if self._scope is None:
                if is_whitespace(char):
                    continue
                self._scope = open_scope(char, self.options.allow_control_characters)
                logger.debug("Opened root %s", type(self._scope).__name__)

            if not self._scope.write(char):
                logger.debug("Root %s rejected %r", type(self._scope).__name__, char)
                raise StructuralRejectError(char)

            if self._scope.finished:
                self._finished = True
                logger.debug("Root %s finished", type(self._scope).__name__)

        if discarded:
            logger.debug("Ignored %d trailing characters", discarded)

    def current_value(self) -> JsonValue:
        """
        Get the best-effort value of the input consumed so far.

        Calling this does not change the parser state.

        Returns:
            None, bool, float, str, list or dict

        Raises:
            EmptyInputError: If no value has started yet
        """
        if self._scope is None:
            raise EmptyInputError()
        return self._scope.assume()

    def current_value_as(self, target: Type[T]) -> T:
        """
        Convert the current value into ``target``.

        Args:
            target: Pydantic model class or any type a pydantic TypeAdapter
                accepts (e.g. ``list[str]``)

        Returns:
            The validated instance

        Raises:
            EmptyInputError: If no value has started yet
            NullValueError: If the current value is null
            MissingFieldsError: If validate_required_fields is set and
                required model fields are absent
            ConversionError: If validation fails
        """
        return convert_value(
            self.current_value(),
            target,
            validate_required_fields=self.options.validate_required_fields,
        )


def parse(text: str, options: Optional[ParserOptions] = None, **overrides: Any) -> JsonValue:
    """
    Parse (possibly truncated) JSON text in one step.

    Examples:
        >>> parse('{"items": [1, 2')
        {'items': [1.0, 2.0]}

        >>> parse('["apple", "ban')
        ['apple', 'ban']
    """
    parser = IncompleteJsonParser(options, **overrides)
    parser.write(text)
    return parser.current_value()


def parse_as(
    text: str,
    target: Type[T],
    options: Optional[ParserOptions] = None,
    **overrides: Any,
) -> T:
    """Parse (possibly truncated) JSON text and convert it into ``target``."""
    parser = IncompleteJsonParser(options, **overrides)
    parser.write(text)
    return parser.current_value_as(target)


__all__ = [
    "IncompleteJsonParser",
    "parse",
    "parse_as",
]
