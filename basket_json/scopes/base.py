"""
Base scope interface.

Every JSON construct being parsed is represented by a Scope: a stateful
acceptor that consumes one character at a time and can report the value
its input represents so far.
"""

from abc import ABC, abstractmethod

from basket_json.types import JsonValue


def is_whitespace(char: str) -> bool:
    """Whitespace is insignificant outside string literals."""
    return char.isspace()


class Scope(ABC):
    """
    Abstract base class for the literal, array and object scopes.

    A scope is finished once its construct is syntactically complete.
    Finishing is one-way: a finished scope rejects every further character
    and its value never changes again.
    """

    def __init__(self, allow_control_characters: bool = False):
        """
        Initialize scope.

        Args:
            allow_control_characters: Accept raw newline/CR/tab inside strings.
                Passed on to every child scope.
        """
        self._finished = False
        self.allow_control_characters = allow_control_characters

    @property
    def finished(self) -> bool:
        return self._finished

    @abstractmethod
    def write(self, char: str) -> bool:
        """
        Consume one character.

        Args:
            char: A single code point

        Returns:
            True if the character was accepted (or absorbed), False if it is
            invalid in the current state. A rejected character leaves the
            scope unchanged.
        """
        pass

    @abstractmethod
    def assume(self) -> JsonValue:
        """
        Best-effort value for the input consumed so far.

        Pure: calling it repeatedly without writing returns equal values.
        """
        pass

    def spawn(self, char: str) -> "Scope":
        """Create a child scope for a value starting with ``char``."""
        return open_scope(char, self.allow_control_characters)


def open_scope(char: str, allow_control_characters: bool = False) -> Scope:
    """
    Create the scope variant for a value starting with ``char``.

    The character itself is not consumed; callers forward it afterwards.

    Args:
        char: First character of the value
        allow_control_characters: Inherited string tolerance flag

    Returns:
        ObjectScope for ``{``, ArrayScope for ``[``, LiteralScope otherwise
    """
    from basket_json.scopes.array import ArrayScope
    from basket_json.scopes.literal import LiteralScope
    from basket_json.scopes.object import ObjectScope

    if char == "{":
        return ObjectScope(allow_control_characters)
    if char == "[":
        return ArrayScope(allow_control_characters)
    return LiteralScope(allow_control_characters)


__all__ = [
    "Scope",
    "open_scope",
    "is_whitespace",
]
