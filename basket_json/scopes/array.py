"""
Array scope.
"""

from enum import Enum
from typing import List, Optional

from basket_json.scopes.base import Scope, is_whitespace
from basket_json.types import JsonValue


class ArrayState(str, Enum):
    VALUE = "value"
    SEPARATOR = "separator"


class ArrayScope(Scope):
    """
    Scope for ``[...]``.

    Elements are appended the moment their first character is seen and are
    never removed, so a truncated element still shows up in the value.
    """

    def __init__(self, allow_control_characters: bool = False):
        super().__init__(allow_control_characters)
        self._items: List[Scope] = []
        self._state = ArrayState.VALUE
        self._open: Optional[Scope] = None
        self._started = False

    @property
    def state(self) -> ArrayState:
        return self._state

    @property
    def items(self) -> List[Scope]:
        return list(self._items)

    def write(self, char: str) -> bool:
        if self._finished:
            return False

        if not self._started:
            self._started = True
            if char == "[":
                return True

        if self._state == ArrayState.VALUE:
            if self._open is None:
                return self._start_item(char)
            return self._write_item(char)

        if is_whitespace(char):
            return True
        if char == ",":
            self._state = ArrayState.VALUE
            self._open = None
            return True
        if char == "]":
            self._finished = True
            return True
        return False

    def _start_item(self, char: str) -> bool:
        if is_whitespace(char):
            return True
        if char == "]":
            self._finished = True
            return True

        self._open = self.spawn(char)
        self._items.append(self._open)
        return self._open.write(char)

    def _write_item(self, char: str) -> bool:
        if self._open.write(char):
            if self._open.finished:
                self._state = ArrayState.SEPARATOR
            return True

        if char == ",":
            self._open = None
        elif char == "]":
            self._finished = True
        # Anything else is a stray character after an element that can't
        # terminate itself (a number); drop it
        return True

    def assume(self) -> JsonValue:
        return [item.assume() for item in self._items]


__all__ = ["ArrayScope", "ArrayState"]
