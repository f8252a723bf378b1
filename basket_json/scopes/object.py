"""
Object scope.

Keys are always string literals. A pair is committed into the finalized
mapping when its value finishes or when a separator cuts it short; until
then the in-progress pair is overlaid onto the value on demand.
"""

import copy
from enum import Enum
from typing import Dict, Optional

from basket_json.scopes.base import Scope, is_whitespace
from basket_json.scopes.literal import LiteralScope
from basket_json.types import JsonValue


class ObjectState(str, Enum):
    KEY = "key"
    COLON = "colon"
    VALUE = "value"
    SEPARATOR = "separator"


class ObjectScope(Scope):
    """Scope for ``{...}``."""

    def __init__(self, allow_control_characters: bool = False):
        super().__init__(allow_control_characters)
        self._object: Dict[str, JsonValue] = {}
        self._state = ObjectState.KEY
        self._key: Optional[LiteralScope] = None
        self._value: Optional[Scope] = None
        self._started = False

    @property
    def state(self) -> ObjectState:
        return self._state

    def write(self, char: str) -> bool:
        if self._finished:
            return False

        if not self._started:
            self._started = True
            if char == "{":
                return True

        if self._state == ObjectState.KEY:
            return self._write_key(char)

        if self._state == ObjectState.COLON:
            if is_whitespace(char):
                return True
            if char == ":":
                self._state = ObjectState.VALUE
                self._value = None
                return True
            return False

        if self._state == ObjectState.VALUE:
            return self._write_value(char)

        if is_whitespace(char):
            return True
        if char == ",":
            self._state = ObjectState.KEY
            self._key = None
            self._value = None
            return True
        if char == "}":
            self._finished = True
            return True
        return False

    def _write_key(self, char: str) -> bool:
        if self._key is None:
            if is_whitespace(char):
                return True
            if char == "}":
                self._finished = True
                return True
            if char == '"':
                self._key = LiteralScope(self.allow_control_characters)
                return self._key.write(char)
            return False

        # Characters the key refuses (raw control characters) are dropped
        self._key.write(char)
        if not self._key.finished:
            return True
        if isinstance(self._key.assume(), str):
            self._state = ObjectState.COLON
            return True
        return False

    def _write_value(self, char: str) -> bool:
        if self._value is None:
            if is_whitespace(char):
                return True
            self._value = self.spawn(char)
            return self._value.write(char)

        accepted = self._value.write(char)
        if self._value.finished:
            self._commit()
            self._state = ObjectState.SEPARATOR
            return True
        if accepted or is_whitespace(char):
            return True

        if char == ",":
            self._commit()
            self._state = ObjectState.KEY
            return True
        if char == "}":
            self._commit()
            self._finished = True
            return True
        return False

    def _commit(self) -> None:
        self._object[self._key.assume()] = self._value.assume()
        self._key = None
        self._value = None

    def assume(self) -> JsonValue:
        result = copy.deepcopy(self._object)
        if self._key is not None:
            key = self._key.assume()
            if isinstance(key, str) and key:
                result[key] = self._value.assume() if self._value is not None else None
        return result


__all__ = ["ObjectScope", "ObjectState"]
