"""
Core types for basket-json.

Defines the dynamic value type produced by the parser and the Pydantic
options model shared by the parser and every scope it creates.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


# Value produced by a scope: the subset of Python types the json module emits,
# with every number reported as a float.
JsonValue = Union[None, bool, float, str, List[Any], Dict[str, Any]]


class TrailingPolicy(str, Enum):
    """What the parser does with characters that arrive after completion."""
    REJECT = "reject"
    IGNORE = "ignore"


class ParserOptions(BaseModel):
    """Immutable parser configuration, inherited by all descendant scopes."""

    trailing: TrailingPolicy = Field(
        TrailingPolicy.REJECT,
        description="Non-whitespace after completion is an error (reject) or dropped (ignore)",
    )
    allow_control_characters: bool = Field(
        False,
        description="Keep raw newline/CR/tab inside strings instead of refusing them",
    )
    validate_required_fields: bool = Field(
        False,
        description="Typed conversion reports absent required fields instead of filling None",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def ignore_trailing(self) -> bool:
        return self.trailing == TrailingPolicy.IGNORE


__all__ = [
    "JsonValue",
    "TrailingPolicy",
    "ParserOptions",
]
