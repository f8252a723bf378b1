"""
Scope implementations for incremental JSON parsing.
"""

from basket_json.scopes.base import Scope, is_whitespace, open_scope
from basket_json.scopes.literal import LiteralScope, repair_string
from basket_json.scopes.array import ArrayScope, ArrayState
from basket_json.scopes.object import ObjectScope, ObjectState

__all__ = [
    "Scope",
    "open_scope",
    "is_whitespace",
    "LiteralScope",
    "repair_string",
    "ArrayScope",
    "ArrayState",
    "ObjectScope",
    "ObjectState",
]
