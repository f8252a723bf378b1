"""
Utility functions for basket-json.
"""

from basket_json.utils.json_parsing import parse_partial_json

__all__ = [
    "parse_partial_json",
]
