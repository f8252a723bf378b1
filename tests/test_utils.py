"""
Unit tests for utility functions.

Tests the partial JSON compatibility helpers.
"""

import pytest

from basket_json.utils.json_parsing import parse_partial_json


class TestJsonParsing:
    """Tests for JSON parsing utilities."""

    def test_complete_json(self):
        """Test parsing complete JSON."""
        result = parse_partial_json('{"name": "test", "value": 123}')
        assert result == {"name": "test", "value": 123}

    def test_incomplete_object(self):
        """Test parsing incomplete object."""
        result = parse_partial_json('{"name": "test"')
        assert result == {"name": "test"}

    def test_incomplete_array(self):
        """Test parsing incomplete array."""
        result = parse_partial_json('{"items": [1, 2, 3')
        assert result == {"items": [1, 2, 3]}

    def test_incomplete_string(self):
        """Test parsing incomplete string value."""
        result = parse_partial_json('{"status": "pend')
        assert result == {"status": "pend"}

    def test_nested_incomplete(self):
        """Test parsing nested incomplete JSON."""
        result = parse_partial_json('{"outer": {"inner": "value"')
        assert result == {"outer": {"inner": "value"}}

    def test_pending_value(self):
        """Test a key without a value maps to None."""
        assert parse_partial_json('{"status":') == {"status": None}

    def test_trailing_text_ignored(self):
        """Test text after a complete object is ignored."""
        assert parse_partial_json('{"a": 1} and some chatter') == {"a": 1}

    def test_completely_invalid(self):
        """Test completely invalid JSON returns empty dict."""
        result = parse_partial_json('not json at all')
        assert result == {}

    def test_non_object(self):
        """Test a top-level array returns empty dict."""
        assert parse_partial_json("[1, 2]") == {}

    def test_empty_string(self):
        """Test empty string returns empty dict."""
        result = parse_partial_json('')
        assert result == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
