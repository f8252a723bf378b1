"""
Unit tests for basket-json types module.

Tests ParserOptions validation and immutability.
"""

import pytest
from pydantic import ValidationError

from basket_json.types import ParserOptions, TrailingPolicy


class TestParserOptions:
    """Tests for ParserOptions model."""

    def test_defaults(self):
        """Test default options."""
        options = ParserOptions()
        assert options.trailing == TrailingPolicy.REJECT
        assert options.allow_control_characters is False
        assert options.validate_required_fields is False
        assert options.ignore_trailing is False

    def test_from_dict(self):
        """Test building options from plain configuration data."""
        options = ParserOptions.model_validate({"trailing": "ignore", "allow_control_characters": True})
        assert options.trailing == TrailingPolicy.IGNORE
        assert options.ignore_trailing is True
        assert options.allow_control_characters is True

    def test_invalid_policy(self):
        """Test unknown trailing policies are rejected."""
        with pytest.raises(ValidationError):
            ParserOptions(trailing="drop")

    def test_frozen(self):
        """Test options cannot change after construction."""
        options = ParserOptions()
        with pytest.raises(ValidationError):
            options.allow_control_characters = True

    def test_serialization(self):
        """Test options round-trip through model_dump."""
        options = ParserOptions(trailing=TrailingPolicy.IGNORE)
        data = options.model_dump(mode="json")
        assert data["trailing"] == "ignore"
        assert ParserOptions(**data) == options


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
