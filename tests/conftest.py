"""Pytest configuration for basket-json tests."""

import pytest

from basket_json import IncompleteJsonParser


@pytest.fixture
def parser():
    """Provide a parser with default options."""
    return IncompleteJsonParser()


@pytest.fixture
def feed():
    """Write text into a scope character by character, returning the verdicts."""

    def _feed(scope, text):
        return [scope.write(char) for char in text]

    return _feed
