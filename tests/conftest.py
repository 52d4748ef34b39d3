"""Pytest configuration and fixtures."""

import os
from unittest.mock import patch

import pytest

from lingualens.backends.types import Annotation


@pytest.fixture
def api_key():
    """Set a dummy shared Google API key."""
    with patch.dict(os.environ, {"GOOGLE_API_KEY": "test-key"}, clear=False):
        yield "test-key"


@pytest.fixture
def sample_annotations():
    """Hello / Korean greeting / World, in detection order."""
    return [
        Annotation(description="HELLO"),
        Annotation(description="안녕"),
        Annotation(description="WORLD"),
    ]
