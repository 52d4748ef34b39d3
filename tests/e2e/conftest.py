"""Pytest configuration and fixtures for E2E tests against live Google APIs.

Environment variable validation; tests skip when credentials or the sample
image are missing.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Register custom markers and load .env file."""
    config.addinivalue_line("markers", "e2e: mark test as end-to-end test")
    load_dotenv(Path(__file__).parent / ".env", override=True)


@pytest.fixture(scope="session")
def google_api_key() -> str:
    """Get the shared Google API key from environment.

    Raises:
        pytest.skip: If GOOGLE_API_KEY is not set
    """
    api_key = os.getenv("GOOGLE_API_KEY")
    if not api_key:
        pytest.skip("GOOGLE_API_KEY environment variable not set")
    return api_key


@pytest.fixture(scope="session")
def sample_image(google_api_key) -> bytes:  # noqa: ARG001
    """Read the image named by E2E_IMAGE_PATH.

    The image should contain at least one English word.
    """
    path = os.getenv("E2E_IMAGE_PATH")
    if not path or not Path(path).is_file():
        pytest.skip("E2E_IMAGE_PATH does not point to an image file")
    return Path(path).read_bytes()
