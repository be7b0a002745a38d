"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Sample raw messages
- Settings overrides
- Parsed documents
"""

import os

import pytest

from mailparts.config import Settings
from mailparts.parsing import parse_message
from .fixtures.emails import SAMPLE_EMAILS


@pytest.fixture
def test_settings() -> Settings:
    """
    Create settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="DEBUG",
        log_json=False,  # Easier to read in tests
        hash_algorithm="sha1",
        max_nesting_depth=50,
    )


@pytest.fixture
def minimal_eml() -> str:
    """Single-part message whose envelope line is a From header."""
    return SAMPLE_EMAILS["minimal"]


@pytest.fixture
def plain_text_eml() -> str:
    """Plain text message with an mbox envelope."""
    return SAMPLE_EMAILS["plain_text"]


@pytest.fixture
def folded_headers_eml() -> str:
    """Message with folded Received and Subject headers."""
    return SAMPLE_EMAILS["folded_headers"]


@pytest.fixture
def multipart_alternative_eml() -> str:
    """multipart/alternative with plain text and HTML parts."""
    return SAMPLE_EMAILS["multipart_alternative"]


@pytest.fixture
def nested_multipart_eml() -> str:
    """multipart/mixed wrapping a multipart/alternative and an attachment."""
    return SAMPLE_EMAILS["nested_multipart"]


@pytest.fixture
def multipart_document(multipart_alternative_eml):
    """Parsed multipart/alternative message."""
    return parse_message(multipart_alternative_eml)


@pytest.fixture
def nested_document(nested_multipart_eml):
    """Parsed nested multipart message."""
    return parse_message(nested_multipart_eml)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
