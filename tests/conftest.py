"""
Pytest Configuration and Shared Test Fixtures

This module provides pytest configuration and reusable fixtures for all tests.
All fixtures defined here are automatically available to all test files.
"""

import os
import sys

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_fixtures.recording_transport import RecordingTransport  # noqa: E402


# ============================================================================
# Transport Doubles
# ============================================================================


@pytest.fixture
def recording_transport():
    """Transport double returning an empty label list by default."""
    return RecordingTransport()


# ============================================================================
# Settings
# ============================================================================


@pytest.fixture
def clean_settings(monkeypatch):
    """
    Reset the settings singleton around a test so environment overrides apply.
    """
    from prometheus_query.core.config import settings as settings_module

    for name in (
        "PROMETHEUS_URL",
        "PROMETHEUS_TIMEOUT",
        "PROMETHEUS_MAX_CONNECTIONS",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(settings_module, "_settings", None)
    yield
    monkeypatch.setattr(settings_module, "_settings", None)
