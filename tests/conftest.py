"""
Pytest configuration and shared fixtures for art_explorer tests.
"""

from unittest.mock import Mock

import pytest
import requests

from art_explorer.adapters.aic import AICAdapter


@pytest.fixture
def http_session():
    """requests.Session double; set `request.return_value` per test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def adapter(http_session):
    return AICAdapter(http_session=http_session)


@pytest.fixture
def log_lines(adapter):
    """Capture adapter log output as (level, message) tuples."""
    lines = []
    adapter.set_logger(lambda level, message: lines.append((level, message)))
    return lines
