"""Pytest configuration and shared fixtures."""

import io
import pytest
import tempfile
from pathlib import Path
from unittest.mock import Mock

import requests
from rich.console import Console

from igslurp.core import InstagramApiClient
from igslurp.formatters import OutputContext
from igslurp.storage import AppConfig
from igslurp.utils import CourtesyDelay


def _make_response(payload, status_code=200):
    """Build a mock HTTP response returning ``payload`` as JSON."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def temp_config_dir():
    """Create temporary config directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_config_dir):
    """Create test configuration."""
    return AppConfig(
        config_dir=temp_config_dir / "config",
        log_dir=temp_config_dir / "logs",
        page_delay=0,
    )


@pytest.fixture
def mock_session():
    """Create mock HTTP session; set ``get.side_effect`` to queue responses."""
    session = Mock(spec=requests.Session)
    session.get.return_value = _make_response({})
    return session


@pytest.fixture
def api_client(test_config, mock_session):
    """API client wired to the mock session."""
    return InstagramApiClient("test-key", test_config, session=mock_session)


@pytest.fixture
def recording_delay():
    """Courtesy delay that records sleeps instead of sleeping."""
    sleeps = []
    delay = CourtesyDelay(0.5, sleep=sleeps.append)
    delay.sleeps = sleeps
    return delay


@pytest.fixture
def status_console():
    """Console writing to a buffer, for progress notices."""
    return Console(file=io.StringIO(), color_system=None, highlight=False)


@pytest.fixture
def output_context():
    """Output context writing plain text to buffers."""
    return OutputContext(
        out=Console(file=io.StringIO(), color_system=None, highlight=False, soft_wrap=True, emoji=False),
        status=Console(file=io.StringIO(), color_system=None, highlight=False, soft_wrap=True, emoji=False),
        color=False,
    )


@pytest.fixture
def raw_user():
    """User entry as returned in following/followers lists."""
    def _make(pk, username):
        return {
            "pk": pk,
            "username": username,
            "full_name": f"{username.title()} Name",
            "is_private": False,
            "is_verified": False,
            "follower_count": 1200,
        }
    return _make


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses."""
    return _make_response
