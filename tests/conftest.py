from unittest.mock import Mock, patch

import pytest

from app import create_app
from limiter import limiter


def gemini_response(text):
    """Mock of a successful requests.Response carrying Gemini JSON."""
    resp = Mock()
    resp.status_code = 200
    resp.raise_for_status.return_value = None
    resp.json.return_value = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    return resp


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "GEMINI_API_KEY": "test-key",
        "GENERATE_RATE_LIMIT": "10 per 10 minutes",
        "RATELIMIT_STORAGE_URI": "memory://",
        "RATELIMIT_ENABLED": True,
    })
    yield app
    limiter.reset()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mock_post():
    with patch("gemini_client.requests.post") as post:
        post.return_value = gemini_response("")
        yield post
