"""
Shared fixtures for embedding function tests.
"""

from unittest.mock import MagicMock

import pytest


def whole_text_splitter(text: str) -> list[str]:
    return [text]


@pytest.fixture
def valid_config():
    """Complete, valid raw configuration."""
    return {
        "service_url": "https://example.com/embeddings",
        "model": "text-embedding-3-large",
        "encoding_format": "float",
        "chunk_size": 64,
        "chunk_overlap": 10,
        "chunk_strategy": "token",
        "splitter": whole_text_splitter,
    }


def make_response(
    embeddings: list[list[float]] | None = None,
    status_code: int = 200,
    reason_phrase: str = "OK",
) -> MagicMock:
    """Build a fake httpx.Response-like object."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    response.is_success = 200 <= status_code < 300
    response.json.return_value = {
        "data": [{"embedding": embedding} for embedding in (embeddings or [])]
    }
    return response


@pytest.fixture(name="make_response")
def make_response_fixture():
    """Factory fixture for fake HTTP responses."""
    return make_response
