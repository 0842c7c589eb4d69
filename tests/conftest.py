"""Shared pytest fixtures for search controller tests."""

from __future__ import annotations

import json

import pytest
import structlog

from itunes_search.config import SearchSettings


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> SearchSettings:
    return SearchSettings(base_url="https://itunes.apple.com/search")


@pytest.fixture
def envelope_payload() -> dict:
    return {
        "resultCount": 3,
        "results": [
            {"trackName": "One More Time", "artistName": "Daft Punk", "trackId": 1},
            {"trackName": "Around the World", "artistName": "Daft Punk", "trackId": 2},
            {"trackName": "Digital Love", "artistName": "Daft Punk", "trackId": 3},
        ],
    }


@pytest.fixture
def envelope_bytes(envelope_payload) -> bytes:
    return json.dumps(envelope_payload).encode("utf-8")
