"""Shared fixtures; fake keys are set before main is imported so startup config succeeds."""

import os

import pytest
import requests

os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("YOUTUBE_API_KEY", "test-youtube-key")

from problem_helper.config import Settings  # noqa: E402


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-gemini-key", youtube_api_key="test-youtube-key")
