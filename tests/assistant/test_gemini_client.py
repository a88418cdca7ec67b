from __future__ import annotations

import pytest
import requests

from src.hr_portal.hr_portal.assistant.client import GeminiTextGenerator, TextGenerationError


class FakeResponse:
    def __init__(self, payload, status_error=None):
        self._payload = payload
        self._status_error = status_error

    def raise_for_status(self):
        if self._status_error:
            raise self._status_error

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_generate_joins_text_parts():
    session = FakeSession(
        FakeResponse({"candidates": [{"content": {"parts": [{"text": "Hello, "}, {"text": "Jane."}]}}]})
    )
    gen = GeminiTextGenerator("k-123", model="gemini-2.5-flash", timeout=7, session=session)

    assert gen.generate("hi") == "Hello, Jane."
    url, kwargs = session.calls[0]
    assert "gemini-2.5-flash:generateContent" in url
    assert kwargs["headers"]["x-goog-api-key"] == "k-123"
    assert kwargs["json"]["contents"][0]["parts"][0]["text"] == "hi"
    assert kwargs["timeout"] == 7


def test_transport_error_becomes_generation_error():
    gen = GeminiTextGenerator("k", session=FakeSession(error=requests.ConnectionError("no route")))

    with pytest.raises(TextGenerationError):
        gen.generate("hi")


def test_http_error_becomes_generation_error():
    response = FakeResponse({}, status_error=requests.HTTPError("429 Too Many Requests"))
    gen = GeminiTextGenerator("k", session=FakeSession(response))

    with pytest.raises(TextGenerationError):
        gen.generate("hi")


def test_unexpected_payload_becomes_generation_error():
    gen = GeminiTextGenerator("k", session=FakeSession(FakeResponse({"promptFeedback": {"blockReason": "SAFETY"}})))

    with pytest.raises(TextGenerationError):
        gen.generate("hi")
