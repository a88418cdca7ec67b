from __future__ import annotations

import logging
from typing import Protocol

import requests

log = logging.getLogger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class TextGenerationError(Exception):
    """The text generation service failed or returned nothing usable."""


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str:
        raise NotImplementedError


class GeminiTextGenerator(TextGenerator):
    """Calls the Gemini `generateContent` REST endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gemini-2.5-flash",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._session = session or requests.Session()

    def generate(self, prompt: str) -> str:
        try:
            resp = self._session.post(
                GEMINI_ENDPOINT.format(model=self._model),
                headers={"x-goog-api-key": self._api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise TextGenerationError(str(e)) from e

        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            log.warning("unexpected Gemini response shape: %s", list(data) if isinstance(data, dict) else type(data))
            raise TextGenerationError("empty response from text generation service")

        return "".join(p.get("text", "") for p in parts)
