"""Async HTTP client for the Gemini grammar-correction call.

WHY: The checker delegates correction to a generative-text model. This
module encapsulates that one request behind a client class so callers
(CLI, server, tests) don't need to know URLs, auth, or response shapes,
and so every failure surfaces as a single typed UpstreamError.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. GeminiClient is an
async context manager — enter it to open a connection pool, exit to
close it. correct_text() builds the prompt, POSTs it to
``/models/{model}:generateContent`` with the key as a query parameter,
and parses the first candidate's text.

RULES:
- Always use the async context manager (async with GeminiClient() as c:)
- api_key defaults to load_api_key() (raises ConfigurationError)
- Non-2xx responses raise UpstreamError with the status code
- Transport failures (timeouts, DNS, resets) raise UpstreamError with
  status_code=None
- Responses without candidate text raise UpstreamError
- The API key never appears in log messages
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from grammar_checker.api.models import GenerateContentRequest, GenerateContentResponse
from grammar_checker.config import (
    CORRECTION_PROMPT,
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    GEMINI_TIMEOUT_S,
    load_api_key,
)
from grammar_checker.errors import UpstreamError

logger = logging.getLogger(__name__)


def build_prompt(text: str) -> str:
    """Wrap user text in the correction instruction."""
    return CORRECTION_PROMPT.format(text=text)


class GeminiClient:
    """Async client for Gemini's generateContent endpoint.

    RULES:
    - Use as: async with GeminiClient() as client: ...
    - base_url defaults to GEMINI_BASE_URL, model to GEMINI_MODEL
    - transport is for tests (httpx.MockTransport); None in production
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key or load_api_key()
        self._base_url = (base_url or GEMINI_BASE_URL).rstrip("/")
        self._model = model or GEMINI_MODEL
        self._timeout = timeout if timeout is not None else GEMINI_TIMEOUT_S
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def model(self) -> str:
        return self._model

    async def __aenter__(self) -> GeminiClient:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(self._timeout, connect=10.0),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "GeminiClient must be used as an async context manager: "
                "async with GeminiClient() as client: ..."
            )
        return self._client

    async def correct_text(
        self,
        text: str,
        on_status: Callable[[str], None] | None = None,
    ) -> str:
        """Ask the model for a grammatically corrected version of ``text``.

        WHY: This is the only call the checker makes to the outside
        world. Everything downstream (diffing, reports) is pure.

        HOW: Sends one generateContent request and returns the stripped
        text of the first candidate.

        Args:
            text: The user's original text.
            on_status: Optional callback for status updates.

        Returns:
            The corrected text.

        Raises:
            UpstreamError: On transport failure, non-2xx status, or an
                unexpected response body.
        """
        client = self._ensure_client()
        if on_status:
            on_status("Requesting correction from {}...".format(self._model))

        body = GenerateContentRequest(prompt=build_prompt(text)).to_dict()
        try:
            resp = await client.post(
                "/models/{}:generateContent".format(self._model),
                params={"key": self._api_key},
                json=body,
            )
        except httpx.HTTPError as exc:
            logger.warning("Correction request failed: %s", type(exc).__name__)
            raise UpstreamError(
                "Failed to reach the correction service ({})".format(type(exc).__name__)
            ) from exc

        if resp.status_code != 200:
            logger.warning("Correction service returned HTTP %s", resp.status_code)
            raise UpstreamError(resp.text, status_code=resp.status_code)

        try:
            parsed = GenerateContentResponse.from_dict(resp.json())
        except ValueError as exc:
            # resp.json() raises a ValueError subclass on non-JSON bodies too
            raise UpstreamError(str(exc), status_code=resp.status_code) from exc

        if on_status:
            on_status("Correction received ({} chars).".format(len(parsed.text)))
        return parsed.text
