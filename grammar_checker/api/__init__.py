"""Gemini API client package — async HTTP interface to the correction model.

WHY: Grammar correction is delegated to an external generative-text
service. This package keeps every detail of that service (URL, auth,
request and response shape) behind one async client class.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. Response data is
parsed into the typed dataclasses in models.py.

RULES:
- All outbound HTTP goes through GeminiClient (no direct httpx usage elsewhere)
- Authentication is via the ``key`` query parameter from config
"""

from grammar_checker.api.client import GeminiClient
from grammar_checker.api.models import GenerateContentRequest, GenerateContentResponse

__all__ = ["GeminiClient", "GenerateContentRequest", "GenerateContentResponse"]
