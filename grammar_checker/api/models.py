"""Gemini generateContent request and response dataclasses.

WHY: The correction service returns nested JSON
(``candidates[0].content.parts[0].text``). Typed dataclasses make the
one path we care about explicit and turn a missing field into a clear
error instead of a KeyError deep inside the client.

HOW: GenerateContentRequest builds the request body for one prompt.
GenerateContentResponse.from_dict walks the response and raises
ValueError when the expected text part is absent.

RULES:
- Only the first candidate and its first part are used
- A response without text (blocked prompt, empty candidates) is invalid
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class GenerateContentRequest:
    """Request body for ``models/{model}:generateContent``."""

    prompt: str

    def to_dict(self) -> dict:
        return {"contents": [{"parts": [{"text": self.prompt}]}]}


@dataclass
class GenerateContentResponse:
    """The part of a generateContent response the checker consumes.

    RULES:
    - text is the first candidate's first part, stripped of surrounding
      whitespace
    - finish_reason is informational and may be None
    """

    text: str
    finish_reason: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> GenerateContentResponse:
        """Parse a generateContent response dict.

        Raises:
            ValueError: If the response has no candidate text.
        """
        try:
            candidate = data["candidates"][0]
            text = candidate["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ValueError("Unexpected Gemini API response.") from exc

        if not isinstance(text, str) or not text.strip():
            raise ValueError("Unexpected Gemini API response.")

        return cls(text=text.strip(), finish_reason=candidate.get("finishReason"))
