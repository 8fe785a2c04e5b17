"""Typed errors for the glue layers around the diff core.

WHY: The diff core is pure and cannot fail on valid strings, but the
surrounding system can: the API key may be missing, the correction
service may be unreachable or answer with garbage, and callers may send
empty or oversized input. The CLI and HTTP server need to tell these
apart to pick an exit code or status code.

RULES:
- ConfigurationError and ValidationError subclass ValueError so generic
  ``except ValueError`` handlers keep working
- UpstreamError carries the HTTP status (None for transport failures)
"""

from __future__ import annotations

from typing import Optional


class GrammarCheckerError(Exception):
    """Base class for all grammar_checker errors."""


class ConfigurationError(GrammarCheckerError, ValueError):
    """Raised when required configuration (e.g. the API key) is missing."""


class ValidationError(GrammarCheckerError, ValueError):
    """Raised when caller input is rejected before any work is done."""


class UpstreamError(GrammarCheckerError):
    """Raised when the correction service fails or answers unexpectedly.

    RULES:
    - status_code is the upstream HTTP status, or None when no response
      was received (DNS failure, timeout, connection reset)
    - message is the response body or a short summary
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__("Correction service error: {}".format(message))
        else:
            super().__init__(
                "Correction service error {}: {}".format(status_code, message)
            )
