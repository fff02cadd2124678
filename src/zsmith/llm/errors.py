"""LLM-specific error hierarchy.

All LLM errors inherit from ZSmithError for consistent exception handling.
"""

from __future__ import annotations

from zsmith.exceptions import ZSmithError


class LLMClientError(ZSmithError):
    """Base for all LLM client errors."""


class LLMConfigError(LLMClientError):
    """Missing or invalid LLM configuration (e.g., no API key or version)."""


class LLMRateLimitError(LLMClientError):
    """HTTP 429 from the Messages API.

    Attributes:
        retry_after: Value of the retry-after header in seconds, or None when
            the provider sent none.
    """

    def __init__(self, message: str = "Rate limited", retry_after: float | None = None) -> None:
        self.retry_after = retry_after
        if retry_after is not None:
            message = f"{message} (retry after {retry_after}s)"
        super().__init__(message)


class LLMOverloadedError(LLMClientError):
    """The provider is temporarily overloaded (529)."""


class LLMAuthError(LLMClientError):
    """Authentication failed (401/403)."""


class LLMResponseError(LLMClientError):
    """Non-success status or unexpected response format from the API.

    Attributes:
        status_code: HTTP status, or None when the body was malformed.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class LLMTransportError(LLMClientError):
    """The request never produced a response (connection, timeout)."""
