"""Built-in Messages API httpx client with tenacity retry.

Provides a sync HTTP client for the Anthropic Messages API.
Reads configuration from constructor arguments or environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import httpx
import tenacity

from zsmith.llm.errors import (
    LLMAuthError,
    LLMConfigError,
    LLMOverloadedError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTransportError,
)
from zsmith.llm.models import ClaudeModel

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.anthropic.com"
DEFAULT_MAX_TOKENS = 4000

_API_KEY_ENV_VARS = ("ZSMITH_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY")
_VERSION_ENV_VARS = ("ZSMITH_ANTHROPIC_VERSION", "ANTHROPIC_VERSION")
_BASE_URL_ENV_VAR = "ZSMITH_BASE_URL"
_MODEL_ENV_VAR = "ZSMITH_MODEL"

_OVERLOADED_STATUS_CODE = 529
_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504, _OVERLOADED_STATUS_CODE}
_AUTH_ERROR_STATUS_CODES = {401, 403}


def _first_env(names: tuple[str, ...]) -> str:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return ""


def _is_retryable(exc: BaseException) -> bool:
    """Check if an exception is retryable.

    Retryable: 429, 500, 502, 503, 504, 529, connection errors.
    Not retryable: 401, 403, 400, other client errors.
    """
    if isinstance(exc, LLMAuthError):
        return False
    if isinstance(exc, (LLMRateLimitError, LLMOverloadedError)):
        return True
    if isinstance(exc, LLMResponseError):
        return exc.status_code in _RETRYABLE_STATUS_CODES
    return isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout))


class ClaudeClient:
    """Sync httpx client for the Messages API.

    Implements the LLMClient protocol. Supports retry with exponential
    backoff for transient errors (429, 5xx, 529). Fails immediately on
    authentication errors (401, 403).

    Usage::

        with ClaudeClient(api_key="sk-ant-...", anthropic_version="2023-06-01") as client:
            response = client.complete("Be brief.", "Hello")
            text = ClaudeClient.extract_text(response)
    """

    def __init__(
        self,
        api_key: str | None = None,
        anthropic_version: str | None = None,
        model: str | ClaudeModel | None = None,
        base_url: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float = 120.0,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key. Falls back to ZSMITH_ANTHROPIC_API_KEY, then
                ANTHROPIC_API_KEY.
            anthropic_version: Value of the ``anthropic-version`` header. Falls
                back to ZSMITH_ANTHROPIC_VERSION, then ANTHROPIC_VERSION.
            model: Model or partial model name (e.g. "sonnet"). Falls back to
                ZSMITH_MODEL, then to the default model.
            base_url: API base URL. Falls back to ZSMITH_BASE_URL env var,
                then to https://api.anthropic.com.
            max_tokens: Maximum tokens the model may generate per request.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of attempts for retryable errors.
            transport: Optional httpx transport (used by tests).

        Raises:
            LLMConfigError: If no API key or API version is configured.
        """
        self._api_key = api_key or _first_env(_API_KEY_ENV_VARS)
        if not self._api_key:
            raise LLMConfigError(
                "No API key provided. Pass api_key= or set ZSMITH_ANTHROPIC_API_KEY "
                "(or ANTHROPIC_API_KEY) environment variable."
            )
        self._version = anthropic_version or _first_env(_VERSION_ENV_VARS)
        if not self._version:
            raise LLMConfigError(
                "No API version provided. Pass anthropic_version= or set "
                "ZSMITH_ANTHROPIC_VERSION (or ANTHROPIC_VERSION) environment variable."
            )
        self._base_url = (
            base_url or os.environ.get(_BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
        ).rstrip("/")
        self._model = self._select_model(model)
        self._max_tokens = max_tokens
        self._max_retries = max_retries
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={
                "content-type": "application/json",
                "x-api-key": self._api_key,
                "anthropic-version": self._version,
            },
        )
        logger.info("using claude model: %s", self._model.value)

    @staticmethod
    def _select_model(model: str | ClaudeModel | None) -> ClaudeModel:
        if isinstance(model, ClaudeModel):
            return model
        requested = model or os.environ.get(_MODEL_ENV_VAR)
        selected = ClaudeModel.from_partial(requested)
        if selected is None:
            if requested:
                logger.warning(
                    "No model matches %r, falling back to %s",
                    requested,
                    ClaudeModel.resolve(None).value,
                )
            selected = ClaudeModel.resolve(None)
        return selected

    @property
    def model(self) -> ClaudeModel:
        return self._model

    def chat(
        self,
        system: str,
        messages: list[dict],
        tools: list[dict] | None = None,
        *,
        temperature: float | None = None,
    ) -> dict:
        """Send a Messages request with retry.

        Args:
            system: System prompt.
            messages: Serialized conversation.
            tools: Tool definitions. Omitted from the payload when empty.
            temperature: Sampling temperature.

        Returns:
            Response dict with 'content', 'stop_reason', 'usage', etc.

        Raises:
            LLMAuthError: On 401/403 (no retry).
            LLMRateLimitError: On 429 after all retries exhausted.
            LLMOverloadedError: On 529 after all retries exhausted.
            LLMResponseError: On other non-success status or malformed body.
            LLMTransportError: When no response could be obtained.
        """
        payload: dict[str, Any] = {
            "model": self._model.value,
            "max_tokens": self._max_tokens,
            "system": system,
            "messages": messages,
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if tools:
            payload["tools"] = tools
        return self._send(payload)

    def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float | None = None,
    ) -> dict:
        """Single-shot prompt without tools or prior conversation."""
        return self.chat(
            system,
            [{"role": "user", "content": user}],
            temperature=temperature,
        )

    def _send(self, payload: dict[str, Any]) -> dict:
        """Post with retry; the attempt limit comes from ``max_retries``."""
        logger.debug("request payload: %s", json.dumps(payload))
        retryer = tenacity.Retrying(
            retry=tenacity.retry_if_exception(_is_retryable),
            wait=(
                tenacity.wait_exponential(multiplier=1, min=1, max=30)
                + tenacity.wait_random(0, 2)
            ),
            stop=tenacity.stop_after_attempt(self._max_retries),
            before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        try:
            return retryer(self._do_post, payload)
        except httpx.TransportError as exc:
            raise LLMTransportError(
                f"Cannot communicate with {self._base_url}: {exc}"
            ) from exc

    def _do_post(self, payload: dict[str, Any]) -> dict:
        """Execute a single request (no retry)."""
        response = self._client.post(f"{self._base_url}/v1/messages", json=payload)
        status = response.status_code

        if status in _AUTH_ERROR_STATUS_CODES:
            raise LLMAuthError(
                f"Authentication failed: HTTP {status} - {response.text}"
            )

        if status == 429:
            retry_after_raw = response.headers.get("retry-after")
            retry_after: float | None = None
            if retry_after_raw is not None:
                try:
                    retry_after = float(retry_after_raw)
                except (ValueError, TypeError):
                    pass
            raise LLMRateLimitError(
                f"Rate limited: HTTP 429 - {response.text}",
                retry_after=retry_after,
            )

        if status == _OVERLOADED_STATUS_CODE:
            logger.warning(
                "model provider is overloaded, please try again later: %s",
                response.text,
            )
            raise LLMOverloadedError(f"Overloaded: HTTP 529 - {response.text}")

        if response.is_error:
            raise LLMResponseError(
                f"Request failed: HTTP {status} - {response.text}",
                status_code=status,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMResponseError(
                f"Response body is not JSON: {response.text[:200]}"
            ) from exc
        if not isinstance(data, dict) or "content" not in data:
            raise LLMResponseError(
                f"Unexpected response format: missing 'content' key. "
                f"Response: {data}"
            )
        logger.debug("response: %s", data)
        return data

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> ClaudeClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @staticmethod
    def extract_text(response: dict) -> str:
        """Join the text blocks of a response dict with newlines.

        Raises:
            LLMResponseError: If the response has no content list.
        """
        content = response.get("content") if isinstance(response, dict) else None
        if not isinstance(content, list):
            raise LLMResponseError(
                f"Cannot extract text from response: {response}"
            )
        return "\n".join(
            block.get("text", "")
            for block in content
            if isinstance(block, dict) and block.get("type") == "text"
        )
