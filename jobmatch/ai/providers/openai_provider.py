from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Sequence

import openai
from openai import AsyncOpenAI

from jobmatch.ai.config import AIConfig
from jobmatch.ai.retry import Sleep, exponential_backoff, retry_async
from jobmatch.ai.types import ChatMessage
from jobmatch.core.errors import (
    ConfigurationError,
    LLMAuthError,
    LLMBadRequestError,
    LLMRetryExhaustedError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503})


def status_code_of(exc: BaseException) -> int | None:
    if isinstance(exc, openai.APIStatusError):
        return exc.status_code
    return None


def is_retryable_error(exc: BaseException) -> bool:
    return status_code_of(exc) in RETRYABLE_STATUS_CODES


def _retry_exhausted(attempts: int, last_error: BaseException) -> LLMRetryExhaustedError:
    return LLMRetryExhaustedError(
        f"OpenAI API call failed after {attempts} attempts: {last_error}",
        attempts=attempts,
        last_error=last_error,
    )


class OpenAIProvider:
    """Chat-completion client in JSON-object mode with status-aware retries.

    The SDK's own retry loop is disabled so that 429/500/502/503 are retried
    here on a fixed exponential schedule, while 401/400 surface at once.
    """

    def __init__(
        self,
        config: AIConfig,
        client: Optional[Any] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self._config = config
        self._client = client
        self._sleep = sleep

    @property
    def model(self) -> str:
        return self._config.model

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                timeout=self._config.timeout_s,
                max_retries=0,
            )
        return self._client

    async def aclose(self) -> None:
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()
        self._client = None

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float,
        max_tokens: int | None = None,
        model: str | None = None,
    ) -> str:
        if not self._config.api_key:
            raise ConfigurationError("OPENAI_API_KEY is not configured")

        create_kwargs: dict[str, Any] = {
            "model": model or self._config.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": temperature,
            "response_format": {"type": "json_object"},
        }
        if max_tokens:
            create_kwargs["max_tokens"] = max_tokens

        client = self._get_client()

        async def attempt() -> str:
            try:
                response = await client.chat.completions.create(**create_kwargs)
            except openai.APIStatusError as exc:
                if exc.status_code == 401:
                    logger.warning("completion_auth_failed model=%s", create_kwargs["model"])
                    raise LLMAuthError("Invalid OpenAI API key") from exc
                if exc.status_code == 400:
                    logger.warning("completion_bad_request model=%s: %s", create_kwargs["model"], exc)
                    raise LLMBadRequestError("Invalid request to OpenAI API") from exc
                raise
            return _first_choice_content(response)

        return await retry_async(
            attempt,
            is_retryable=is_retryable_error,
            attempts=self._config.max_attempts,
            backoff=exponential_backoff(self._config.retry_base_ms),
            on_exhausted=_retry_exhausted,
            sleep=self._sleep,
            label="completion",
        )


def _first_choice_content(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    content = None
    if choices:
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
    if not content:
        raise MalformedResponseError("Empty response from OpenAI API")
    return content
