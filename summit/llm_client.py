"""Abstractions for communicating with chat-based language models."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import List

import openai
import structlog

from . import config
from .exceptions import SummarizationError
from .http_utils import get_client

logger = structlog.get_logger(__name__)


class LLMClient(ABC):
    """Generic interface for chat-based language models."""

    def chat(self, messages: List[dict], model: str) -> str:
        """Return the assistant reply, logging latency and token counts.

        A reply without content is returned as an empty string.
        """

        start = time.perf_counter()
        reply = self._chat(messages, model)
        duration = time.perf_counter() - start
        if reply is None:
            reply = ""
        tokens = self._count_tokens(messages)
        tokens += self._count_tokens([{"role": "assistant", "content": reply}])
        logger.info(
            "llm_chat",
            model=model,
            latency=duration,
            tokens=tokens,
        )
        return reply

    @abstractmethod
    def _chat(self, messages: List[dict], model: str) -> str | None:
        """Implement provider-specific chat call."""
        raise NotImplementedError

    @staticmethod
    def _count_tokens(messages: List[dict]) -> int:
        """Approximate the number of tokens in a list of messages."""

        return sum(len((m.get("content") or "").split()) for m in messages)


class OpenAIClient(LLMClient):
    """Client for the OpenAI chat completion API.

    Each call is a single request; the SDK's own retries are disabled.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key or config.settings.openai_api_key
        self.base_url = base_url or config.settings.openai_base_url
        self.timeout = timeout if timeout is not None else config.settings.request_timeout
        self._client: openai.OpenAI | None = None

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
                http_client=get_client(self.timeout),
            )
        return self._client

    def _chat(self, messages: List[dict], model: str) -> str | None:
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=messages,
            )
        except openai.OpenAIError as exc:
            raise SummarizationError(f"OpenAI request failed: {exc}") from exc
        try:
            return resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise SummarizationError("Malformed OpenAI response") from exc
