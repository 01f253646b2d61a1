"""OpenAI-compatible `/chat/completions` provider."""

from __future__ import annotations

import json
from typing import Sequence

import httpx
from loguru import logger
from pydantic import ValidationError

from gpt_repl.providers.base import (
    APIStatusError,
    ChatCompletionResponse,
    ChatMessage,
    ChatReply,
    ChatRequest,
    EmptyChoicesError,
    RequestBuildError,
    RequestEncodeError,
    ResponseDecodeError,
    TransportError,
)

DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"


class OpenAICompatibleProvider:
    """
    Provider for OpenAI-style `/chat/completions` endpoints.

    Each call opens its own client, so the response is read in full and
    released before `complete` returns. A `timeout_s` of None means the
    request may block indefinitely.
    """

    def __init__(
        self,
        api_key: str,
        api_base: str = DEFAULT_API_BASE,
        model: str = DEFAULT_MODEL,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.model = model
        self.timeout_s = timeout_s
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/chat/completions"

    def build_request(self, messages: Sequence[ChatMessage]) -> ChatRequest:
        return ChatRequest(model=self.model, messages=tuple(messages))

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def complete(self, messages: Sequence[ChatMessage]) -> ChatReply:
        """
        Send the full message sequence and return the first choice.

        Raises:
            ChatAPIError: a subclass describing which step of the exchange failed.
        """
        chat_request = self.build_request(messages)

        try:
            body = json.dumps(chat_request.to_payload(), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestEncodeError(exc) from exc

        logger.debug(
            f"LLM request: model={chat_request.model}, endpoint={self.endpoint}, "
            f"messages={len(chat_request.messages)}"
        )

        async with httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport) as client:
            try:
                request = client.build_request(
                    "POST", self.endpoint, headers=self._headers(), content=body
                )
            except (httpx.InvalidURL, ValueError) as exc:
                raise RequestBuildError(exc) from exc

            try:
                resp = await client.send(request)
            except httpx.RequestError as exc:
                raise TransportError(exc) from exc

        if resp.status_code != httpx.codes.OK:
            status = f"{resp.status_code} {resp.reason_phrase}".strip()
            logger.debug(f"LLM response status: {status}")
            raise APIStatusError(resp.status_code, status, resp.text)

        return self._parse_response(resp.content)

    def _parse_response(self, content: bytes) -> ChatReply:
        try:
            data = ChatCompletionResponse.model_validate_json(content)
        except ValidationError as exc:
            raise ResponseDecodeError(exc) from exc

        if not data.choices:
            raise EmptyChoicesError()

        choice = data.choices[0]
        finish_reason = choice.finish_reason or ""
        if finish_reason == "length":
            logger.debug("LLM reply was cut off by the token limit")

        return ChatReply(
            message=ChatMessage(role=choice.message.role, content=choice.message.content),
            finish_reason=finish_reason,
        )
