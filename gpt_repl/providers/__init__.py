"""LLM providers module."""

from gpt_repl.providers.base import (
    APIStatusError,
    ChatAPIError,
    ChatMessage,
    ChatReply,
    ChatRequest,
    EmptyChoicesError,
    RequestBuildError,
    RequestEncodeError,
    ResponseDecodeError,
    TransportError,
)
from gpt_repl.providers.openai_provider import OpenAICompatibleProvider

__all__ = [
    "APIStatusError",
    "ChatAPIError",
    "ChatMessage",
    "ChatReply",
    "ChatRequest",
    "EmptyChoicesError",
    "OpenAICompatibleProvider",
    "RequestBuildError",
    "RequestEncodeError",
    "ResponseDecodeError",
    "TransportError",
]
