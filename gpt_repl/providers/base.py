"""Chat-completion data types and the per-turn error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """A single message in the conversation transcript."""

    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ChatRequest:
    """Snapshot of what is sent for one turn."""

    model: str
    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }


@dataclass(frozen=True)
class ChatReply:
    """First choice extracted from a completion response."""

    message: ChatMessage
    finish_reason: str = ""


class ResponseMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str = ""
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, value: Any) -> Any:
        # Tool-call replies carry a null content.
        return "" if value is None else value


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ResponseMessage = Field(default_factory=ResponseMessage)
    finish_reason: str | None = ""


class ChatCompletionResponse(BaseModel):
    """Subset of the `/chat/completions` response body that is consumed."""

    model_config = ConfigDict(extra="ignore")

    choices: list[Choice] = Field(default_factory=list)


class ChatAPIError(Exception):
    """Base class for failures that abort a single turn."""


class RequestEncodeError(ChatAPIError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to marshal request: {cause}")
        self.cause = cause


class RequestBuildError(ChatAPIError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to create request: {cause}")
        self.cause = cause


class TransportError(ChatAPIError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Request failed: {cause}")
        self.cause = cause


class APIStatusError(ChatAPIError):
    """Non-200 response. The body is kept verbatim as diagnostic text."""

    def __init__(self, status_code: int, status: str, body: str) -> None:
        super().__init__(f"API error: {status}\n{body}")
        self.status_code = status_code
        self.status = status
        self.body = body


class ResponseDecodeError(ChatAPIError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to decode response: {cause}")
        self.cause = cause


class EmptyChoicesError(ChatAPIError):
    def __init__(self) -> None:
        super().__init__("No choices returned from API.")
