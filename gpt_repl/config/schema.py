"""Configuration schema using Pydantic."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Runtime settings for gpt-repl.

    The API key is deliberately absent: it is typed in at startup every run.
    """

    api_base: str = Field(default="https://api.openai.com/v1")
    model: str = Field(default="gpt-3.5-turbo")
    system_prompt: str = Field(default="You are a helpful assistant.")
    max_input_chars: int = Field(default=3000, gt=0, description="Length that triggers the long-input warning")
    request_timeout_s: float | None = Field(default=None, gt=0, description="None waits indefinitely")
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="GPT_REPL_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def endpoint(self) -> str:
        """Full chat-completions URL."""
        return f"{self.api_base.rstrip('/')}/chat/completions"
