"""Conversation state and the interactive loop."""

from gpt_repl.session.history import ConversationHistory
from gpt_repl.session.repl import DEFAULT_SYSTEM_PROMPT, MAX_INPUT_CHARS, ChatSession

__all__ = ["ChatSession", "ConversationHistory", "DEFAULT_SYSTEM_PROMPT", "MAX_INPUT_CHARS"]
