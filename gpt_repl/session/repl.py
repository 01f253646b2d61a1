"""Interactive chat loop."""

from __future__ import annotations

import asyncio
from typing import Callable

from loguru import logger
from rich.console import Console
from rich.markup import escape

from gpt_repl.providers.base import ROLE_USER, ChatAPIError, ChatMessage
from gpt_repl.providers.openai_provider import OpenAICompatibleProvider
from gpt_repl.session.history import ConversationHistory
from gpt_repl.utils.helpers import format_error

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
MAX_INPUT_CHARS = 3000  # ~750 tokens

PROMPT = "[bold blue]>> [/bold blue]"
BANNER = "🤖 ChatGPT REPL (type 'exit' to quit, 'clear' to reset)"
REPLY_LABEL = "GPT:"

EXIT_COMMANDS = ("exit", "quit")
CLEAR_COMMAND = "clear"


class ChatSession:
    """
    One interactive conversation.

    Owns the history and the provider (which holds the API key). Turns run
    strictly one after another: each network call is awaited to completion
    before the next line is read.
    """

    def __init__(
        self,
        provider: OpenAICompatibleProvider,
        console: Console,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        max_input_chars: int = MAX_INPUT_CHARS,
        read_line: Callable[[str], str] | None = None,
    ):
        self.provider = provider
        self.console = console
        self.history = ConversationHistory(system_prompt)
        self.max_input_chars = max_input_chars
        self._read_line = read_line or console.input

    def run(self) -> None:
        """
        Read and handle lines until exit, quit or end of input.

        Ctrl+C, whether at the prompt or while a request is in flight, ends
        the session the same way as end of input.
        """
        self.console.print(BANNER)
        while True:
            try:
                line = self._read_line(PROMPT)
                if not self.handle_line(line):
                    break
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self._farewell()
                break

    def handle_line(self, line: str) -> bool:
        """
        Interpret one line of input.

        Returns:
            False when the session should end, True otherwise.
        """
        text = line.strip()

        if text in EXIT_COMMANDS:
            self._farewell()
            return False

        if text == CLEAR_COMMAND:
            self.history.reset()
            logger.debug("History cleared")
            self.console.print("🧹 Conversation history cleared.")
            return True

        self.send(text)
        return True

    def send(self, text: str) -> ChatMessage | None:
        """
        Run one chat turn for `text`.

        The user message stays in history even when the turn fails.
        """
        if len(text) > self.max_input_chars:
            self.console.print(
                f"⚠️ Warning: Input is very long ({len(text)} chars). Consider shortening."
            )

        self.history.append(ChatMessage(role=ROLE_USER, content=text))

        try:
            reply = asyncio.run(self.provider.complete(self.history.messages))
        except ChatAPIError as exc:
            logger.info(f"Turn failed: {format_error(exc)}")
            # Server diagnostics are printed as-is, without re-wrapping.
            self._print_verbatim(f"[red]❌[/red] {escape(str(exc))}")
            return None

        self._print_verbatim(
            f"[bold green]{REPLY_LABEL}[/bold green] {escape(reply.message.content)}"
        )
        self.history.append(reply.message)
        return reply.message

    def _print_verbatim(self, markup: str) -> None:
        self.console.print(markup, emoji=False, highlight=False, soft_wrap=True)

    def _farewell(self) -> None:
        self.console.print("👋 Goodbye!")
