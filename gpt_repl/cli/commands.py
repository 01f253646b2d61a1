"""CLI commands for gpt-repl."""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gpt_repl.config import Settings, load_config
from gpt_repl.providers import OpenAICompatibleProvider
from gpt_repl.session import ChatSession
from gpt_repl.utils.logging import setup_logging

app = typer.Typer(
    name="gpt-repl",
    help="gpt-repl: Interactive terminal chat for OpenAI-compatible endpoints",
)
console = Console()

KEY_PROMPT = "🔑 Enter your OpenAI API key: "


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON config file path"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model identifier"),
    api_base: Optional[str] = typer.Option(None, "--api-base", help="Base URL of the chat API"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Start an interactive chat session (default when no command is given)."""
    setup_logging("DEBUG" if verbose else "WARNING")
    try:
        settings = load_config(config_path)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)

    overrides = {k: v for k, v in {"model": model, "api_base": api_base}.items() if v}
    if verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        settings = settings.model_copy(update=overrides)
    setup_logging(settings.log_level)

    ctx.obj = {"settings": settings}
    if ctx.invoked_subcommand is None:
        chat(settings)


def _read_api_key() -> str:
    try:
        api_key = console.input(KEY_PROMPT).strip()
    except (EOFError, KeyboardInterrupt) as e:
        console.print(f"\n❌ Failed to read API key: {str(e) or type(e).__name__}")
        raise typer.Exit(1)

    if not api_key:
        console.print("❌ API key is required.")
        raise typer.Exit(1)
    return api_key


def chat(settings: Settings) -> None:
    """Capture the key, then hand control to the session loop."""
    api_key = _read_api_key()

    provider = OpenAICompatibleProvider(
        api_key=api_key,
        api_base=settings.api_base,
        model=settings.model,
        timeout_s=settings.request_timeout_s,
    )
    session = ChatSession(
        provider=provider,
        console=console,
        system_prompt=settings.system_prompt,
        max_input_chars=settings.max_input_chars,
    )
    logger.debug(f"Session started: model={settings.model}, endpoint={settings.endpoint}")
    session.run()


@app.command()
def status(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    settings: Settings = ctx.obj["settings"]

    table = Table(title="gpt-repl Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Endpoint", settings.endpoint)
    table.add_row("Model", settings.model)
    table.add_row("System Prompt", settings.system_prompt)
    table.add_row("Long Input Warning", f"> {settings.max_input_chars} chars")
    timeout = "Unbounded" if settings.request_timeout_s is None else f"{settings.request_timeout_s}s"
    table.add_row("Request Timeout", timeout)
    table.add_row("Log Level", settings.log_level)
    table.add_row("API Key", "[dim]Prompted at startup[/dim]")

    console.print(table)


if __name__ == "__main__":
    app()
