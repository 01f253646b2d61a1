"""Configuration module."""

from gpt_repl.config.loader import load_config
from gpt_repl.config.schema import Settings

__all__ = ["Settings", "load_config"]
