"""Utility functions module."""

from gpt_repl.utils.helpers import format_error

__all__ = ["format_error"]
