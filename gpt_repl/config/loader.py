"""Configuration loader for gpt-repl."""

import json
from pathlib import Path

from loguru import logger

from gpt_repl.config.schema import Settings


def load_config(config_path: Path | None = None) -> Settings:
    """
    Load configuration from an optional file and environment variables.

    Priority: config file > environment variables > defaults. Nothing is read
    from disk unless a path is given.

    Args:
        config_path: Optional path to a JSON config file.

    Returns:
        Loaded settings.

    Raises:
        ValidationError: the environment holds an invalid value.
    """
    if config_path is not None:
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
                settings = Settings(**data)
                logger.debug(f"Config loaded from {config_path}")
                return settings
            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}, using defaults")
        else:
            logger.warning(f"Config file {config_path} not found, using defaults")

    return Settings()
