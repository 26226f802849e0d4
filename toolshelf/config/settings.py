"""Configuration settings for toolshelf.

This module provides a Settings class with property-based access to
configuration values. Values come from an explicit override mapping first,
then from environment variables, then from hard-coded defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from toolshelf.config.constants import (
    DEFAULT_FILE_ENCODING,
    DEFAULT_STRICT_TOOL_NAMES,
    ENV_PREFIX,
)
from toolshelf.utils.logger import get_logger

logger = get_logger("toolshelf.config")


def load_env_file(workdir: str | Path | None = None) -> bool:
    """Load `.env` from workdir (cwd by default) without overriding set variables.

    Returns True if a file was found and loaded.
    """
    env_file = Path(workdir or os.getcwd()) / ".env"
    if not env_file.is_file():
        return False
    load_dotenv(dotenv_path=env_file, override=False)
    logger.debug("Loaded .env file", path=str(env_file))
    return True


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


class Settings:
    """Application settings.

    Environment variables are read on every access so tests and host
    runtimes can change them after import.
    """

    def __init__(self, overrides: Mapping[str, Any] | None = None):
        self._overrides: dict[str, Any] = dict(overrides or {})

    def _get(self, key: str, default: Any, env_key: str | None = None) -> Any:
        """Get config value from overrides, fallback to env, then default."""
        if key in self._overrides:
            value = self._overrides[key]
        elif env_key and (env_val := os.getenv(env_key)):
            value = env_val
        else:
            return default
        if isinstance(default, bool):
            return _as_bool(value)
        return value

    @property
    def strict_tool_names(self) -> bool:
        return bool(
            self._get(
                "strict_tool_names",
                DEFAULT_STRICT_TOOL_NAMES,
                f"{ENV_PREFIX}STRICT_TOOL_NAMES",
            )
        )

    @property
    def file_encoding(self) -> str:
        return self._get(
            "file_encoding", DEFAULT_FILE_ENCODING, f"{ENV_PREFIX}FILE_ENCODING"
        )

    @property
    def base_dir(self) -> Path:
        """Directory relative tool paths are resolved against (cwd if unset)."""
        value = self._get("base_dir", None, f"{ENV_PREFIX}BASE_DIR")
        if value:
            return Path(value).expanduser()
        return Path(os.getcwd())

    def override(self, **values: Any) -> None:
        """Set explicit values that win over the environment."""
        self._overrides.update(values)

    def reset(self) -> None:
        self._overrides.clear()


settings = Settings()
