"""Configuration module for toolshelf."""

from .settings import Settings, load_env_file, settings

__all__ = [
    "settings",
    "Settings",
    "load_env_file",
]
