from .paths import expand_path

__all__ = ["expand_path"]
