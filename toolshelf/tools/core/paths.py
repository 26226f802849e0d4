from __future__ import annotations

import os
from pathlib import Path

from toolshelf.config import settings


def expand_path(path: str | os.PathLike[str], base_dir: Path | None = None) -> Path:
    """Expand `~` and resolve relative paths against the configured base dir.

    The result is absolute and normalised; symlinks are left as-is.
    """
    expanded = Path(path).expanduser()
    if not expanded.is_absolute():
        expanded = (base_dir or settings.base_dir) / expanded
    return Path(os.path.abspath(expanded))
