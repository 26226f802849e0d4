from __future__ import annotations

from toolshelf.config.constants import FILESYSTEM_CATEGORY
from toolshelf.tools.builder import ToolSpec, build_tool
from toolshelf.tools.core.paths import expand_path


def _list_directory(path: str) -> str:
    base = expand_path(path)
    if not base.exists():
        raise FileNotFoundError(f"Path does not exist: {base}")
    if not base.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {base}")

    entries = sorted(
        f"{p.name}/" if p.is_dir() else p.name for p in base.iterdir()
    )
    lines = [f"Contents of {base}:"]
    lines.extend(entries or ["(empty)"])
    return "\n".join(lines)


LIST_DIRECTORY = build_tool(
    "list-directory",
    ToolSpec(
        description=(
            "List the entries of a directory, one per line. Directories are"
            " marked with a trailing slash."
        ),
        parameters=[("path", "string", "Path to the directory to list")],
        category=FILESYSTEM_CATEGORY,
        tags={"filesystem", "read", "directory"},
        client_hints={"include": True},
    ),
    _list_directory,
)
