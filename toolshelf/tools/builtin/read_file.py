from __future__ import annotations

from toolshelf.config import settings
from toolshelf.config.constants import FILESYSTEM_CATEGORY
from toolshelf.tools.builder import ToolSpec, build_tool
from toolshelf.tools.core.paths import expand_path


def _read_file(path: str) -> str:
    file_path = expand_path(path)
    # newline="" keeps the file's line endings untouched
    with open(file_path, encoding=settings.file_encoding, newline="") as fh:
        return fh.read()


READ_FILE = build_tool(
    "read-file",
    ToolSpec(
        description=(
            "Read the full contents of a file. Use this to inspect source code,"
            " notes or configuration before answering or editing."
        ),
        parameters=[("path", "string", "Path to the file to read")],
        category=FILESYSTEM_CATEGORY,
        tags={"filesystem", "read"},
        client_hints={"include": True},
    ),
    _read_file,
)
