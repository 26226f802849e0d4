from __future__ import annotations

from toolshelf.config import settings
from toolshelf.config.constants import FILESYSTEM_CATEGORY
from toolshelf.tools.builder import ToolSpec, build_tool
from toolshelf.tools.core.paths import expand_path
from toolshelf.utils.logger import tools_logger


def _create_file(path: str, content: str) -> str:
    file_path = expand_path(path)
    if file_path.is_dir():
        raise FileExistsError(f"Path already exists and is a directory: {file_path}")
    if file_path.exists():
        raise FileExistsError(f"File already exists: {file_path}")

    # "x" refuses to clobber a file created since the check above
    with open(file_path, "x", encoding=settings.file_encoding, newline="") as fh:
        fh.write(content)

    tools_logger.info("File created", path=str(file_path), size=len(content))
    return f"Created file: {file_path}"


CREATE_FILE = build_tool(
    "create-file",
    ToolSpec(
        description=(
            "Create a new file with the given content. Fails if the file"
            " already exists; the parent directory must exist."
        ),
        parameters=[
            ("path", "string", "Path of the file to create"),
            ("content", "string", "Complete content of the new file"),
        ],
        category=FILESYSTEM_CATEGORY,
        tags={"filesystem", "write"},
        client_hints={"confirm": True},
    ),
    _create_file,
)
