from __future__ import annotations

from toolshelf.config.constants import FILESYSTEM_CATEGORY
from toolshelf.tools.builder import ToolSpec, build_tool
from toolshelf.tools.core.paths import expand_path
from toolshelf.utils.logger import tools_logger


def _create_directory(path: str) -> str:
    dir_path = expand_path(path)
    if dir_path.is_dir():
        raise FileExistsError(f"Directory already exists: {dir_path}")
    if dir_path.exists():
        raise FileExistsError(
            f"Path already exists and is not a directory: {dir_path}"
        )

    dir_path.mkdir(parents=True)
    tools_logger.info("Directory created", path=str(dir_path))
    return f"Created directory: {dir_path}"


CREATE_DIRECTORY = build_tool(
    "create-directory",
    ToolSpec(
        description=(
            "Create a new directory, including any missing parent directories."
            " Fails if the path already exists."
        ),
        parameters=[("path", "string", "Path of the directory to create")],
        category=FILESYSTEM_CATEGORY,
        tags={"filesystem", "write", "directory"},
        client_hints={"confirm": True},
    ),
    _create_directory,
)
