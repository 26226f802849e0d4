"""Builtin tool package.

Static export of tool definitions. Importing this package builds every
definition once; registries pick them up from TOOL_DEFINITIONS.
"""

from __future__ import annotations

from toolshelf.tools.builtin.create_directory import CREATE_DIRECTORY
from toolshelf.tools.builtin.create_file import CREATE_FILE
from toolshelf.tools.builtin.list_directory import LIST_DIRECTORY
from toolshelf.tools.builtin.read_file import READ_FILE

TOOL_DEFINITIONS = [
    READ_FILE,
    LIST_DIRECTORY,
    CREATE_FILE,
    CREATE_DIRECTORY,
]

__all__ = [
    "TOOL_DEFINITIONS",
    "CREATE_DIRECTORY",
    "CREATE_FILE",
    "LIST_DIRECTORY",
    "READ_FILE",
]
