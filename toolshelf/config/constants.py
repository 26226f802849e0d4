"""Hard-coded configuration constants not meant to be user-configurable."""

DEFAULT_CATEGORY = "general"
DEFAULT_FILE_ENCODING = "utf-8"
DEFAULT_STRICT_TOOL_NAMES = False
FILESYSTEM_CATEGORY = "filesystem"
ENV_PREFIX = "TOOLSHELF_"
