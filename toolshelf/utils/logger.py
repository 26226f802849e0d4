"""Structured logging for toolshelf using structlog.

Loggers wrap stdlib loggers under the `toolshelf` namespace, so records go
through whatever handlers the host runtime installed. Importing this module
leaves the root logger and the global structlog configuration alone;
`configure_logging()` is for processes that own their logging setup.
"""

import logging
import os

import structlog
from structlog.types import FilteringBoundLogger

_HANDLER_MARK = "_toolshelf"


def _processors() -> list:
    """Processor chain with pretty or JSON output based on LOG_FORMAT env."""
    log_format = os.getenv("LOG_FORMAT", "pretty").lower()

    processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.extend(
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stream handler to the root logger and set its level.

    Only for standalone use; editor hosts configure logging themselves.
    Calling it again does not add a second handler.
    """
    if not any(getattr(h, _HANDLER_MARK, False) for h in logging.root.handlers):
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        setattr(handler, _HANDLER_MARK, True)
        logging.root.addHandler(handler)
    logging.root.setLevel(level)


def tool_call_log(
    logger: FilteringBoundLogger, tool: str, arg_names: list[str], **kwargs
):
    """Log a tool invocation without dumping argument values."""
    logger.info("Tool call", tool=tool, args=arg_names, **kwargs)


def get_logger(name: str, level: int | None = None) -> FilteringBoundLogger:
    """Get a structlog logger bound to the stdlib logger `name`."""
    stdlib_logger = logging.getLogger(name)
    if level is not None:
        stdlib_logger.setLevel(level)
    return structlog.wrap_logger(
        stdlib_logger,
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


tools_logger = get_logger("toolshelf.tools")
