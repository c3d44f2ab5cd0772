"""Structured logging for toolchat using structlog.

Everything is written to stderr. stdout belongs to the final answer and to the
commands the agent runs, which inherit it.
"""

import logging
import os
import sys

import structlog
from structlog.types import FilteringBoundLogger, Processor

TRUTHY = ("true", "1", "yes", "on")

# Chatty client libraries used by the model provider
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "openai": logging.INFO,
}


def _shared_processors() -> list[Processor]:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def select_renderer(log_format: str, colors: bool) -> Processor:
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=colors)


def resolve_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a LOG_LEVEL value such as ``debug`` or ``30`` to a logging level."""
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def configure_structlog():
    """Configure structlog from LOG_FORMAT, LOG_COLORS and LOG_LEVEL.

    stdlib logging is routed through the same ProcessorFormatter so records
    from langchain and openai share the renderer and level controls.
    """
    renderer = select_renderer(
        os.getenv("LOG_FORMAT", "pretty"),
        os.getenv("LOG_COLORS", "true").lower() in TRUTHY,
    )

    logging.root.handlers = []
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(resolve_level(os.getenv("LOG_LEVEL")))

    logging.captureWarnings(True)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_structlog()


def tool_result_log(logger: FilteringBoundLogger, tool: str, content: str, **kwargs):
    """Log a successful tool result with its size and a short preview."""
    logger.info(
        "Tool result",
        tool=tool,
        size_bytes=len(content.encode("utf-8")),
        preview=content[:200],
        **kwargs,
    )


def get_logger(name: str, level: int = logging.INFO) -> FilteringBoundLogger:
    """Get a configured structlog logger."""
    stdlib_logger = logging.getLogger(name)
    stdlib_logger.setLevel(level)
    return structlog.get_logger(name)


logger = get_logger("toolchat")
agent_logger = get_logger("toolchat.agents", level=logging.DEBUG)
tool_logger = get_logger("toolchat.tools", level=logging.DEBUG)
