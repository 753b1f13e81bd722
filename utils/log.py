"""
Structured logging configuration using structlog.

Everything is written to stderr: stdout carries the MCP stdio transport
and must only ever contain protocol messages.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

import structlog

from config.settings import SERVER_NAME, get_logging_config


def build_processors(log_format: str) -> List[Any]:
    """
    Build the structlog processor chain for a log format.

    Args:
        log_format: "json" for JSON lines, anything else for plain console lines

    Returns:
        Processors ending with the renderer
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def setup_logging(settings: Optional[Dict[str, Any]] = None) -> None:
    """
    Configure logging for the server process.

    Args:
        settings: Output of ``get_logging_config`` (``level`` and
            ``log_format`` keys), read from the environment when omitted
    """
    if settings is None:
        settings = get_logging_config()

    level = getattr(logging, str(settings.get("level", "info")).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=build_processors(settings.get("log_format", "console")),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(server=SERVER_NAME)
