"""
Conversion of handler exceptions into error results.
"""

import structlog
from elasticsearch import ApiError, TransportError

from mcp_types.primitives import ErrorKind, ToolResult


logger = structlog.get_logger(__name__)


def classify_error(error: Exception) -> ErrorKind:
    """Map an exception to the kind reported to the caller."""
    if isinstance(error, (ApiError, TransportError)):
        return ErrorKind.ELASTICSEARCH
    if isinstance(error, ValueError):
        return ErrorKind.VALIDATION
    return ErrorKind.INTERNAL


def error_result(tool: str, action: str, error: Exception) -> ToolResult:
    """
    Log a failed tool call and wrap it in an error result.
    
    Args:
        tool: Tool name
        action: Short description of what failed, e.g. "list indices"
        error: The exception raised by the handler
        
    Returns:
        Error ToolResult carrying the exception message
    """
    kind = classify_error(error)
    message = str(error)
    logger.error(f"Failed to {action}", tool=tool, kind=kind.value, error=message)
    return ToolResult.error(kind, message)
