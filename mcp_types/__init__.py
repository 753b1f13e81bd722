"""
Type definitions for the Elasticsearch MCP server.
"""

from .primitives import (
    ErrorKind,
    ToolResult,
    IndexSummary,
    ShardSummary,
    SearchResponse,
    EsqlResponse,
)

__all__ = [
    "ErrorKind",
    "ToolResult",
    "IndexSummary",
    "ShardSummary",
    "SearchResponse",
    "EsqlResponse",
]
