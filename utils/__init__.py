"""
Utility functions for the MCP Elasticsearch server.
"""

from .connection import (
    ElasticsearchContext,
    build_client_params,
    create_elasticsearch_context,
    load_ca_certificate,
)
from .log import setup_logging
from .validation import (
    validate_index_name,
    validate_query_body,
    validate_esql_query,
)
from .query_builder import (
    build_highlight,
    build_search_body,
    collect_highlight_fields,
)
from .response_parser import (
    parse_hits,
    parse_total_hits,
    parse_aggregations,
    extract_index_mappings,
    format_hit,
)

__all__ = [
    # Connection
    "ElasticsearchContext",
    "build_client_params",
    "create_elasticsearch_context",
    "load_ca_certificate",
    # Logging
    "setup_logging",
    # Validation
    "validate_index_name",
    "validate_query_body",
    "validate_esql_query",
    # Query building
    "build_highlight",
    "build_search_body",
    "collect_highlight_fields",
    # Response parsing
    "parse_hits",
    "parse_total_hits",
    "parse_aggregations",
    "extract_index_mappings",
    "format_hit",
]
