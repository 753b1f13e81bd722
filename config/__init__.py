"""
Configuration management for the Elasticsearch MCP server.
"""

from .settings import (
    SERVER_NAME,
    SERVER_VERSION,
    ElasticsearchConfig,
    load_elasticsearch_config,
    get_logging_config,
)

__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "ElasticsearchConfig",
    "load_elasticsearch_config",
    "get_logging_config",
]
