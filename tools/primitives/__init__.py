"""
Primitive tools for low-level Elasticsearch operations.
"""

from .indices import list_elastic_indices, get_elastic_mappings
from .search import search_elastic_index
from .shards import get_elastic_shards
from .esql import query_elastic_esql

__all__ = [
    # Index operations
    "list_elastic_indices",
    "get_elastic_mappings",
    # Search operations
    "search_elastic_index",
    # Shard operations
    "get_elastic_shards",
    # ES|QL operations
    "query_elastic_esql",
]
