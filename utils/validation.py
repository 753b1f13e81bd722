"""
Input validation utilities.
"""

import json
from typing import Any, Dict


def validate_index_name(index: str) -> str:
    """
    Validate an Elasticsearch index name or pattern.
    
    Args:
        index: Index name to validate
        
    Returns:
        The index name with surrounding whitespace removed
        
    Raises:
        ValueError: If the name is empty
    """
    if not isinstance(index, str) or not index.strip():
        raise ValueError("Index name is required")
    return index.strip()


def validate_query_body(body: Any) -> Dict[str, Any]:
    """
    Validate a caller-supplied query DSL object.

    Only the top-level shape and JSON-serializability are checked, the
    content is passed through to Elasticsearch untouched.
    
    Args:
        body: Query DSL object
        
    Returns:
        The same object
        
    Raises:
        ValueError: If the body is not a JSON object
    """
    if not isinstance(body, dict):
        raise ValueError("queryBody must be a valid Elasticsearch query DSL object")
    try:
        json.dumps(body)
    except (TypeError, ValueError):
        raise ValueError("queryBody must be a valid Elasticsearch query DSL object") from None
    return body


def validate_esql_query(query: str) -> str:
    """Validate an ES|QL query string."""
    if not isinstance(query, str) or not query.strip():
        raise ValueError("ES|QL query is required")
    return query.strip()
