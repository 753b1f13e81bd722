"""
Response parsing utilities for Elasticsearch.
"""

import json
from typing import Any, Dict, List, Union


def response_body(response: Any) -> Any:
    """
    Unwrap a client response into plain Python data.
    
    Args:
        response: ObjectApiResponse/ListApiResponse or plain data
        
    Returns:
        The response body
    """
    return getattr(response, "body", response)


def parse_hits(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Extract hits from search response.
    
    Args:
        response: Elasticsearch response
        
    Returns:
        List of hit documents
    """
    return (response.get("hits") or {}).get("hits") or []


def parse_total_hits(response: Dict[str, Any]) -> int:
    """
    Extract the total hit count, in either numeric or object form.
    
    Args:
        response: Elasticsearch response
        
    Returns:
        Total hit count, 0 when absent
    """
    total: Union[int, Dict[str, Any], None] = (response.get("hits") or {}).get("total")
    if isinstance(total, dict):
        return total.get("value") or 0
    return total or 0


def parse_aggregations(response: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract aggregations from response.
    
    Args:
        response: Elasticsearch response
        
    Returns:
        Aggregations dict
    """
    return response.get("aggregations") or {}


def extract_index_mappings(response: Dict[str, Any], index: str) -> Dict[str, Any]:
    """
    Get the mapping tree of one index from a get-mapping response.
    
    Args:
        response: Get-mapping response keyed by index name
        index: Index name
        
    Returns:
        The ``mappings`` object, empty when the index has none
    """
    return (response.get(index) or {}).get("mappings") or {}


def _normalize_numbers(value: Any) -> Any:
    """Render whole-number floats as integers (``7.0`` -> ``7``)."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {k: _normalize_numbers(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_numbers(v) for v in value]
    return value


def to_json(value: Any) -> str:
    """Compact JSON, as used inside hit lines."""
    return json.dumps(_normalize_numbers(value), ensure_ascii=False, separators=(",", ":"))


def to_pretty_json(value: Any) -> str:
    """Indented JSON for whole-fragment payloads."""
    return json.dumps(_normalize_numbers(value), ensure_ascii=False, indent=2)


def format_hit(hit: Dict[str, Any]) -> str:
    """
    Render a single search hit as text.

    Highlighted fields come first as ``field (highlighted): a ... b``,
    followed by every source field that was not highlighted as
    ``field: <json>``.
    
    Args:
        hit: Search hit
        
    Returns:
        One line per field
    """
    highlighted = hit.get("highlight") or {}
    source = hit.get("_source") or {}
    
    lines = []
    for field, highlights in highlighted.items():
        if highlights:
            lines.append(f"{field} (highlighted): {' ... '.join(highlights)}")
            
    for field, value in source.items():
        if field not in highlighted:
            lines.append(f"{field}: {to_json(value)}")
            
    return "\n".join(lines).strip()
