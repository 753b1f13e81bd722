"""
Request body builders for Elasticsearch searches.
"""

from typing import Any, Dict, Iterable, List, Optional


HIGHLIGHT_PRE_TAG = "<em>"
HIGHLIGHT_POST_TAG = "</em>"

# Mapping types whose values can be highlighted
HIGHLIGHTABLE_TYPES = ("text", "semantic_text")
VECTOR_MARKER = "dense_vector"


def is_highlight_eligible(field_mapping: Dict[str, Any]) -> bool:
    """
    Check whether a mapped field should be highlighted.
    
    Args:
        field_mapping: Mapping entry of a single field
        
    Returns:
        True for text fields and fields carrying a vector marker
    """
    if not isinstance(field_mapping, dict):
        return False
    return field_mapping.get("type") in HIGHLIGHTABLE_TYPES or VECTOR_MARKER in field_mapping


def collect_highlight_fields(properties: Dict[str, Any]) -> List[str]:
    """
    List the top-level fields of a mapping that are highlight-eligible.
    
    Args:
        properties: ``properties`` section of an index mapping
        
    Returns:
        Field names in mapping order
    """
    return [name for name, field_mapping in properties.items() if is_highlight_eligible(field_mapping)]


def build_highlight(fields: Iterable[str]) -> Dict[str, Any]:
    """
    Build a highlight clause over the given fields.
    
    Args:
        fields: Field names to highlight
        
    Returns:
        Highlight configuration using ``<em>`` markers
    """
    return {
        "fields": {name: {} for name in fields},
        "pre_tags": [HIGHLIGHT_PRE_TAG],
        "post_tags": [HIGHLIGHT_POST_TAG],
    }


def apply_source_fields(body: Dict[str, Any], fields: Optional[List[str]]) -> Dict[str, Any]:
    """
    Narrow the returned ``_source`` to the given fields.

    Fields are appended when ``_source`` is already a list, otherwise
    ``_source`` is replaced.
    """
    if not fields:
        return body
    source = body.get("_source")
    if isinstance(source, list):
        body["_source"] = source + [f for f in fields if f not in source]
    else:
        body["_source"] = list(fields)
    return body


def build_search_body(
    query_body: Dict[str, Any],
    properties: Optional[Dict[str, Any]] = None,
    fields: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Merge a caller's query DSL with forced highlighting.
    
    Args:
        query_body: Caller-supplied query DSL (not modified)
        properties: Index mapping properties, highlighting is added only
            when they are present
        fields: Optional source fields to return
        
    Returns:
        Search request body
    """
    body = dict(query_body)
    
    if properties:
        body["highlight"] = build_highlight(collect_highlight_fields(properties))
        
    return apply_source_fields(body, fields)
