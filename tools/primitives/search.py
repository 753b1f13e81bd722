"""
Primitive search operations for Elasticsearch.
"""

from typing import Any, Dict, List, Optional

from elasticsearch import AsyncElasticsearch

from mcp_types.primitives import SearchResponse, ToolResult
from tools.primitives.errors import error_result
from utils.query_builder import build_search_body
from utils.response_parser import extract_index_mappings, format_hit, response_body, to_pretty_json
from utils.validation import validate_index_name, validate_query_body


async def search_elastic_index(
    es: AsyncElasticsearch,
    index: str,
    query_body: Dict[str, Any],
    fields: Optional[List[str]] = None,
) -> ToolResult:
    """
    Execute a query DSL search with highlighting forced on.
    
    The index mapping is fetched on every call to find the text and
    vector fields to highlight, then the caller's query body is merged
    with the highlight clause and sent as-is. Pagination (``from``) is
    applied by Elasticsearch and only echoed back here.
    
    Args:
        es: Elasticsearch client
        index: Index name or pattern to search
        query_body: Query DSL object (query, size, from, sort, aggs, ...)
        fields: Optional source fields to return
        
    Returns:
        A metadata fragment followed by one fragment per hit, plus the
        aggregations when the response carries any
    """
    try:
        index = validate_index_name(index)
        query_body = validate_query_body(query_body)
        
        mapping_response = await es.indices.get_mapping(index=index)
        mappings = extract_index_mappings(response_body(mapping_response), index)
        
        body = build_search_body(query_body, mappings.get("properties"), fields)
        response = SearchResponse.from_dict(
            response_body(await es.search(index=index, body=body))
        )
        
        from_ = query_body.get("from") or 0
        fragments = [
            f"Total results: {response.total}, showing {len(response.hits)} from position {from_}"
        ]
        fragments.extend(format_hit(hit) for hit in response.hits)
        
        if response.aggregations:
            fragments.append("Aggregations results:")
            fragments.append(to_pretty_json(response.aggregations))
            
        return ToolResult.ok(*fragments)
        
    except Exception as e:
        return error_result("search", "search", e)
