"""
Primitive index operations for Elasticsearch.
"""

from elasticsearch import AsyncElasticsearch

from mcp_types.primitives import IndexSummary, ToolResult
from tools.primitives.errors import error_result
from utils.response_parser import extract_index_mappings, response_body, to_pretty_json
from utils.validation import validate_index_name


async def list_elastic_indices(es: AsyncElasticsearch) -> ToolResult:
    """
    List all indices with their health, status and document count.
    
    Args:
        es: Elasticsearch client
        
    Returns:
        A count fragment and a JSON fragment with one entry per index
    """
    try:
        response = await es.cat.indices(format="json")
        indices = [IndexSummary.from_dict(row).to_dict() for row in response_body(response)]
        
        return ToolResult.ok(
            f"Found {len(indices)} indices",
            to_pretty_json(indices),
        )
        
    except Exception as e:
        return error_result("list_indices", "list indices", e)


async def get_elastic_mappings(es: AsyncElasticsearch, index: str) -> ToolResult:
    """
    Get field mappings for one index.
    
    Args:
        es: Elasticsearch client
        index: Index name
        
    Returns:
        A label fragment and a JSON fragment with the mapping tree
        (``{}`` when the index has no mapping entry)
    """
    try:
        index = validate_index_name(index)
        response = await es.indices.get_mapping(index=index)
        mappings = extract_index_mappings(response_body(response), index)
        
        return ToolResult.ok(
            f"Mappings for index: {index}",
            to_pretty_json(mappings),
        )
        
    except Exception as e:
        return error_result("get_mappings", "get mappings", e)
