"""
Primitive shard operations for Elasticsearch.
"""

from typing import Optional

from elasticsearch import AsyncElasticsearch

from mcp_types.primitives import ShardSummary, ToolResult
from tools.primitives.errors import error_result
from utils.response_parser import response_body, to_pretty_json
from utils.validation import validate_index_name


async def get_elastic_shards(es: AsyncElasticsearch, index: Optional[str] = None) -> ToolResult:
    """
    Get shard information for all indices or a single one.
    
    Args:
        es: Elasticsearch client
        index: Optional index name to filter on, None for all indices
        
    Returns:
        A count fragment and a JSON fragment with one entry per shard
    """
    try:
        if index is not None:
            index = validate_index_name(index)
            
        response = await es.cat.shards(index=index, format="json")
        shards = [ShardSummary.from_dict(row).to_dict() for row in response_body(response)]
        
        suffix = f" for index {index}" if index else ""
        return ToolResult.ok(
            f"Found {len(shards)} shards{suffix}",
            to_pretty_json(shards),
        )
        
    except Exception as e:
        return error_result("get_shards", "get shard information", e)
