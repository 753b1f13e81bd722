"""
Primitive ES|QL operations for Elasticsearch.
"""

from elasticsearch import AsyncElasticsearch

from mcp_types.primitives import EsqlResponse, ToolResult
from tools.primitives.errors import error_result
from utils.response_parser import response_body, to_pretty_json
from utils.validation import validate_esql_query


async def query_elastic_esql(es: AsyncElasticsearch, query: str) -> ToolResult:
    """
    Run an ES|QL query and return its rows as objects.
    
    Args:
        es: Elasticsearch client
        query: ES|QL query
        
    Returns:
        A label fragment and a JSON fragment with one object per row
    """
    try:
        query = validate_esql_query(query)
        response = await es.esql.query(query=query, format="json")
        rows = EsqlResponse.from_dict(response_body(response)).to_objects()
        
        return ToolResult.ok("Results", to_pretty_json(rows))
        
    except Exception as e:
        return error_result("esql", "run ES|QL query", e)
