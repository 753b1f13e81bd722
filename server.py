"""
FastMCP Elasticsearch Server.

This server exposes read-only Elasticsearch operations as MCP tools:
- list_indices: List all indices with health, status and document count
- get_mappings: Field mappings of an index
- search: Query DSL search with highlighting always enabled
- get_shards: Shard information for all indices or a single one
- esql: ES|QL query returning rows as objects

Configuration comes from ES_URL, ES_API_KEY, ES_USERNAME, ES_PASSWORD,
ES_CA_CERT and ES_SSL_SKIP_VERIFY. The transport is stdio.
"""

import asyncio
import sys
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

import structlog
from dotenv import load_dotenv
from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field, ValidationError

from config import SERVER_NAME, ElasticsearchConfig, get_logging_config, load_elasticsearch_config
from mcp_types import ToolResult
from tools.primitives import (
    get_elastic_mappings,
    get_elastic_shards,
    list_elastic_indices,
    query_elastic_esql,
    search_elastic_index,
)
from utils import ElasticsearchContext, create_elasticsearch_context, setup_logging


logger = structlog.get_logger(__name__)


class ServerState(str, Enum):
    """Lifecycle of the server process."""
    STARTING = "starting"
    CONNECTED = "connected"
    SHUTTING_DOWN = "shutting_down"
    STOPPED = "stopped"


def to_text_content(result: ToolResult) -> List[TextContent]:
    """
    Render a handler result as MCP text fragments.

    Failures are returned as a normal response with a single
    ``Error: ...`` fragment, never as a protocol error.
    """
    if result.is_error:
        return [TextContent(type="text", text=f"Error: {result.message}")]
    return [TextContent(type="text", text=fragment) for fragment in result.fragments]


def _read_only(title: str) -> Dict[str, Any]:
    return {"title": title, "readOnlyHint": True}


def register_tools(mcp: FastMCP, context: ElasticsearchContext) -> None:
    """
    Register the Elasticsearch tools on a server.

    Args:
        mcp: Server to register on
        context: Shared client and settings
    """
    es = context.client

    @mcp.tool(annotations=_read_only("List ES indices"))
    async def list_indices() -> List[TextContent]:
        """List all available Elasticsearch indices"""
        return to_text_content(await list_elastic_indices(es))

    @mcp.tool(annotations=_read_only("Get ES index mappings"))
    async def get_mappings(
        index: Annotated[
            str,
            Field(min_length=1, description="Name of the Elasticsearch index to get mappings for"),
        ],
    ) -> List[TextContent]:
        """Get field mappings for a specific Elasticsearch index"""
        return to_text_content(await get_elastic_mappings(es, index))

    @mcp.tool(annotations=_read_only("Elasticsearch search DSL query"))
    async def search(
        index: Annotated[
            str,
            Field(min_length=1, description="Name of the Elasticsearch index to search"),
        ],
        queryBody: Annotated[
            Dict[str, Any],
            Field(
                description="Complete Elasticsearch query DSL object that can include "
                "query, size, from, sort, etc."
            ),
        ],
        fields: Annotated[
            Optional[List[str]],
            Field(description="Name of the fields that need to be returned (optional)"),
        ] = None,
    ) -> List[TextContent]:
        """Perform an Elasticsearch search with the provided query DSL. Highlights are always enabled."""
        return to_text_content(await search_elastic_index(es, index, queryBody, fields))

    @mcp.tool(annotations=_read_only("Get ES shard information"))
    async def get_shards(
        index: Annotated[
            Optional[str],
            Field(description="Optional index name to get shard information for"),
        ] = None,
    ) -> List[TextContent]:
        """Get shard information for all or specific indices"""
        return to_text_content(await get_elastic_shards(es, index))

    @mcp.tool(annotations=_read_only("Elasticsearch ES|QL query"))
    async def esql(
        query: Annotated[
            str,
            Field(min_length=1, description="Complete Elasticsearch ES|QL query"),
        ],
    ) -> List[TextContent]:
        """Perform an Elasticsearch ES|QL query."""
        return to_text_content(await query_elastic_esql(es, query))


def create_server(context: ElasticsearchContext) -> FastMCP:
    """
    Build the MCP server with all tools bound to one client.

    Args:
        context: Shared client and settings

    Returns:
        Server ready to run on a transport
    """
    mcp = FastMCP(SERVER_NAME, instructions="Provides access to Elasticsearch")
    register_tools(mcp, context)
    return mcp


async def serve(config: ElasticsearchConfig) -> None:
    """
    Run the server on stdio until the transport closes or the task is cancelled.

    Args:
        config: Validated connection settings
    """
    logger.info("Server state changed", state=ServerState.STARTING.value)
    context = create_elasticsearch_context(config)
    mcp = create_server(context)

    try:
        logger.info("Server state changed", state=ServerState.CONNECTED.value)
        await mcp.run_async(transport="stdio")
    finally:
        logger.info("Server state changed", state=ServerState.SHUTTING_DOWN.value)
        await context.close()
        logger.info("Server state changed", state=ServerState.STOPPED.value)


def main() -> int:
    """
    Process entry point.

    Returns:
        Exit code: 0 after an interrupt, 1 on startup or fatal errors
    """
    load_dotenv()
    setup_logging(get_logging_config())

    try:
        config = load_elasticsearch_config()
    except ValidationError as e:
        print(f"Server error: {e}", file=sys.stderr)
        return 1

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Server error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
