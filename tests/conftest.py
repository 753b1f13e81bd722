"""
Pytest configuration and fixtures for MCP Elasticsearch tests.
"""

import pytest
import os
import sys
from unittest.mock import AsyncMock

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)


@pytest.fixture
def products_mapping():
    """Get-mapping response for a small products index."""
    return {
        "products": {
            "mappings": {
                "properties": {
                    "name": {"type": "text"},
                    "price": {"type": "float"},
                    "sku": {"type": "keyword"},
                }
            }
        }
    }


@pytest.fixture
def products_search_response():
    """Search response with two hits, one of them highlighted."""
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": 5, "relation": "eq"},
            "hits": [
                {
                    "_index": "products",
                    "_id": "1",
                    "_source": {"name": "Red shoe", "price": 10.5},
                    "highlight": {"name": ["<em>Red</em> shoe"]},
                },
                {
                    "_index": "products",
                    "_id": "2",
                    "_source": {"name": "Blue hat", "price": 7},
                },
            ],
        },
    }


@pytest.fixture
def mock_elasticsearch(products_mapping, products_search_response):
    """Mock AsyncElasticsearch client for testing."""
    mock_es = AsyncMock()
    
    mock_es.cat.indices.return_value = [
        {"index": "products", "health": "green", "status": "open", "docs.count": "5"},
        {"index": "logs", "health": "yellow", "status": "open", "docs.count": "120"},
    ]
    
    mock_es.indices.get_mapping.return_value = products_mapping
    mock_es.search.return_value = products_search_response
    
    mock_es.cat.shards.return_value = [
        {
            "index": "products",
            "shard": "0",
            "prirep": "p",
            "state": "STARTED",
            "docs": "5",
            "store": "10kb",
            "ip": "10.0.0.1",
            "node": "node-1",
        },
        {
            "index": "logs",
            "shard": "0",
            "prirep": "r",
            "state": "STARTED",
            "docs": "120",
            "store": "1mb",
            "ip": "10.0.0.2",
            "node": "node-2",
        },
    ]
    
    mock_es.esql.query.return_value = {
        "columns": [{"name": "name", "type": "text"}, {"name": "price", "type": "double"}],
        "values": [["Red shoe", 10.5], ["Blue hat", 7.0]],
    }
    
    return mock_es


@pytest.fixture
def es_config():
    """Valid connection settings using an API key."""
    from config import ElasticsearchConfig
    
    return ElasticsearchConfig(url="https://localhost:9200", api_key="test-key")


@pytest.fixture
def es_context(es_config, mock_elasticsearch):
    """Context wired to the mock client."""
    from utils import ElasticsearchContext
    
    return ElasticsearchContext(config=es_config, client=mock_elasticsearch)
