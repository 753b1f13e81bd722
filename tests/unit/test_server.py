"""
Unit tests for the server lifecycle.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, Mock, patch
from structlog.testing import capture_logs

import server
from utils import ElasticsearchContext


@pytest.fixture
def server_env(monkeypatch):
    """Valid connection settings in the environment."""
    monkeypatch.setenv("ES_URL", "https://localhost:9200")
    monkeypatch.setenv("ES_API_KEY", "key")


class TestServe:
    """Test cases for serve."""

    @pytest.mark.asyncio
    async def test_cancelled_run_closes_client(self, es_config):
        client = AsyncMock()
        mock_mcp = Mock()
        mock_mcp.run_async = AsyncMock(side_effect=asyncio.CancelledError)
        
        with patch("server.create_elasticsearch_context",
                   return_value=ElasticsearchContext(config=es_config, client=client)), \
             patch("server.create_server", return_value=mock_mcp), \
             capture_logs() as logs:
            with pytest.raises(asyncio.CancelledError):
                await server.serve(es_config)
                
        mock_mcp.run_async.assert_awaited_once_with(transport="stdio")
        client.close.assert_awaited_once()
        states = [log["state"] for log in logs if log["event"] == "Server state changed"]
        assert states == ["starting", "connected", "shutting_down", "stopped"]


class TestMain:
    """Test cases for main."""

    def test_interrupt_exits_cleanly(self, server_env):
        with patch("server.load_dotenv"), patch("server.setup_logging"), \
             patch("server.serve", Mock(side_effect=KeyboardInterrupt)) as mock_serve:
            assert server.main() == 0
            
        config = mock_serve.call_args[0][0]
        assert config.url == "https://localhost:9200"

    def test_fatal_error_exits_with_failure(self, server_env, capsys):
        with patch("server.load_dotenv"), patch("server.setup_logging"), \
             patch("server.serve", Mock(side_effect=RuntimeError("transport closed"))):
            assert server.main() == 1
            
        assert "Server error: transport closed" in capsys.readouterr().err

    def test_invalid_config_never_serves(self, monkeypatch, capsys):
        monkeypatch.setenv("ES_URL", "not-a-url")
        monkeypatch.setenv("ES_API_KEY", "key")
        
        with patch("server.load_dotenv"), patch("server.setup_logging"), \
             patch("server.serve") as mock_serve:
            assert server.main() == 1
            
        mock_serve.assert_not_called()
        assert "Invalid Elasticsearch URL format" in capsys.readouterr().err
