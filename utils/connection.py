"""
Elasticsearch connection management.
"""

import ssl
from dataclasses import dataclass
from typing import Any, Dict, Optional

import structlog
from elasticsearch import AsyncElasticsearch

from config.settings import SERVER_NAME, SERVER_VERSION, ElasticsearchConfig


logger = structlog.get_logger(__name__)


@dataclass
class ElasticsearchContext:
    """Process-wide state shared by all tools: the settings and one client."""
    config: ElasticsearchConfig
    client: AsyncElasticsearch

    async def close(self) -> None:
        await self.client.close()


def load_ca_certificate(path: str) -> Optional[ssl.SSLContext]:
    """
    Read a PEM certificate authority file into an SSL context.

    A file that cannot be read or parsed is logged and ignored, the
    connection then falls back to the system trust store.

    Args:
        path: Path to the CA certificate

    Returns:
        SSL context trusting the certificate, or None on failure
    """
    try:
        with open(path, encoding="utf-8") as f:
            cadata = f.read()
        return ssl.create_default_context(cadata=cadata)
    except (OSError, ValueError, ssl.SSLError) as e:
        logger.warning("Failed to read certificate file", path=path, error=str(e))
        return None


def build_client_params(config: ElasticsearchConfig) -> Dict[str, Any]:
    """
    Build keyword arguments for the Elasticsearch client.

    Args:
        config: Validated connection settings

    Returns:
        Client constructor parameters
    """
    params: Dict[str, Any] = {
        "hosts": [config.url],
        "headers": {"user-agent": f"{SERVER_NAME}/{SERVER_VERSION}"},
    }

    # API key wins over basic auth when both are set
    if config.api_key:
        params["api_key"] = config.api_key
    elif config.username and config.password:
        params["basic_auth"] = (config.username, config.password)

    if config.ssl_skip_verify:
        params["verify_certs"] = False
        params["ssl_show_warn"] = False
    elif config.ca_cert:
        ssl_context = load_ca_certificate(config.ca_cert)
        if ssl_context is not None:
            params["ssl_context"] = ssl_context

    return params


def create_elasticsearch_context(config: ElasticsearchConfig) -> ElasticsearchContext:
    """
    Create the shared Elasticsearch client for the process lifetime.

    Args:
        config: Validated connection settings

    Returns:
        Context holding the settings and the client
    """
    client = AsyncElasticsearch(**build_client_params(config))
    logger.info(
        "Elasticsearch client created",
        url=config.url,
        auth="api_key" if config.uses_api_key else "basic",
    )
    return ElasticsearchContext(config=config, client=client)
