"""
Connection and logging configuration.

Settings are read from environment variables (a ``.env`` file is loaded
by the server before this module reads anything):

- ES_URL: Elasticsearch endpoint (required)
- ES_API_KEY: API key, takes precedence over username/password
- ES_USERNAME / ES_PASSWORD: basic auth credentials
- ES_CA_CERT: path to a PEM file with a custom certificate authority
- ES_SSL_SKIP_VERIFY: disable TLS certificate verification
- LOG_LEVEL / LOG_FORMAT: logging verbosity and renderer
"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)


SERVER_NAME = "elasticsearch-mcp-server"
SERVER_VERSION = "0.1.1"

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ElasticsearchConfig(BaseModel):
    """Validated Elasticsearch connection settings."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Elasticsearch server URL")
    api_key: Optional[str] = Field(default=None, repr=False, description="API key for authentication")
    username: Optional[str] = Field(default=None, description="Username for authentication")
    password: Optional[str] = Field(default=None, repr=False, description="Password for authentication")
    ca_cert: Optional[str] = Field(default=None, description="Path to custom CA certificate")
    ssl_skip_verify: bool = Field(default=False, description="Skip TLS certificate verification")

    @field_validator("api_key", "username", "password", "ca_cert", mode="before")
    @classmethod
    def _none_if_empty(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("url", mode="before")
    @classmethod
    def _validate_url(cls, v: Any) -> Any:
        if v is None:
            v = ""
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError("Elasticsearch URL cannot be empty")
        try:
            _URL_ADAPTER.validate_python(v)
        except ValidationError:
            raise ValueError("Invalid Elasticsearch URL format") from None
        return v

    @model_validator(mode="after")
    def _check_auth(self) -> "ElasticsearchConfig":
        if not self.api_key and not (self.username and self.password):
            raise ValueError(
                "Either ES_API_KEY or both ES_USERNAME and ES_PASSWORD must be provided"
            )
        return self

    @property
    def uses_api_key(self) -> bool:
        return bool(self.api_key)


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_elasticsearch_config(environ: Optional[Mapping[str, str]] = None) -> ElasticsearchConfig:
    """
    Build and validate the connection settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Validated, immutable configuration

    Raises:
        pydantic.ValidationError: If the URL is missing or malformed, or no
            usable credentials are present
    """
    env = os.environ if environ is None else environ
    return ElasticsearchConfig(
        url=env.get("ES_URL", ""),
        api_key=env.get("ES_API_KEY"),
        username=env.get("ES_USERNAME"),
        password=env.get("ES_PASSWORD"),
        ca_cert=env.get("ES_CA_CERT"),
        ssl_skip_verify=_parse_bool(env.get("ES_SSL_SKIP_VERIFY")),
    )


def get_logging_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Get logging settings.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Dictionary with ``level`` and ``log_format`` keys
    """
    env = os.environ if environ is None else environ
    log_format = (env.get("LOG_FORMAT") or "console").strip().lower()
    if log_format not in ("console", "json"):
        log_format = "console"
    return {
        "level": (env.get("LOG_LEVEL") or "info").strip().lower(),
        "log_format": log_format,
    }
