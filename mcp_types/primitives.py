"""
Primitive layer type definitions.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from utils.response_parser import parse_aggregations, parse_hits, parse_total_hits


class ErrorKind(str, Enum):
    """Category of a failed tool call."""
    VALIDATION = "validation"
    ELASTICSEARCH = "elasticsearch"
    INTERNAL = "internal"


@dataclass
class ToolResult:
    """
    Outcome of a tool handler.

    A successful result carries ordered text fragments. A failed result
    carries an error kind and message and no fragments.
    """
    fragments: List[str] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, *fragments: str) -> "ToolResult":
        return cls(fragments=list(fragments))

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "ToolResult":
        return cls(error_kind=kind, message=message)

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None


def _to_int(value: Any) -> Any:
    """Convert numeric strings from the cat APIs, leave anything else as is."""
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


@dataclass
class IndexSummary:
    """One row of the cat indices API."""
    index: str
    health: Optional[str]
    status: Optional[str]
    docCount: Union[int, str, None]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexSummary":
        """Create from a cat indices row."""
        return cls(
            index=data.get("index"),
            health=data.get("health"),
            status=data.get("status"),
            docCount=_to_int(data.get("docs.count")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ShardSummary:
    """One row of the cat shards API."""
    index: str
    shard: Union[int, str, None]
    prirep: Optional[str]
    state: Optional[str]
    docs: Union[int, str, None]
    store: Optional[str]
    ip: Optional[str]
    node: Optional[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShardSummary":
        """Create from a cat shards row."""
        return cls(
            index=data.get("index"),
            shard=_to_int(data.get("shard")),
            prirep=data.get("prirep"),
            state=data.get("state"),
            docs=_to_int(data.get("docs")),
            store=data.get("store"),
            ip=data.get("ip"),
            node=data.get("node"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SearchResponse:
    """Elasticsearch search response."""
    total: int
    hits: List[Dict[str, Any]]
    aggregations: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResponse":
        """Create from Elasticsearch response dict."""
        return cls(
            total=parse_total_hits(data),
            hits=parse_hits(data),
            aggregations=parse_aggregations(data),
        )


@dataclass
class EsqlResponse:
    """ES|QL query response in columnar form."""
    columns: List[Dict[str, Any]]
    values: List[List[Any]]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EsqlResponse":
        """Create from an ES|QL JSON response."""
        return cls(
            columns=data.get("columns") or [],
            values=data.get("values") or [],
        )

    def to_objects(self) -> List[Dict[str, Any]]:
        """Turn each row into an object keyed by column name."""
        names = [column.get("name") for column in self.columns]
        return [dict(zip(names, row)) for row in self.values]
