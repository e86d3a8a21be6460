"""HTTP query result."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class QueryResult:
    """Rows returned by a query executed over HTTP."""

    query_string: str
    metadata: dict[str, str] = field(default_factory=dict)
    data: list[list[Any]] = field(default_factory=list)
