"""Query repository port."""

from typing import Protocol

from bitdotio.domain.entities import QueryResult
from bitdotio.domain.value_objects import QualifiedName


class QueryRepository(Protocol):
    """Port for running SQL over HTTP."""

    async def execute(self, database: QualifiedName, query_string: str) -> QueryResult: ...
