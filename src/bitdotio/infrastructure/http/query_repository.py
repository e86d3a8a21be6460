"""HTTP query repository implementation."""

from bitdotio.application.ports import APIClient
from bitdotio.domain.entities import QueryResult
from bitdotio.domain.value_objects import QualifiedName
from bitdotio.infrastructure.http.mappers import to_query_result


class HttpQueryRepository:
    """Runs SQL through the ``query/`` endpoint."""

    def __init__(self, client: APIClient) -> None:
        self._client = client

    async def execute(self, database: QualifiedName, query_string: str) -> QueryResult:
        data = await self._client.call(
            "POST",
            "query/",
            {"database_name": str(database), "query_string": query_string},
        )
        return to_query_result(data)
