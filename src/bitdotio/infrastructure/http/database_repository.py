"""HTTP database repository implementation."""

from urllib.parse import quote

from bitdotio.application.dto import DatabaseConfig
from bitdotio.application.ports import APIClient
from bitdotio.domain.entities import Database
from bitdotio.infrastructure.http.mappers import to_database


def _db_path(owner: str, name: str) -> str:
    return f"db/{quote(owner)}/{quote(name)}"


class HttpDatabaseRepository:
    """Database lifecycle over the developer API (``db/``)."""

    def __init__(self, client: APIClient) -> None:
        self._client = client

    async def list(self) -> list[Database]:
        """List databases the requester owns or collaborates on."""
        data = await self._client.call("GET", "db/")
        return [to_database(d) for d in (data or {}).get("databases") or []]

    async def create(self, config: DatabaseConfig) -> Database:
        data = await self._client.call("POST", "db/", config.to_payload())
        return to_database(data)

    async def get(self, owner: str, name: str) -> Database:
        data = await self._client.call("GET", _db_path(owner, name))
        return to_database(data)

    async def update(self, owner: str, name: str, config: DatabaseConfig) -> Database:
        data = await self._client.call("PATCH", _db_path(owner, name), config.to_payload())
        return to_database(data)

    async def delete(self, owner: str, name: str) -> None:
        await self._client.call("DELETE", _db_path(owner, name))
