"""Database repository port."""

from typing import Protocol

from bitdotio.application.dto import DatabaseConfig
from bitdotio.domain.entities import Database


class DatabaseRepository(Protocol):
    """Port for database lifecycle management."""

    async def list(self) -> list[Database]: ...

    async def create(self, config: DatabaseConfig) -> Database: ...

    async def get(self, owner: str, name: str) -> Database: ...

    async def update(self, owner: str, name: str, config: DatabaseConfig) -> Database: ...

    async def delete(self, owner: str, name: str) -> None: ...
