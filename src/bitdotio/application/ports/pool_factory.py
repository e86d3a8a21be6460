"""Pool factory port - establishes a connection pool from a conninfo string."""

from typing import Protocol

from psycopg_pool import AsyncConnectionPool


class PoolFactory(Protocol):
    """Port for the pooling mechanism used by the pool registry."""

    async def __call__(
        self, conninfo: str, timeout: float | None = None
    ) -> AsyncConnectionPool: ...
