"""Per-database connection pool registry."""

import asyncio
from typing import Any

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool, PoolClosed

from bitdotio.application.ports import PoolFactory
from bitdotio.domain.exceptions import (
    ConnectionAcquireError,
    PoolAlreadyExists,
    PoolCreationError,
    PoolNotFound,
    PoolStateUnknown,
)
from bitdotio.infrastructure.persistence.postgres.connection import (
    build_conninfo,
    establish_pool,
)


class PooledConnection:
    """A connection leased from a registered pool.

    The lease belongs to the pool, not the registry: ``release()`` returns the
    connection to the pool it came from, and stays safe after the registry has
    closed that pool.
    """

    def __init__(self, pool: AsyncConnectionPool, conn: AsyncConnection) -> None:
        self._pool = pool
        self._conn: AsyncConnection | None = conn

    @property
    def pool(self) -> AsyncConnectionPool:
        return self._pool

    @property
    def connection(self) -> AsyncConnection:
        if self._conn is None:
            raise RuntimeError("connection already released")
        return self._conn

    @property
    def released(self) -> bool:
        return self._conn is None

    async def release(self) -> None:
        """Return the connection to its pool. Calling it twice is a no-op."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        await self._pool.putconn(conn)

    async def __aenter__(self) -> AsyncConnection:
        return self.connection

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.release()


async def _probe(pool: AsyncConnectionPool) -> None:
    """Acquire and immediately release one connection."""
    conn = await pool.getconn()
    await pool.putconn(conn)


class PoolRegistry:
    """Tracks at most one open pool per fully-qualified database name.

    Create and close are serialized on a single lock, including the network
    round trips they make. Lookups are plain dict reads: the map is only
    mutated by synchronous statements inside the lock, so a reader on the
    event loop never sees it half-updated.

    Liveness of an existing pool is decided by trying to use it, not by a
    flag kept here, so pools closed behind the registry's back are detected.
    """

    def __init__(self, access_token: str, pool_factory: PoolFactory | None = None) -> None:
        self._access_token = access_token
        self._pool_factory = pool_factory or establish_pool
        self._pools: dict[str, AsyncConnectionPool] = {}
        self._lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"<PoolRegistry pools={sorted(self._pools)}>"

    def __len__(self) -> int:
        return len(self._pools)

    def __contains__(self, database_name: object) -> bool:
        return database_name in self._pools

    @property
    def access_token(self) -> str:
        return self._access_token

    def database_names(self) -> list[str]:
        """Names of databases with a registered pool."""
        return list(self._pools)

    async def create_pool(
        self, database_name: str, timeout: float | None = None
    ) -> AsyncConnectionPool:
        """Create a pool for ``owner/dbname`` with the default maximum size."""
        return await self.create_pool_with_max_connections(database_name, 0, timeout)

    async def create_pool_with_max_connections(
        self,
        database_name: str,
        max_connections: int,
        timeout: float | None = None,
    ) -> AsyncConnectionPool:
        """Create a pool for ``owner/dbname`` capped at ``max_connections``.

        ``max_connections=0`` uses the pool's default size. ``timeout`` and
        cancellation of the caller apply to establishing the new pool only;
        probing an already registered pool runs to completion regardless.

        Raises:
            PoolAlreadyExists: a live pool is registered for the database.
            PoolStateUnknown: the registered pool failed the probe with
                something other than PoolClosed.
            PoolCreationError: the new pool could not be established.
        """
        async with self._lock:
            existing = self._pools.get(database_name)
            if existing is not None:
                try:
                    await asyncio.shield(_probe(existing))
                except PoolClosed:
                    pass  # stale entry, replaced below
                except Exception as e:
                    raise PoolStateUnknown(database_name) from e
                else:
                    raise PoolAlreadyExists(database_name)

            conninfo = build_conninfo(self._access_token, database_name, max_connections)
            try:
                pool = await self._pool_factory(conninfo, timeout)
            except Exception as e:
                raise PoolCreationError(database_name, e) from e

            self._pools[database_name] = pool
            return pool

    def get_pool(self, database_name: str) -> AsyncConnectionPool:
        """Return the registered pool or raise PoolNotFound."""
        try:
            return self._pools[database_name]
        except KeyError:
            raise PoolNotFound(database_name) from None

    async def connect(
        self, database_name: str, timeout: float | None = None
    ) -> PooledConnection:
        """Lease a connection from the database's pool. No retries."""
        try:
            pool = self.get_pool(database_name)
        except PoolNotFound as e:
            raise PoolNotFound(
                database_name,
                f"unable to acquire a connection for db {database_name}: {e}",
            ) from e
        try:
            conn = await pool.getconn(timeout)
        except Exception as e:
            raise ConnectionAcquireError(database_name, e) from e
        return PooledConnection(pool, conn)

    async def close_pool(self, database_name: str) -> None:
        """Close and unregister the database's pool.

        Leased connections stay usable until released; new acquisitions fail.
        """
        async with self._lock:
            pool = self._pools.pop(database_name, None)
            if pool is None:
                raise PoolNotFound(database_name, f"no open pool found for db {database_name}")
            await pool.close()

    async def close_all(self) -> None:
        """Close and unregister every pool."""
        async with self._lock:
            pools = list(self._pools.values())
            self._pools.clear()
            for pool in pools:
                await pool.close()

    async def __aenter__(self) -> "PoolRegistry":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close_all()
