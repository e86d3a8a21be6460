"""Pytest fixtures for bitdotio tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from psycopg_pool import PoolClosed

from bitdotio.infrastructure.persistence.postgres.pool_registry import PoolRegistry


# --- Fake pooling mechanism ---


class FakeConnection:
    """Stand-in for a psycopg AsyncConnection leased from a FakePool."""

    def __init__(self, pool: FakePool) -> None:
        self.pool = pool
        self.closed = False


class FakePool:
    """In-memory pool with the getconn/putconn/close surface of AsyncConnectionPool."""

    def __init__(self, conninfo: str = "", timeout: float | None = None) -> None:
        self.conninfo = conninfo
        self.open_timeout = timeout
        self.closed = False
        self.acquire_error: BaseException | None = None
        self.leased: list[FakeConnection] = []
        self.returned: list[FakeConnection] = []
        self.getconn_timeouts: list[float | None] = []
        # getconn waits on this event when it is not None.
        self.gate: asyncio.Event | None = None

    async def getconn(self, timeout: float | None = None) -> FakeConnection:
        self.getconn_timeouts.append(timeout)
        if self.gate is not None:
            await self.gate.wait()
        if self.closed:
            raise PoolClosed("the pool 'fake' is already closed")
        if self.acquire_error is not None:
            raise self.acquire_error
        conn = FakeConnection(self)
        self.leased.append(conn)
        return conn

    async def putconn(self, conn: FakeConnection) -> None:
        if conn.pool is not self:
            raise ValueError("can't return connection to pool 'fake'")
        self.leased.remove(conn)
        self.returned.append(conn)
        # A closed pool closes returned connections instead of keeping them.
        if self.closed:
            conn.closed = True

    async def close(self, timeout: float = 5.0) -> None:
        self.closed = True


class FakePoolFactory:
    """Records every conninfo it is asked to establish."""

    def __init__(self) -> None:
        self.created: list[FakePool] = []
        self.error: BaseException | None = None
        self.delay: float = 0.0

    async def __call__(self, conninfo: str, timeout: float | None = None) -> FakePool:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        pool = FakePool(conninfo, timeout)
        self.created.append(pool)
        return pool


# --- Fake API client ---


class FakeAPIClient:
    """In-memory APIClient returning canned responses keyed by (method, path)."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], Any] = {}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def respond(self, method: str, path: str, data: Any) -> None:
        """Set the decoded response for a request."""
        self.responses[(method, path)] = data

    async def call(self, method: str, path: str, body: Any = None) -> Any:
        self.calls.append({"method": method, "path": path, "body": body})
        return self.responses.get((method, path))

    async def call_multipart(
        self,
        method: str,
        path: str,
        fields: dict[str, str],
        files: Any = None,
    ) -> Any:
        self.calls.append(
            {"method": method, "path": path, "fields": fields, "files": files}
        )
        return self.responses.get((method, path))

    async def aclose(self) -> None:
        self.closed = True


# --- Fixtures ---


@pytest.fixture
def pool_factory() -> FakePoolFactory:
    """Fresh fake pooling mechanism for each test."""
    return FakePoolFactory()


@pytest.fixture
def registry(pool_factory: FakePoolFactory) -> PoolRegistry:
    """PoolRegistry backed by the fake pool factory."""
    return PoolRegistry("test-token", pool_factory=pool_factory)


@pytest.fixture
def fake_api() -> FakeAPIClient:
    """Fresh in-memory API client for each test."""
    return FakeAPIClient()


@pytest.fixture
def job_payload() -> dict[str, Any]:
    """Transfer job JSON as returned by the API."""
    return {
        "id": "job-1",
        "date_created": "2022-11-01T12:00:00+00:00",
        "date_finished": None,
        "state": "RUNNING",
        "retries": 0,
        "error_type": None,
        "error_id": None,
        "status_url": "https://api.bit.io/v2beta/import/job-1",
    }
