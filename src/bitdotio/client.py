"""BitDotIO client - composition root for API repositories and the pool registry."""

from typing import Any

from psycopg_pool import AsyncConnectionPool

from bitdotio.application.dto import DatabaseConfig, ExportJobConfig, ImportJobConfig
from bitdotio.application.ports import APIClient, PoolFactory
from bitdotio.application.use_cases.transfer.create_export_job import CreateExportJobUseCase
from bitdotio.application.use_cases.transfer.create_import_job import CreateImportJobUseCase
from bitdotio.config import Settings, get_settings
from bitdotio.domain.entities import (
    Credentials,
    Database,
    ExportJob,
    ImportJob,
    QueryResult,
    ServiceAccount,
)
from bitdotio.domain.value_objects import QualifiedName
from bitdotio.infrastructure.http.api_client import DefaultAPIClient
from bitdotio.infrastructure.http.credential_repository import HttpCredentialRepository
from bitdotio.infrastructure.http.database_repository import HttpDatabaseRepository
from bitdotio.infrastructure.http.query_repository import HttpQueryRepository
from bitdotio.infrastructure.http.service_account_repository import (
    HttpServiceAccountRepository,
)
from bitdotio.infrastructure.http.transfer_job_repository import HttpTransferJobRepository
from bitdotio.infrastructure.persistence.postgres.pool_registry import (
    PooledConnection,
    PoolRegistry,
)


class BitDotIO:
    """Client for bit.io developer APIs and direct database connections.

    One instance per access token. Use as an async context manager, or call
    ``close()``, to release pools and the HTTP client.
    """

    def __init__(
        self,
        access_token: str,
        api_client: APIClient | None = None,
        pool_factory: PoolFactory | None = None,
    ) -> None:
        self._api_client = api_client or DefaultAPIClient(access_token)
        self._pools = PoolRegistry(access_token, pool_factory=pool_factory)

        self._databases = HttpDatabaseRepository(self._api_client)
        self._credentials = HttpCredentialRepository(self._api_client)
        self._service_accounts = HttpServiceAccountRepository(self._api_client)
        self._transfer_jobs = HttpTransferJobRepository(self._api_client)
        self._queries = HttpQueryRepository(self._api_client)

        self._create_import_job = CreateImportJobUseCase(self._transfer_jobs)
        self._create_export_job = CreateExportJobUseCase(self._transfer_jobs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BitDotIO":
        """Build a client from ``BITDOTIO_*`` environment settings."""
        settings = settings or get_settings()
        api_client = DefaultAPIClient(
            settings.token,
            base_url=settings.api_url,
            timeout=settings.http_timeout,
        )
        return cls(settings.token, api_client=api_client)

    @property
    def pools(self) -> PoolRegistry:
        return self._pools

    async def close(self) -> None:
        """Close every pool, then the HTTP client."""
        try:
            await self._pools.close_all()
        finally:
            await self._api_client.aclose()

    async def __aenter__(self) -> "BitDotIO":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # --- Connection pools ---

    async def create_pool(
        self, database_name: str, timeout: float | None = None
    ) -> AsyncConnectionPool:
        return await self._pools.create_pool(database_name, timeout)

    async def create_pool_with_max_connections(
        self, database_name: str, max_connections: int, timeout: float | None = None
    ) -> AsyncConnectionPool:
        return await self._pools.create_pool_with_max_connections(
            database_name, max_connections, timeout
        )

    def get_pool(self, database_name: str) -> AsyncConnectionPool:
        return self._pools.get_pool(database_name)

    async def connect(self, database_name: str, timeout: float | None = None) -> PooledConnection:
        return await self._pools.connect(database_name, timeout)

    async def close_pool(self, database_name: str) -> None:
        await self._pools.close_pool(database_name)

    # --- Databases ---

    async def list_databases(self) -> list[Database]:
        return await self._databases.list()

    async def create_database(self, config: DatabaseConfig) -> Database:
        return await self._databases.create(config)

    async def get_database(self, owner: str, name: str) -> Database:
        return await self._databases.get(owner, name)

    async def update_database(self, owner: str, name: str, config: DatabaseConfig) -> Database:
        return await self._databases.update(owner, name, config)

    async def delete_database(self, owner: str, name: str) -> None:
        await self._databases.delete(owner, name)

    # --- Credentials and service accounts ---

    async def create_key(self) -> Credentials:
        return await self._credentials.create_key()

    async def list_service_accounts(self) -> list[ServiceAccount]:
        return await self._service_accounts.list()

    async def get_service_account(self, service_account_id: str) -> ServiceAccount:
        return await self._service_accounts.get(service_account_id)

    async def create_service_account_key(self, service_account_id: str) -> Credentials:
        return await self._service_accounts.create_key(service_account_id)

    async def revoke_service_account_keys(self, service_account_id: str) -> None:
        await self._service_accounts.revoke_keys(service_account_id)

    # --- Import / export ---

    async def create_import_job(
        self, database_name: str, table_name: str, config: ImportJobConfig
    ) -> ImportJob:
        """Start an import. The caller remains responsible for closing ``config.file``."""
        return await self._create_import_job.execute(database_name, table_name, config)

    async def get_import_job(self, import_id: str) -> ImportJob:
        return await self._transfer_jobs.get_import(import_id)

    async def create_export_job(self, database_name: str, config: ExportJobConfig) -> ExportJob:
        return await self._create_export_job.execute(database_name, config)

    async def get_export_job(self, export_id: str) -> ExportJob:
        return await self._transfer_jobs.get_export(export_id)

    # --- Query ---

    async def query(self, database_name: str, query_string: str) -> QueryResult:
        """Run SQL over HTTP without a direct connection."""
        return await self._queries.execute(QualifiedName.parse(database_name), query_string)
