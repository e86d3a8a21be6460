"""HTTP transfer job repository implementation."""

from typing import Any
from urllib.parse import quote

from bitdotio.application.ports import APIClient, FileParts
from bitdotio.domain.entities import ExportJob, ImportJob
from bitdotio.domain.value_objects import QualifiedName
from bitdotio.infrastructure.http.mappers import to_export_job, to_import_job


def _db_path(database: QualifiedName) -> str:
    return f"db/{quote(database.owner)}/{quote(database.database)}"


class HttpTransferJobRepository:
    """Import (multipart) and export (JSON) jobs and their status."""

    def __init__(self, client: APIClient) -> None:
        self._client = client

    async def create_import(
        self,
        database: QualifiedName,
        fields: dict[str, str],
        files: FileParts | None = None,
    ) -> ImportJob:
        data = await self._client.call_multipart(
            "POST", f"{_db_path(database)}/import/", fields, files
        )
        return to_import_job(data)

    async def get_import(self, import_id: str) -> ImportJob:
        data = await self._client.call("GET", f"import/{quote(import_id)}")
        return to_import_job(data)

    async def create_export(self, database: QualifiedName, payload: dict[str, Any]) -> ExportJob:
        data = await self._client.call("POST", f"{_db_path(database)}/export/", payload)
        return to_export_job(data)

    async def get_export(self, export_id: str) -> ExportJob:
        data = await self._client.call("GET", f"export/{quote(export_id)}")
        return to_export_job(data)
