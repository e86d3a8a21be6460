"""Transfer job repository port."""

from typing import Any, Protocol

from bitdotio.application.ports.api_client import FileParts
from bitdotio.domain.entities import ExportJob, ImportJob
from bitdotio.domain.value_objects import QualifiedName


class TransferJobRepository(Protocol):
    """Port for import/export job submission and status."""

    async def create_import(
        self,
        database: QualifiedName,
        fields: dict[str, str],
        files: FileParts | None = None,
    ) -> ImportJob: ...

    async def get_import(self, import_id: str) -> ImportJob: ...

    async def create_export(
        self, database: QualifiedName, payload: dict[str, Any]
    ) -> ExportJob: ...

    async def get_export(self, export_id: str) -> ExportJob: ...
