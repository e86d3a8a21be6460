"""Create export job use case."""

from dataclasses import replace

from bitdotio.application.dto import ExportJobConfig
from bitdotio.application.ports.repositories import TransferJobRepository
from bitdotio.domain.entities import ExportJob
from bitdotio.domain.exceptions import ValidationError
from bitdotio.domain.value_objects import ExportFormat, QualifiedName


class CreateExportJobUseCase:
    """Validate export options and submit the export job."""

    def __init__(self, transfer_jobs: TransferJobRepository) -> None:
        self._transfer_jobs = transfer_jobs

    async def execute(self, database_name: str, config: ExportJobConfig) -> ExportJob:
        """Export a table or a query result. The caller's config is not mutated."""
        database = QualifiedName.parse(database_name)
        if (not config.query_string) == (not config.table_name):
            raise ValidationError("must provide exactly one of query_string or table_name")

        try:
            export_format = ExportFormat(config.export_format or ExportFormat.CSV)
        except ValueError:
            supported = ", ".join(str(f) for f in ExportFormat)
            raise ValidationError(
                f"{config.export_format} not in supported formats [{supported}]"
            ) from None

        # The API requires an explicit schema for table exports.
        schema_name = config.schema_name
        if config.table_name and not schema_name:
            schema_name = "public"

        config = replace(config, schema_name=schema_name, export_format=export_format)
        return await self._transfer_jobs.create_export(database, config.to_payload())
