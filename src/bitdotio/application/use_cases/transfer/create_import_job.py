"""Create import job use case."""

from bitdotio.application.dto import ImportJobConfig
from bitdotio.application.ports import FileParts
from bitdotio.application.ports.repositories import TransferJobRepository
from bitdotio.domain.entities import ImportJob
from bitdotio.domain.exceptions import ValidationError
from bitdotio.domain.value_objects import InferHeader, QualifiedName


class CreateImportJobUseCase:
    """Validate import options and submit them as a multipart form."""

    def __init__(self, transfer_jobs: TransferJobRepository) -> None:
        self._transfer_jobs = transfer_jobs

    async def execute(
        self,
        database_name: str,
        table_name: str,
        config: ImportJobConfig,
    ) -> ImportJob:
        """Submit an import of ``config.file`` or ``config.file_url`` into ``table_name``."""
        database = QualifiedName.parse(database_name)
        if not table_name:
            raise ValidationError("table_name is required")
        if (config.file is None) == (not config.file_url):
            raise ValidationError("must provide exactly one of file or file_url")

        fields = {"table_name": table_name}
        if config.schema_name:
            fields["schema_name"] = config.schema_name
        if config.infer_header:
            try:
                fields["infer_header"] = str(InferHeader(config.infer_header))
            except ValueError:
                options = ", ".join(repr(str(h)) for h in InferHeader)
                raise ValidationError(
                    f"infer_header options are {options}, got {config.infer_header!r}"
                ) from None
        if config.file_url:
            fields["file_url"] = config.file_url

        files: FileParts | None = None
        if config.file is not None:
            files = {"file": (table_name, config.file)}

        return await self._transfer_jobs.create_import(database, fields, files)
