"""Import and export job entities."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TransferJob:
    """Status of an import or export job."""

    id: str
    date_created: datetime | None
    date_finished: datetime | None
    state: str
    retries: int
    error_type: str | None
    error_id: str | None
    status_url: str


@dataclass
class ImportJob(TransferJob):
    """Import job status."""

    pass


@dataclass
class ExportJob(TransferJob):
    """Export job status with download details."""

    export_format: str | None = None
    file_name: str | None = None
    download_url: str | None = None
