"""Request DTOs."""

from bitdotio.application.dto.database_config import DatabaseConfig
from bitdotio.application.dto.transfer_job_config import ExportJobConfig, ImportJobConfig

__all__ = [
    "DatabaseConfig",
    "ExportJobConfig",
    "ImportJobConfig",
]
