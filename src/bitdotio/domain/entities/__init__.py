"""Domain entities."""

from bitdotio.domain.entities.credentials import Credentials
from bitdotio.domain.entities.database import Database, DatabaseID, Usage
from bitdotio.domain.entities.query_result import QueryResult
from bitdotio.domain.entities.service_account import ServiceAccount
from bitdotio.domain.entities.transfer_job import ExportJob, ImportJob, TransferJob

__all__ = [
    "Credentials",
    "Database",
    "DatabaseID",
    "ExportJob",
    "ImportJob",
    "QueryResult",
    "ServiceAccount",
    "TransferJob",
    "Usage",
]
