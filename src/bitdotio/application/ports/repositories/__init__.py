"""Repository ports."""

from bitdotio.application.ports.repositories.credential_repository import (
    CredentialRepository,
)
from bitdotio.application.ports.repositories.database_repository import (
    DatabaseRepository,
)
from bitdotio.application.ports.repositories.query_repository import QueryRepository
from bitdotio.application.ports.repositories.service_account_repository import (
    ServiceAccountRepository,
)
from bitdotio.application.ports.repositories.transfer_job_repository import (
    TransferJobRepository,
)

__all__ = [
    "CredentialRepository",
    "DatabaseRepository",
    "QueryRepository",
    "ServiceAccountRepository",
    "TransferJobRepository",
]
