"""Service account entity."""

from dataclasses import dataclass, field
from datetime import datetime

from bitdotio.domain.entities.database import DatabaseID


@dataclass
class ServiceAccount:
    """Service account and the databases it can access."""

    id: str
    name: str
    date_created: datetime | None
    role: str
    databases: list[DatabaseID] = field(default_factory=list)
    token_count: int = 0
    active_token_count: int = 0
