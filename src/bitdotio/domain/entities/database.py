"""Database entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Usage:
    """Rows queried during a billing period."""

    rows_queried: int
    period_start: str
    period_end: str


@dataclass
class DatabaseID:
    """Identifying information for a database."""

    id: str
    name: str


@dataclass
class Database:
    """Database metadata as reported by the API."""

    id: str
    name: str
    date_created: datetime | None
    is_private: bool
    role: str
    storage_limit_bytes: int
    storage_usage_bytes: int
    usage_current: Usage | None = None
    usage_previous: Usage | None = None
