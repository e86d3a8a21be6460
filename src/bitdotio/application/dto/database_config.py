"""Database create/update DTO."""

from dataclasses import dataclass
from typing import Any


@dataclass
class DatabaseConfig:
    """Body for creating or updating a database.

    ``is_private`` is always sent and defaults to private, so an omitted
    value never publishes a database by accident.
    """

    name: str | None = None
    is_private: bool = True
    storage_limit_bytes: int | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"is_private": self.is_private}
        if self.name:
            payload["name"] = self.name
        if self.storage_limit_bytes:
            payload["storage_limit_bytes"] = self.storage_limit_bytes
        return payload
