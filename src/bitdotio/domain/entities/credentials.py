"""Credentials entity."""

from dataclasses import dataclass


@dataclass
class Credentials:
    """API key (also the database password) for a personal or service account."""

    username: str
    api_key: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, api_key='***')"
