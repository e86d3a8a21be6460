"""Credential repository port."""

from typing import Protocol

from bitdotio.domain.entities import Credentials


class CredentialRepository(Protocol):
    """Port for issuing keys for the requesting account."""

    async def create_key(self) -> Credentials: ...
