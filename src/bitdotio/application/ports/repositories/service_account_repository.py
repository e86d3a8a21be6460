"""Service account repository port."""

from typing import Protocol

from bitdotio.domain.entities import Credentials, ServiceAccount


class ServiceAccountRepository(Protocol):
    """Port for service account administration."""

    async def list(self) -> list[ServiceAccount]: ...

    async def get(self, service_account_id: str) -> ServiceAccount: ...

    async def create_key(self, service_account_id: str) -> Credentials: ...

    async def revoke_keys(self, service_account_id: str) -> None: ...
