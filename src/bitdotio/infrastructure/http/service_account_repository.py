"""HTTP service account repository implementation."""

from urllib.parse import quote

from bitdotio.application.ports import APIClient
from bitdotio.domain.entities import Credentials, ServiceAccount
from bitdotio.infrastructure.http.mappers import to_credentials, to_service_account


class HttpServiceAccountRepository:
    """Service account administration (``service-account/``)."""

    def __init__(self, client: APIClient) -> None:
        self._client = client

    async def list(self) -> list[ServiceAccount]:
        data = await self._client.call("GET", "service-account/")
        return [to_service_account(s) for s in (data or {}).get("service_accounts") or []]

    async def get(self, service_account_id: str) -> ServiceAccount:
        data = await self._client.call("GET", f"service-account/{quote(service_account_id)}")
        return to_service_account(data)

    async def create_key(self, service_account_id: str) -> Credentials:
        data = await self._client.call(
            "POST", f"service-account/{quote(service_account_id)}/api-key/"
        )
        return to_credentials(data)

    async def revoke_keys(self, service_account_id: str) -> None:
        """Revoke every key of the service account."""
        await self._client.call("DELETE", f"service-account/{quote(service_account_id)}/api-key/")
