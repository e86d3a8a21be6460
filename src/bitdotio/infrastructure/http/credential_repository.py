"""HTTP credential repository implementation."""

from bitdotio.application.ports import APIClient
from bitdotio.domain.entities import Credentials
from bitdotio.infrastructure.http.mappers import to_credentials


class HttpCredentialRepository:
    """Key issuance for the requesting account (``api-key/``)."""

    def __init__(self, client: APIClient) -> None:
        self._client = client

    async def create_key(self) -> Credentials:
        """Create a key with the same permissions as the requester."""
        data = await self._client.call("POST", "api-key/")
        return to_credentials(data)
