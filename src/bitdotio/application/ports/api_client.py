"""API client port - authenticated calls to the developer API."""

from typing import IO, Any, Protocol

FileParts = dict[str, tuple[str, IO[bytes] | bytes]]


class APIClient(Protocol):
    """Port for making developer API requests. Returns decoded JSON."""

    async def call(self, method: str, path: str, body: Any = None) -> Any: ...

    async def call_multipart(
        self,
        method: str,
        path: str,
        fields: dict[str, str],
        files: FileParts | None = None,
    ) -> Any: ...

    async def aclose(self) -> None: ...
