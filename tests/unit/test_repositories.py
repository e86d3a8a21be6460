"""Unit tests for HTTP repositories and response mapping."""

from datetime import UTC, datetime

import pytest

from bitdotio.application.dto import DatabaseConfig
from bitdotio.domain.exceptions import ResponseDecodeError
from bitdotio.domain.value_objects import QualifiedName
from bitdotio.infrastructure.http.credential_repository import HttpCredentialRepository
from bitdotio.infrastructure.http.database_repository import HttpDatabaseRepository
from bitdotio.infrastructure.http.mappers import parse_datetime, to_database
from bitdotio.infrastructure.http.query_repository import HttpQueryRepository
from bitdotio.infrastructure.http.service_account_repository import (
    HttpServiceAccountRepository,
)
from bitdotio.infrastructure.http.transfer_job_repository import HttpTransferJobRepository

from tests.conftest import FakeAPIClient

DATABASE = {
    "id": "db-1",
    "name": "alice/iris",
    "date_created": "2022-10-31T09:15:00Z",
    "is_private": False,
    "role": "owner",
    "storage_limit_bytes": 3221225472,
    "storage_usage_bytes": 8192,
    "usage_current": {
        "rows_queried": 12,
        "period_start": "2022-10-01",
        "period_end": "2022-10-31",
    },
}


# --- mappers ---


def test_parse_datetime() -> None:
    """ISO timestamps with Z are parsed as UTC; empty values map to None."""
    assert parse_datetime("2022-10-31T09:15:00Z") == datetime(2022, 10, 31, 9, 15, tzinfo=UTC)
    assert parse_datetime(None) is None
    assert parse_datetime("") is None


def test_to_database_full() -> None:
    """Database JSON maps to the entity, including nested usage."""
    db = to_database(DATABASE)

    assert db.name == "alice/iris"
    assert db.is_private is False
    assert db.storage_limit_bytes == 3221225472
    assert db.usage_current is not None
    assert db.usage_current.rows_queried == 12
    assert db.usage_previous is None


def test_to_database_rejects_non_object() -> None:
    """Non-object payloads raise ResponseDecodeError."""
    with pytest.raises(ResponseDecodeError, match="database"):
        to_database(["not", "a", "dict"])


# --- databases ---


@pytest.mark.asyncio
async def test_list_databases(fake_api: FakeAPIClient) -> None:
    """list unwraps the databases array."""
    fake_api.respond("GET", "db/", {"databases": [DATABASE, {**DATABASE, "id": "db-2"}]})

    dbs = await HttpDatabaseRepository(fake_api).list()

    assert [d.id for d in dbs] == ["db-1", "db-2"]


@pytest.mark.asyncio
async def test_create_database_sends_config(fake_api: FakeAPIClient) -> None:
    """create posts the config payload; is_private is always present."""
    fake_api.respond("POST", "db/", DATABASE)

    await HttpDatabaseRepository(fake_api).create(DatabaseConfig(name="iris"))

    assert fake_api.calls[0]["body"] == {"name": "iris", "is_private": True}


@pytest.mark.asyncio
async def test_database_paths_are_quoted(fake_api: FakeAPIClient) -> None:
    """get/update/delete address db/{owner}/{name} with path quoting."""
    repo = HttpDatabaseRepository(fake_api)
    fake_api.respond("GET", "db/alice/my%20db", DATABASE)
    fake_api.respond("PATCH", "db/alice/my%20db", DATABASE)

    await repo.get("alice", "my db")
    await repo.update("alice", "my db", DatabaseConfig(storage_limit_bytes=1024))
    await repo.delete("alice", "my db")

    assert [(c["method"], c["path"]) for c in fake_api.calls] == [
        ("GET", "db/alice/my%20db"),
        ("PATCH", "db/alice/my%20db"),
        ("DELETE", "db/alice/my%20db"),
    ]
    assert fake_api.calls[1]["body"] == {"is_private": True, "storage_limit_bytes": 1024}


# --- credentials / service accounts ---


@pytest.mark.asyncio
async def test_create_key(fake_api: FakeAPIClient) -> None:
    """create_key posts to api-key/ and hides the key in repr."""
    fake_api.respond("POST", "api-key/", {"username": "alice", "api_key": "v2_secret"})

    creds = await HttpCredentialRepository(fake_api).create_key()

    assert creds.api_key == "v2_secret"
    assert "v2_secret" not in repr(creds)


@pytest.mark.asyncio
async def test_service_account_operations(fake_api: FakeAPIClient) -> None:
    """Service account calls hit service-account/ paths."""
    account = {
        "id": "sa-1",
        "name": "etl",
        "date_created": "2022-10-31T09:15:00+00:00",
        "role": "writer",
        "databases": [{"id": "db-1", "name": "alice/iris"}],
        "token_count": 2,
        "active_token_count": 1,
    }
    fake_api.respond("GET", "service-account/", {"service_accounts": [account]})
    fake_api.respond("GET", "service-account/sa-1", account)
    fake_api.respond("POST", "service-account/sa-1/api-key/", {"username": "etl", "api_key": "k"})
    repo = HttpServiceAccountRepository(fake_api)

    accounts = await repo.list()
    account_entity = await repo.get("sa-1")
    creds = await repo.create_key("sa-1")
    await repo.revoke_keys("sa-1")

    assert accounts[0].databases[0].name == "alice/iris"
    assert account_entity.active_token_count == 1
    assert creds.username == "etl"
    assert (fake_api.calls[-1]["method"], fake_api.calls[-1]["path"]) == (
        "DELETE",
        "service-account/sa-1/api-key/",
    )


# --- transfer jobs / query ---


@pytest.mark.asyncio
async def test_get_import_and_export(fake_api: FakeAPIClient, job_payload) -> None:
    """Job status lookups use import/{id} and export/{id}."""
    fake_api.respond("GET", "import/job-1", job_payload)
    fake_api.respond(
        "GET",
        "export/job-1",
        {**job_payload, "state": "DONE", "download_url": "https://dl.example/x.csv"},
    )
    repo = HttpTransferJobRepository(fake_api)

    imported = await repo.get_import("job-1")
    exported = await repo.get_export("job-1")

    assert imported.state == "RUNNING"
    assert imported.date_finished is None
    assert exported.download_url == "https://dl.example/x.csv"


@pytest.mark.asyncio
async def test_query(fake_api: FakeAPIClient) -> None:
    """query posts the qualified name and SQL to query/."""
    fake_api.respond(
        "POST",
        "query/",
        {"query_string": "select 1", "metadata": {"?column?": "integer"}, "data": [[1]]},
    )

    result = await HttpQueryRepository(fake_api).execute(
        QualifiedName.parse("alice/iris"), "select 1"
    )

    assert result.data == [[1]]
    assert fake_api.calls[0]["body"] == {
        "database_name": "alice/iris",
        "query_string": "select 1",
    }
