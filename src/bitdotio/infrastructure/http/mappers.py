"""JSON -> entity mapping for API responses."""

from datetime import datetime
from typing import Any

from bitdotio.domain.entities import (
    Credentials,
    Database,
    DatabaseID,
    ExportJob,
    ImportJob,
    QueryResult,
    ServiceAccount,
    Usage,
)
from bitdotio.domain.exceptions import ResponseDecodeError


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp; None and empty strings map to None."""
    if not value:
        return None
    return datetime.fromisoformat(value)


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ResponseDecodeError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def to_usage(d: dict[str, Any] | None) -> Usage | None:
    if not d:
        return None
    return Usage(
        rows_queried=d.get("rows_queried", 0),
        period_start=d.get("period_start", ""),
        period_end=d.get("period_end", ""),
    )


def to_database_id(d: dict[str, Any]) -> DatabaseID:
    return DatabaseID(id=d.get("id", ""), name=d.get("name", ""))


def to_database(data: Any) -> Database:
    d = _require_mapping(data, "database")
    return Database(
        id=d.get("id", ""),
        name=d.get("name", ""),
        date_created=parse_datetime(d.get("date_created")),
        is_private=d.get("is_private", True),
        role=d.get("role", ""),
        storage_limit_bytes=d.get("storage_limit_bytes", 0),
        storage_usage_bytes=d.get("storage_usage_bytes", 0),
        usage_current=to_usage(d.get("usage_current")),
        usage_previous=to_usage(d.get("usage_previous")),
    )


def to_credentials(data: Any) -> Credentials:
    d = _require_mapping(data, "credentials")
    return Credentials(username=d.get("username", ""), api_key=d.get("api_key", ""))


def to_service_account(data: Any) -> ServiceAccount:
    d = _require_mapping(data, "service account")
    return ServiceAccount(
        id=d.get("id", ""),
        name=d.get("name", ""),
        date_created=parse_datetime(d.get("date_created")),
        role=d.get("role", ""),
        databases=[to_database_id(db) for db in d.get("databases") or []],
        token_count=d.get("token_count", 0),
        active_token_count=d.get("active_token_count", 0),
    )


def _transfer_fields(d: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": d.get("id", ""),
        "date_created": parse_datetime(d.get("date_created")),
        "date_finished": parse_datetime(d.get("date_finished")),
        "state": d.get("state", ""),
        "retries": d.get("retries", 0),
        "error_type": d.get("error_type"),
        "error_id": d.get("error_id"),
        "status_url": d.get("status_url", ""),
    }


def to_import_job(data: Any) -> ImportJob:
    d = _require_mapping(data, "import job")
    return ImportJob(**_transfer_fields(d))


def to_export_job(data: Any) -> ExportJob:
    d = _require_mapping(data, "export job")
    return ExportJob(
        **_transfer_fields(d),
        export_format=d.get("export_format"),
        file_name=d.get("file_name"),
        download_url=d.get("download_url"),
    )


def to_query_result(data: Any) -> QueryResult:
    d = _require_mapping(data, "query result")
    return QueryResult(
        query_string=d.get("query_string", ""),
        metadata=d.get("metadata") or {},
        data=d.get("data") or [],
    )
