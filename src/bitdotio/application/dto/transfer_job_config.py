"""Import and export job DTOs."""

from dataclasses import dataclass
from typing import IO, Any

from bitdotio.domain.value_objects import ExportFormat, InferHeader


@dataclass
class ImportJobConfig:
    """Options for a new import job. Exactly one of ``file``/``file_url``.

    The caller owns ``file`` and is responsible for closing it.
    """

    schema_name: str | None = None
    infer_header: InferHeader | str | None = None
    file_url: str | None = None
    file: IO[bytes] | bytes | None = None


@dataclass
class ExportJobConfig:
    """Options for a new export job. Exactly one of ``query_string``/``table_name``."""

    query_string: str | None = None
    table_name: str | None = None
    schema_name: str | None = None
    file_name: str | None = None
    export_format: ExportFormat | str = ExportFormat.CSV

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"export_format": str(self.export_format)}
        for key in ("query_string", "table_name", "schema_name", "file_name"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        return payload
