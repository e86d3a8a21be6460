"""Export file formats."""

from enum import StrEnum


class ExportFormat(StrEnum):
    """File formats supported by export jobs."""

    CSV = "csv"
    JSON = "json"
    XLS = "xls"
    PARQUET = "parquet"
