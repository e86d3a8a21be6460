"""Header inference modes for import jobs."""

from enum import StrEnum


class InferHeader(StrEnum):
    """How an import job decides whether the first row is a header."""

    AUTO = "auto"
    FIRST_ROW = "first_row"
    HEADER = "header"
