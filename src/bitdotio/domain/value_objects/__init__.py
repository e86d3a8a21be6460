"""Domain value objects."""

from bitdotio.domain.value_objects.export_format import ExportFormat
from bitdotio.domain.value_objects.infer_header import InferHeader
from bitdotio.domain.value_objects.qualified_name import QualifiedName

__all__ = [
    "ExportFormat",
    "InferHeader",
    "QualifiedName",
]
