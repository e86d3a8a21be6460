"""Fully-qualified database name."""

from dataclasses import dataclass

from bitdotio.domain.exceptions import ValidationError


@dataclass(frozen=True)
class QualifiedName:
    """Database name of the form ``owner/database``."""

    owner: str
    database: str

    def __post_init__(self) -> None:
        if not self.owner or not self.database:
            raise ValidationError("owner and database must be non-empty")
        if "/" in self.owner or "/" in self.database:
            raise ValidationError("owner and database must not contain '/'")

    @classmethod
    def parse(cls, name: str) -> "QualifiedName":
        """Parse ``owner/database``; raise ValidationError otherwise."""
        owner, sep, database = name.partition("/")
        if not sep:
            raise ValidationError(f"database name must look like 'owner/database', got {name!r}")
        return cls(owner=owner, database=database)

    def __str__(self) -> str:
        return f"{self.owner}/{self.database}"
