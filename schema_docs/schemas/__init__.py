"""Pydantic schemas for schema files and check results."""

from schema_docs.schemas.column import ColumnMeta
from schema_docs.schemas.schema_version import SchemaVersion, VersionCheck, VersionStatus

__all__ = [
    "ColumnMeta",
    "SchemaVersion",
    "VersionCheck",
    "VersionStatus",
]
