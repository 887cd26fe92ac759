"""Schema version snapshot and version-check result schemas."""

import enum
from typing import List, Optional

from pydantic import BaseModel

from schema_docs.schemas.column import ColumnMeta


class SchemaVersion(BaseModel):
    """
    Versioned snapshot of a view's columns, as stored in one schema file.

    Files are only decoded into this model once their version string has
    passed the version check; drafts with a malformed version are dropped
    before their other fields are looked at.
    """

    version: str
    view: str
    columns: List[ColumnMeta]


class VersionStatus(str, enum.Enum):
    """Outcome of a version-string check."""

    VALID = "valid"
    REJECTED = "rejected"


class VersionCheck(BaseModel):
    """Tagged result of checking a raw version value."""

    version: Optional[str] = None
    status: VersionStatus
    reason: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status is VersionStatus.VALID
