"""Column metadata schema."""

from typing import Optional

from pydantic import BaseModel, Field


class ColumnMeta(BaseModel):
    """One documented column of a view."""

    name: str = Field(..., min_length=1)
    type: str
    nullable: bool
    confidential: bool
    description: str
    notes: Optional[str] = None
