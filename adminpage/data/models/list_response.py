from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class StringList(BaseModel):
    """Generic container for lists of unique string values."""
    values: List[str] = Field(description="List of unique string values")

    @classmethod
    def from_values(cls, values) -> "StringList":
        """Distinct, non-empty values in sorted order."""
        unique = {v for v in values if v is not None and str(v) != ""}
        return cls(values=sorted(str(v) for v in unique))
