from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class ColumnFilter(BaseModel):
    """A single-column row filter understood by every data store."""
    column: str = Field(description="Column the filter applies to")
    op: Literal["eq", "not_null"] = Field(default="eq", description="Equality or 'is not null'")
    value: Optional[Any] = Field(default=None, description="Value compared against for 'eq'")

    @model_validator(mode="after")
    def _check_value(self) -> "ColumnFilter":
        if self.op == "eq" and self.value is None:
            raise ValueError("An 'eq' filter needs a value; use op='not_null' for null checks")
        return self

    @classmethod
    def eq(cls, column: str, value: Any) -> "ColumnFilter":
        return cls(column=column, op="eq", value=value)

    @classmethod
    def not_null(cls, column: str) -> "ColumnFilter":
        return cls(column=column, op="not_null")


class OrderBy(BaseModel):
    """Single-column sort."""
    column: str = Field(description="Column to sort on")
    ascending: bool = Field(default=True, description="Sort direction")
