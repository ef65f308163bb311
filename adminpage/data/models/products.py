from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


EDITABLE_FIELDS = (
    "product",
    "image",
    "company",
    "model",
    "price",
    "category",
    "sub_category",
    "description",
)

REQUIRED_FIELDS = ("product", "price")


class Product(BaseModel):
    """A row of the products table. The id is assigned by the store."""
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    id: int = Field(description="Store-assigned product identifier")
    product: Optional[str] = Field(default=None, description="Product name")
    image: Optional[str] = Field(default=None, description="Image URL")
    company: Optional[str] = Field(default=None, description="Manufacturer or brand")
    model: Optional[str] = Field(default=None, description="Model name or number")
    price: Optional[Union[int, float, str]] = Field(default=None, description="Listed price")
    category: Optional[str] = Field(default=None, description="Product category")
    sub_category: Optional[str] = Field(default=None, description="Product sub-category")
    description: Optional[str] = Field(default=None, description="Free-text description")


class ProductDraft(BaseModel):
    """In-progress form input for a product being created or edited."""
    model_config = ConfigDict(validate_assignment=True, protected_namespaces=())

    product: str = ""
    image: str = ""
    company: str = ""
    model: str = ""
    price: str = ""
    category: str = ""
    sub_category: str = ""
    description: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        values = {}
        for field in EDITABLE_FIELDS:
            value = getattr(product, field)
            values[field] = "" if value is None else str(value)
        return cls(**values)

    def missing_fields(self) -> list[str]:
        return [f for f in REQUIRED_FIELDS if not getattr(self, f).strip()]

    def to_row(self) -> dict:
        """Column values for an insert or a full update of the editable fields."""
        return {field: getattr(self, field) for field in EDITABLE_FIELDS}
