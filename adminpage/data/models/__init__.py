from .data_filters import (
    ColumnFilter,
    OrderBy,
)

from .products import (
    EDITABLE_FIELDS,
    REQUIRED_FIELDS,
    Product,
    ProductDraft,
)
from .list_response import StringList

__all__ = [
    # Filter classes
    "ColumnFilter",
    "OrderBy",
    # Product models
    "EDITABLE_FIELDS",
    "REQUIRED_FIELDS",
    "Product",
    "ProductDraft",
    # List response models
    "StringList",
]
