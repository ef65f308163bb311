"""Admin page state and the pure functions that move it forward.

Every function takes an AdminState and returns a new one; nothing here
touches the data store, so the page logic can be exercised without a UI.
"""
from __future__ import annotations

from typing import FrozenSet, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .data.models import EDITABLE_FIELDS, Product, ProductDraft


class AdminState(BaseModel):
    """Everything the presentation layer renders."""
    model_config = ConfigDict(frozen=True)

    products: List[Product] = Field(default_factory=list, description="Current product list, sorted by id")
    loading: bool = Field(default=False, description="A product fetch is in progress")
    sub_categories: List[str] = Field(default_factory=list, description="Options for the filter control")
    filter: str = Field(default="", description="Active sub-category filter; empty means all")
    draft: ProductDraft = Field(default_factory=ProductDraft, description="Form input")
    editing_id: Optional[int] = Field(default=None, description="Id of the product being edited")
    busy: FrozenSet[str] = Field(default_factory=frozenset, description="Actions with a store call in flight")

    @property
    def editing(self) -> bool:
        return self.editing_id is not None


def start_loading(state: AdminState) -> AdminState:
    return state.model_copy(update={"loading": True})


def finish_loading(state: AdminState) -> AdminState:
    return state.model_copy(update={"loading": False})


def with_products(state: AdminState, products: Sequence[Product]) -> AdminState:
    return state.model_copy(update={"products": list(products)})


def with_sub_categories(state: AdminState, values: Sequence[str]) -> AdminState:
    return state.model_copy(update={"sub_categories": list(values)})


def with_filter(state: AdminState, value: Optional[str]) -> AdminState:
    return state.model_copy(update={"filter": value or ""})


def with_draft_field(state: AdminState, field: str, value: str) -> AdminState:
    if field not in EDITABLE_FIELDS:
        raise KeyError(field)
    draft = state.draft.model_copy(update={field: "" if value is None else str(value)})
    return state.model_copy(update={"draft": draft})


def begin_edit(state: AdminState, product: Product) -> AdminState:
    """Load a product into the draft and enter edit mode."""
    return state.model_copy(
        update={"draft": ProductDraft.from_product(product), "editing_id": product.id}
    )


def reset_form(state: AdminState) -> AdminState:
    """Back to create mode with an empty draft."""
    return state.model_copy(update={"draft": ProductDraft(), "editing_id": None})


def mark_busy(state: AdminState, action: str) -> AdminState:
    return state.model_copy(update={"busy": state.busy | {action}})


def clear_busy(state: AdminState, action: str) -> AdminState:
    return state.model_copy(update={"busy": state.busy - {action}})
