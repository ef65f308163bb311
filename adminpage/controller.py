from __future__ import annotations

from typing import Any, Callable, Dict, List, Literal, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .config import get_config
from .data.interface import DataStore
from .data.models import ColumnFilter, OrderBy, Product, ProductDraft, StringList
from .errors import AdminPageError, ConfirmationDeclined, StoreError, ValidationError
from .logging import get_logger
from .state import (
    AdminState,
    begin_edit,
    clear_busy,
    finish_loading,
    mark_busy,
    reset_form,
    start_loading,
    with_draft_field,
    with_filter,
    with_products,
    with_sub_categories,
)


NoticeLevel = Literal["info", "success", "warning", "error"]
Notifier = Callable[[NoticeLevel, str], None]
Confirmer = Callable[[str], bool]
Listener = Callable[[AdminState], None]

SUBMIT_ACTION = "submit"
DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this product?"

_UNSET: Any = object()


def delete_action(product_id: int) -> str:
    return f"delete:{product_id}"


class ProductAdminController:
    """
    Drives the product admin page.

    Keeps a read-through copy of the products table (and the sub-category
    options derived from it) in an AdminState, and turns form and table
    actions into data store calls. User-facing messages go through
    `notify`, destructive actions are gated by `confirm`.
    """

    def __init__(
        self,
        store: DataStore,
        table: Optional[str] = None,
        notify: Optional[Notifier] = None,
        confirm: Optional[Confirmer] = None,
    ) -> None:
        self.store = store
        self.table = table or get_config().products_table
        self.logger = get_logger(__name__)
        self.notify = notify or self._log_notice
        # Without a confirmation hook nothing gets deleted
        self.confirm = confirm or (lambda message: False)
        self._state = AdminState()
        self._listeners: List[Listener] = []
        self.last_error: Optional[AdminPageError] = None

    # ---------- state plumbing ----------

    @property
    def state(self) -> AdminState:
        return self._state

    def _set_state(self, state: AdminState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with the new state after every change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def is_busy(self, action: str) -> bool:
        return action in self._state.busy

    def _log_notice(self, level: NoticeLevel, message: str) -> None:
        self.logger.log(level.upper() if level in ("warning", "error", "success") else "INFO", message)

    def _report(self, error: AdminPageError, level: NoticeLevel, message: str) -> None:
        """Record a failed action, log it and tell the user."""
        self.last_error = error
        if level == "error":
            self.logger.error(str(error))
        else:
            self.logger.warning(str(error))
        self.notify(level, message)

    def _decode_products(self, rows) -> List[Product]:
        try:
            return [Product.model_validate(row) for row in rows]
        except PydanticValidationError as e:
            raise StoreError("select", self.table, f"malformed product row: {e.error_count()} error(s)") from e

    # ---------- fetching ----------

    def start(self) -> None:
        """Initial load: every product plus the filter options."""
        self.set_filter("")

    def set_filter(self, value: Optional[str]) -> None:
        """Change the sub-category filter and reload both the list and the options."""
        self._set_state(with_filter(self._state, value))
        self.load_products()
        self.load_sub_category_options()

    def refresh(self) -> List[Product]:
        return self.load_products()

    def load_products(self, sub_category: Optional[str] = None) -> List[Product]:
        """Fetch products ordered by id, restricted to `sub_category` when it is non-empty.

        Without an argument the active filter is used. A failed fetch keeps
        the previous list.
        """
        if sub_category is not None:
            self._set_state(with_filter(self._state, sub_category))
        active = self._state.filter
        filters = [ColumnFilter.eq("sub_category", active)] if active else []

        self._set_state(start_loading(self._state))
        try:
            rows = self.store.select(self.table, "*", filters, OrderBy(column="id"))
            products = self._decode_products(rows)
        except StoreError as e:
            self._report(e, "error", "Failed to load products.")
        else:
            self._set_state(with_products(self._state, products))
        finally:
            self._set_state(finish_loading(self._state))
        return self._state.products

    def load_sub_category_options(self) -> List[str]:
        """Distinct non-null sub-categories across the whole table."""
        try:
            rows = self.store.select(self.table, "sub_category", [ColumnFilter.not_null("sub_category")])
        except StoreError as e:
            self._report(e, "error", "Failed to load sub-categories.")
            return self._state.sub_categories
        options = StringList.from_values(row.get("sub_category") for row in rows).values
        self._set_state(with_sub_categories(self._state, options))
        return options

    # ---------- form ----------

    def update_draft(self, field: str, value: str) -> None:
        self._set_state(with_draft_field(self._state, field, value))

    def begin_edit(self, product: Union[Product, Dict[str, Any]]) -> None:
        if not isinstance(product, Product):
            product = Product.model_validate(product)
        self.logger.debug(f"Editing product {product.id}")
        self._set_state(begin_edit(self._state, product))

    def cancel_edit(self) -> None:
        self._set_state(reset_form(self._state))

    def submit_draft(
        self,
        draft: Optional[ProductDraft] = None,
        editing_id: Optional[int] = _UNSET,
    ) -> Optional[Product]:
        """Insert the draft, or update the product being edited.

        Returns the stored product, or None when nothing was saved. On
        failure the draft and edit session stay as they were so the user
        can retry.
        """
        if self.is_busy(SUBMIT_ACTION):
            self.logger.warning("Submit ignored: a save is already in progress")
            self.notify("warning", "A save is already in progress.")
            return None

        if draft is not None:
            self._set_state(self._state.model_copy(update={"draft": draft}))
        draft = self._state.draft
        if editing_id is _UNSET:
            editing_id = self._state.editing_id
        updating = editing_id is not None

        missing = draft.missing_fields()
        if missing:
            self._report(ValidationError(missing), "warning", "Please fill in product name and price.")
            return None

        self._set_state(mark_busy(self._state, SUBMIT_ACTION))
        try:
            if updating:
                rows = self.store.update(self.table, draft.to_row(), [ColumnFilter.eq("id", editing_id)])
                if not rows:
                    raise StoreError("update", self.table, f"no product with id {editing_id}")
            else:
                rows = self.store.insert(self.table, [draft.to_row()])
        except StoreError as e:
            self._report(e, "error", "Failed to update product." if updating else "Failed to add product.")
            return None
        finally:
            self._set_state(clear_busy(self._state, SUBMIT_ACTION))

        saved = Product.model_validate(rows[0]) if rows else None
        if updating:
            self.logger.info(f"Updated product {editing_id}")
            self.notify("success", "Product updated successfully!")
        else:
            self.logger.info(f"Inserted product {saved.id if saved else '?'}")
            self.notify("success", "Product added successfully!")

        self.load_products()
        self._set_state(reset_form(self._state))
        return saved

    # ---------- table actions ----------

    def delete_product(self, product_id: int, confirm: Optional[Confirmer] = None) -> bool:
        """Delete a product after the user confirms. Returns True when a row was deleted."""
        action = delete_action(product_id)
        if self.is_busy(action):
            self.logger.warning(f"Delete of product {product_id} ignored: already in progress")
            self.notify("warning", "This product is already being deleted.")
            return False

        confirm = confirm or self.confirm
        try:
            if not confirm(DELETE_CONFIRM_MESSAGE):
                raise ConfirmationDeclined(f"delete of product {product_id}")
        except ConfirmationDeclined:
            self.logger.debug(f"Delete of product {product_id} cancelled")
            return False

        self._set_state(mark_busy(self._state, action))
        try:
            rows = self.store.delete(self.table, [ColumnFilter.eq("id", product_id)])
            if not rows:
                raise StoreError("delete", self.table, f"no product with id {product_id}")
        except StoreError as e:
            self._report(e, "error", "Failed to delete product.")
            return False
        finally:
            self._set_state(clear_busy(self._state, action))

        self.logger.info(f"Deleted product {product_id}")
        self.notify("success", "Product deleted successfully!")
        if self._state.editing_id == product_id:
            # The draft points at a row that no longer exists
            self._set_state(reset_form(self._state))
        self.load_products()
        return True
