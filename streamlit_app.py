import pandas as pd
import streamlit as st

from adminpage.config import get_config
from adminpage.controller import SUBMIT_ACTION, ProductAdminController, delete_action
from adminpage.data.models import EDITABLE_FIELDS, ProductDraft
from adminpage.data.util import get_data_store
from adminpage.form_sync import draft_widget_updates, widget_key
from adminpage.logging import get_logger

st.set_page_config(page_title="Admin Dashboard", layout="wide")

config = get_config()
logger = get_logger(__name__)

NOTICE_ICONS = {"success": "✅", "info": "ℹ️", "warning": "⚠️", "error": "❌"}
TABLE_COLUMNS = ["id", "product", "company", "model", "price", "category", "sub_category", "description"]


# -----------------------------------------------------------------------------
# Controller lives in the session; widgets mirror its state
# -----------------------------------------------------------------------------

def notify(level: str, message: str) -> None:
    st.session_state.notices.append((level, message))


def sync_widgets(state, force: bool = False) -> None:
    # Only called from callbacks or before widgets render
    current = None if force else {widget_key(f): st.session_state.get(widget_key(f)) for f in EDITABLE_FIELDS}
    for key, value in draft_widget_updates(state.draft, current).items():
        st.session_state[key] = value


if "controller" not in st.session_state:
    st.session_state.notices = []
    st.session_state.pending_delete = None
    controller = ProductAdminController(get_data_store(), table=config.products_table, notify=notify)
    controller.subscribe(sync_widgets)
    logger.info(f"Admin page started against '{config.store_backend}' store")
    controller.start()
    st.session_state.controller = controller

controller: ProductAdminController = st.session_state.controller


# -----------------------------------------------------------------------------
# Callbacks
# -----------------------------------------------------------------------------

def on_filter_change() -> None:
    controller.set_filter(st.session_state.filter_select)


def on_submit() -> None:
    draft = ProductDraft(**{f: st.session_state.get(widget_key(f), "") or "" for f in EDITABLE_FIELDS})
    controller.submit_draft(draft)


def on_cancel_edit() -> None:
    controller.cancel_edit()


def on_edit(product) -> None:
    st.session_state.pending_delete = None
    controller.begin_edit(product)
    # Unsubmitted form text is not in the session, so rewrite every field
    sync_widgets(controller.state, force=True)


def on_ask_delete(product_id: int) -> None:
    st.session_state.pending_delete = product_id


def on_confirm_delete(confirmed: bool) -> None:
    product_id = st.session_state.pending_delete
    st.session_state.pending_delete = None
    controller.delete_product(product_id, confirm=lambda message: confirmed)


# -----------------------------------------------------------------------------
# Page
# -----------------------------------------------------------------------------

st.title("Admin Dashboard")

for level, message in st.session_state.notices:
    st.toast(message, icon=NOTICE_ICONS.get(level))
st.session_state.notices = []

state = controller.state

# Filter
c1, c2 = st.columns([4, 1])
options = [""] + state.sub_categories
if state.filter and state.filter not in options:
    options.append(state.filter)
c1.selectbox(
    "Sub-category",
    options,
    index=options.index(state.filter),
    format_func=lambda v: v or "All Sub-categories",
    key="filter_select",
    on_change=on_filter_change,
)
c2.button("Refresh", on_click=controller.refresh, use_container_width=True)

# Add / Edit form
with st.form("product_form"):
    cols = st.columns(4)
    for i, field in enumerate(EDITABLE_FIELDS):
        cols[i % 4].text_input(field.replace("_", " "), key=widget_key(field), placeholder=field.replace("_", " "))
    b1, b2 = st.columns([1, 5])
    b1.form_submit_button(
        "Update Product" if state.editing else "Add Product",
        on_click=on_submit,
        disabled=controller.is_busy(SUBMIT_ACTION),
    )
    if state.editing:
        b2.form_submit_button("Cancel Edit", on_click=on_cancel_edit)

# Delete confirmation
if st.session_state.pending_delete is not None:
    st.warning(f"Are you sure you want to delete product {st.session_state.pending_delete}?")
    d1, d2, _ = st.columns([1, 1, 6])
    d1.button("Delete", type="primary", on_click=on_confirm_delete, args=(True,))
    d2.button("Keep", on_click=on_confirm_delete, args=(False,))

# Products table
if state.loading:
    st.write("Loading...")
else:
    st.markdown(f"### Products ({len(state.products)})")
    if state.products:
        df = pd.DataFrame([p.model_dump() for p in state.products])[TABLE_COLUMNS]
        st.dataframe(df, use_container_width=True, hide_index=True)

    for p in state.products:
        row = st.columns([6, 1, 1])
        row[0].write(f"#{p.id} · {p.product or ''} · {p.company or ''} {p.model or ''}")
        row[1].button("Edit", key=f"edit_{p.id}", on_click=on_edit, args=(p,))
        row[2].button(
            "Delete",
            key=f"delete_{p.id}",
            on_click=on_ask_delete,
            args=(p.id,),
            disabled=controller.is_busy(delete_action(p.id)),
        )

with st.expander("Data source"):
    st.write(
        f"Products are read from the **{config.store_backend}** store, table `{config.products_table}`. "
        "Every interaction re-queries the store; nothing is cached on the page."
    )
