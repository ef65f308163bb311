import pytest

from adminpage.data.models import Product, ProductDraft
from adminpage import state as s


def test_defaults():
    st = s.AdminState()
    assert st.products == []
    assert st.loading is False
    assert st.filter == ""
    assert st.draft == ProductDraft()
    assert st.editing_id is None
    assert not st.editing

def test_updates_return_new_state():
    st = s.AdminState()
    loading = s.start_loading(st)
    assert loading.loading and not st.loading
    assert s.finish_loading(loading).loading is False

def test_with_filter_normalizes_none():
    assert s.with_filter(s.AdminState(filter="A"), None).filter == ""

def test_with_draft_field():
    st = s.with_draft_field(s.AdminState(), "product", "Widget")
    assert st.draft.product == "Widget"
    with pytest.raises(KeyError):
        s.with_draft_field(st, "colour", "red")

def test_begin_edit_fills_draft_with_empty_strings():
    product = Product(id=5, product="Widget", price=10.5, sub_category=None)
    st = s.begin_edit(s.AdminState(), product)
    assert st.editing_id == 5
    assert st.editing
    assert st.draft.product == "Widget"
    assert st.draft.price == "10.5"
    assert st.draft.sub_category == ""
    assert st.draft.description == ""

def test_reset_form_leaves_list_alone():
    products = [Product(id=1, product="Widget")]
    st = s.begin_edit(s.with_products(s.AdminState(), products), products[0])
    reset = s.reset_form(st)
    assert reset.editing_id is None
    assert reset.draft == ProductDraft()
    assert reset.products == products

def test_busy_actions():
    st = s.mark_busy(s.AdminState(), "submit")
    st = s.mark_busy(st, "delete:3")
    assert st.busy == {"submit", "delete:3"}
    assert s.clear_busy(st, "submit").busy == {"delete:3"}
