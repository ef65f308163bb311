import pytest

from adminpage.data.backends.csv_backend import CsvDataStore
from adminpage.data.models import ColumnFilter, OrderBy
from adminpage.errors import StoreError

def test_missing_data_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvDataStore(data_dir=tmp_path / "nope")

def test_select_orders_by_id(csv_store):
    rows = csv_store.select("products", order=OrderBy(column="id"))
    assert [r["id"] for r in rows] == [1, 2, 3, 4]
    assert rows[0]["product"] == "Widget"
    assert rows[0]["price"] == "10"

def test_select_descending(csv_store):
    rows = csv_store.select("products", order=OrderBy(column="id", ascending=False))
    assert [r["id"] for r in rows] == [4, 3, 2, 1]

def test_select_eq_filter(csv_store):
    rows = csv_store.select("products", filters=[ColumnFilter.eq("sub_category", "A")], order=OrderBy(column="id"))
    assert [r["id"] for r in rows] == [1, 4]

def test_select_eq_on_id(csv_store):
    rows = csv_store.select("products", filters=[ColumnFilter.eq("id", 2)])
    assert [r["product"] for r in rows] == ["Gadget"]

def test_select_not_null_skips_empty_cells(csv_store):
    rows = csv_store.select("products", "sub_category", [ColumnFilter.not_null("sub_category")])
    assert sorted(r["sub_category"] for r in rows) == ["A", "A", "B"]
    assert all(set(r) == {"sub_category"} for r in rows)

def test_select_unknown_column(csv_store):
    with pytest.raises(StoreError):
        csv_store.select("products", filters=[ColumnFilter.eq("colour", "red")])

def test_select_missing_table_is_empty(tmp_path):
    store = CsvDataStore(data_dir=tmp_path)
    assert store.select("products", order=OrderBy(column="id")) == []

def test_insert_assigns_next_id(csv_store):
    inserted = csv_store.insert("products", [{"product": "Thing", "price": "1", "sub_category": "C"}])
    assert len(inserted) == 1
    assert inserted[0]["id"] == 5
    assert inserted[0]["product"] == "Thing"
    rows = csv_store.select("products", order=OrderBy(column="id"))
    assert [r["id"] for r in rows] == [1, 2, 3, 4, 5]

def test_insert_ignores_client_id(csv_store):
    inserted = csv_store.insert("products", [{"id": 1, "product": "Thing", "price": "1"}])
    assert inserted[0]["id"] == 5

def test_insert_into_new_table(tmp_path):
    store = CsvDataStore(data_dir=tmp_path)
    inserted = store.insert("products", [{"product": "First", "price": "2"}, {"product": "Second", "price": "3"}])
    assert [r["id"] for r in inserted] == [1, 2]
    assert (tmp_path / "products.csv").exists()

def test_update_only_touches_matching_rows(csv_store):
    before = {r["id"]: r for r in csv_store.select("products")}
    updated = csv_store.update("products", {"price": "99", "description": None}, [ColumnFilter.eq("id", 2)])
    assert [r["id"] for r in updated] == [2]
    assert updated[0]["price"] == "99"
    assert updated[0]["description"] == ""
    after = {r["id"]: r for r in csv_store.select("products")}
    for product_id in (1, 3, 4):
        assert after[product_id] == before[product_id]

def test_update_no_match(csv_store):
    assert csv_store.update("products", {"price": "1"}, [ColumnFilter.eq("id", 42)]) == []

def test_update_rejects_id_change(csv_store):
    with pytest.raises(StoreError):
        csv_store.update("products", {"id": 9}, [ColumnFilter.eq("id", 1)])

def test_delete(csv_store):
    deleted = csv_store.delete("products", [ColumnFilter.eq("id", 3)])
    assert [r["id"] for r in deleted] == [3]
    assert 3 not in [r["id"] for r in csv_store.select("products")]

def test_delete_no_match(csv_store):
    assert csv_store.delete("products", [ColumnFilter.eq("id", 42)]) == []
    assert len(csv_store.select("products")) == 4

def test_unreadable_csv(tmp_path):
    (tmp_path / "products.csv").write_text('id,product\n1,"unterminated\n', encoding="utf-8")
    store = CsvDataStore(data_dir=tmp_path)
    with pytest.raises(StoreError):
        store.select("products")
