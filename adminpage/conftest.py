import csv

import pytest

from adminpage.config import set_config_for_test
from adminpage.data.backends.csv_backend import CsvDataStore
from adminpage.data.models import EDITABLE_FIELDS

HEADER = ["id", *EDITABLE_FIELDS]

SAMPLE_ROWS = [
    {"id": 1, "product": "Widget", "price": "10", "sub_category": "A", "company": "Acme"},
    {"id": 2, "product": "Gadget", "price": "25.50", "sub_category": "B", "company": "Globex"},
    {"id": 3, "product": "Gizmo", "price": "7", "sub_category": "", "company": "Initech"},
    {"id": 4, "product": "Doohickey", "price": "3", "sub_category": "A", "company": "Acme"},
]

@pytest.fixture(autouse=True)
def app_config(tmp_path):
    set_config_for_test(data_dir=str(tmp_path), products_table="products", store_backend="csv")
    yield

def write_products(data_dir, rows):
    with open(data_dir / "products.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=HEADER, restval="")
        w.writeheader()
        for r in rows:
            w.writerow(r)

@pytest.fixture
def csv_store(tmp_path):
    """A CSV store seeded with SAMPLE_ROWS, written out of id order."""
    write_products(tmp_path, list(reversed(SAMPLE_ROWS)))
    return CsvDataStore(data_dir=tmp_path)
