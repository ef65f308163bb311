#!/usr/bin/env python3
"""
seed_data.py

Writes a fake products table to `<out>/products.csv` so the admin page can
run against the CSV data store without a Supabase project.

Run:
  python -m adminpage.seed_data --rows 20 --out sample_data
"""

from __future__ import annotations
import argparse
import csv
import os
import random
import sys
from typing import Dict, List

from adminpage.config import get_config
from adminpage.data.models import EDITABLE_FIELDS

# -----------------------------
# Catalogue building blocks
# -----------------------------

CATEGORIES = {
    "Electronics": {
        "Phones": ["Nokia", "Samsung", "Apple", "Xiaomi"],
        "Laptops": ["Lenovo", "Dell", "HP", "Asus"],
        "Audio": ["Sony", "JBL", "Bose"],
    },
    "Home": {
        "Kitchen": ["Philips", "Tefal", "Bosch"],
        "Lighting": ["IKEA", "Osram"],
    },
}

ADJECTIVES = ["Compact", "Pro", "Lite", "Max", "Classic", "Smart"]


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def price_round(p: float) -> str:
    return f"{max(p, 0.01):.2f}"

def gen_products(n: int) -> List[Dict[str, object]]:
    rows = []
    for product_id in range(1, n + 1):
        category = random.choice(list(CATEGORIES))
        sub_category = random.choice(list(CATEGORIES[category]))
        company = random.choice(CATEGORIES[category][sub_category])
        model = f"{random.choice('ABCDEFGHXZ')}{random.randint(10, 999)}"
        name = f"{company} {random.choice(ADJECTIVES)} {sub_category.rstrip('s')}"
        rows.append({
            "id": product_id,
            "product": name,
            "image": f"https://picsum.photos/seed/{product_id}/200",
            "company": company,
            "model": model,
            "price": price_round(random.uniform(9, 1500)),
            "category": category,
            "sub_category": sub_category,
            "description": f"{name} ({model})",
        })
    return rows

def write_csv(path: str, rows: List[Dict[str, object]], header: List[str]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=header)
        w.writeheader()
        for r in rows:
            w.writerow(r)


# -----------------------------
# Main
# -----------------------------

def parse_args(argv=None) -> argparse.Namespace:
    config = get_config()
    ap = argparse.ArgumentParser(description="Generate a sample products table as CSV.")
    ap.add_argument("--out", default=config.data_dir, help="Output directory")
    ap.add_argument("--table", default=config.products_table, help="Table name (file stem)")
    ap.add_argument("--rows", type=int, default=config.seed_rows, help="Number of products")
    ap.add_argument("--seed", type=int, default=config.seed_value, help="Random seed")
    ap.add_argument("--no-overwrite", action="store_true", help="Fail if the file already exists")
    return ap.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    random.seed(args.seed)

    outdir = args.out
    ensure_dir(outdir)
    path = os.path.join(outdir, f"{args.table}.csv")
    if args.no_overwrite and os.path.exists(path):
        print(f"Refusing to overwrite existing file: {path}", file=sys.stderr)
        return 2

    products = gen_products(args.rows)
    write_csv(path, products, ["id", *EDITABLE_FIELDS])

    print(f"Generated {len(products)} products in {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
