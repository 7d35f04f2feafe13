# app/utils/seed_products.py
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from sqlmodel import Session

from app.db.core import init_db, make_engine
from app.db.models import Product, ProductCreate
from app.repositories.products import SqlProductRepository
from app.services.products import ProductService

DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "products.json"


def load_seed_items(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Could not find product seed file at: {path}")
    items = json.loads(path.read_text())
    if not isinstance(items, list):
        raise ValueError(f"{path} must hold a JSON array of products")
    return items


def _is_unnamed(item: Dict[str, Any]) -> bool:
    name = item.get("name")
    return name is None or (isinstance(name, str) and not name.strip())


def validate_items(items: List[Any]) -> List[ProductCreate]:
    """
    Validate the whole file up front so a bad entry writes nothing.
    Unnamed items are skipped; anything else malformed raises.
    """
    payloads: List[ProductCreate] = []
    for pos, it in enumerate(items):
        if not isinstance(it, dict):
            raise ValueError(f"item {pos} is not a JSON object: {it!r}")
        if _is_unnamed(it):
            continue
        payloads.append(ProductCreate.model_validate(it))
    return payloads


def seed(session: Session, items: List[Any]) -> int:
    """Insert every named item; returns how many were inserted."""
    payloads = validate_items(items)
    svc = ProductService(SqlProductRepository(session))
    for payload in payloads:
        svc.add_product(Product.model_validate(payload))
    return len(payloads)


def main(argv: List[str] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]) if argv else DATA_FILE
    items = load_seed_items(path)

    engine = make_engine()
    init_db(engine)  # ensure tables exist
    with Session(engine) as s:
        inserted = seed(s, items)
    print(f"Products: inserted={inserted}")
    return inserted


if __name__ == "__main__":
    main()
