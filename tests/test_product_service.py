"""ProductService forwards every call to its repository unchanged."""

from typing import List, Optional

from app.db.models import Product
from app.repositories.products import ProductRepository
from app.services.products import ProductService


class RecordingRepository(ProductRepository):
    def __init__(self):
        self.calls = []
        self.rows = [Product(id=1, name="Widget", price=9.99)]

    def get_all(self) -> List[Product]:
        self.calls.append(("get_all",))
        return self.rows

    def get_by_id(self, product_id: int) -> Optional[Product]:
        self.calls.append(("get_by_id", product_id))
        return next((p for p in self.rows if p.id == product_id), None)

    def add(self, product: Product) -> None:
        self.calls.append(("add", product))


def test_get_all_returns_repository_result():
    repo = RecordingRepository()
    assert ProductService(repo).get_all_products() is repo.rows
    assert repo.calls == [("get_all",)]


def test_get_by_id_forwards_id_and_result():
    repo = RecordingRepository()
    svc = ProductService(repo)

    assert svc.get_product_by_id(1) is repo.rows[0]
    assert svc.get_product_by_id(7) is None
    assert repo.calls == [("get_by_id", 1), ("get_by_id", 7)]


def test_add_passes_same_object():
    repo = RecordingRepository()
    product = Product(name="Gadget", price=2.0)

    assert ProductService(repo).add_product(product) is None
    assert repo.calls == [("add", product)]
