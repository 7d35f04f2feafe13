# app/services/products.py
from typing import List, Optional

from app.db.models import Product
from app.repositories.products import ProductRepository


class ProductService:
    """Forwards each call to the repository unchanged."""

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def get_all_products(self) -> List[Product]:
        return self.repo.get_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.repo.get_by_id(product_id)

    def add_product(self, product: Product) -> None:
        return self.repo.add(product)
