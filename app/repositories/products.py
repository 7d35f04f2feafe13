from abc import ABC, abstractmethod
from typing import List, Optional

from sqlmodel import Session, select

from app.db.models import Product


class ProductRepository(ABC):
    @abstractmethod
    def get_all(self) -> List[Product]: ...
    @abstractmethod
    def get_by_id(self, product_id: int) -> Optional[Product]: ...
    @abstractmethod
    def add(self, product: Product) -> None: ...


class SqlProductRepository(ProductRepository):
    """
    ProductRepository over a SQLModel session. The only place that
    queries the product table.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Product]:
        return list(self.session.exec(select(Product)).all())

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.session.get(Product, product_id)

    def add(self, product: Product) -> None:
        # storage assigns the id; refresh so the caller sees it
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
