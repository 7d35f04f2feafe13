# app/api/deps.py
from fastapi import Depends, Request
from sqlmodel import Session

from app.db.core import get_session
from app.repositories.products import ProductRepository, SqlProductRepository
from app.services.products import ProductService


def get_db(request: Request):
    """
    One session per request, bound to the engine the app was built with.
    """
    yield from get_session(request.app.state.engine)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return SqlProductRepository(db)


def get_product_service(repo: ProductRepository = Depends(get_product_repository)) -> ProductService:
    return ProductService(repo)


__all__ = ["get_db", "get_product_repository", "get_product_service"]
