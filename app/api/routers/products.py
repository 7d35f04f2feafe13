# app/api/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response

from app.api.deps import get_product_service
from app.db.models import Product, ProductCreate, ProductRead
from app.services.products import ProductService

router = APIRouter(prefix="/product", tags=["product"])

# ids are 32-bit integers in storage; anything outside is a bad request
ID_MIN, ID_MAX = -(2**31), 2**31 - 1


@router.get("", response_model=list[ProductRead])
def list_products(svc: ProductService = Depends(get_product_service)):
    return svc.get_all_products()


@router.get("/{product_id}", response_model=ProductRead, name="get_product")
def get_product(
    product_id: int = Path(ge=ID_MIN, le=ID_MAX),
    svc: ProductService = Depends(get_product_service),
):
    product = svc.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductRead, status_code=201)
def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    svc: ProductService = Depends(get_product_service),
):
    product = Product.model_validate(payload)
    svc.add_product(product)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product
