from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session

from storefront.db.session import get_session
from storefront.models.product import Product, ProductRead
from storefront.models.user import User
from storefront.routers.user import get_current_user
from storefront.services.product import ProductService

router = APIRouter()

class ProductCreate(BaseModel):
    category: str
    title: str
    price: float
    images: List[str] = []
    description: Optional[str] = None

def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)

@router.get("/", response_model=List[ProductRead])
def read_products(category: Optional[str] = None, service: ProductService = Depends(get_product_service)):
    return service.list_products(category)

@router.get("/{product_id}", response_model=ProductRead)
def read_product(product_id: str, service: ProductService = Depends(get_product_service)):
    product = service.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.post("/", response_model=ProductRead, status_code=201)
def create_product(
    product_in: ProductCreate,
    current_user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    if not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Not authorized")
    return service.create_product(Product(**product_in.model_dump()))
