from typing import List, Optional
from sqlmodel import Session, select
from storefront.models.product import Product

class ProductService:
    def __init__(self, session: Session):
        self.session = session

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        query = select(Product)
        if category:
            query = query.where(Product.category == category)
        return self.session.exec(query).all()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.session.get(Product, product_id)

    def create_product(self, product: Product) -> Product:
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product
