from sqlmodel import Session, select
from storefront.core.logger import configure_logging, get_logger
from storefront.db.session import engine, create_db_and_tables
from storefront.models.product import Product

logger = get_logger(__name__)

STARTER_PRODUCTS = [
    {"category": "shirts", "title": "Classic Oxford Shirt", "price": 39.0, "images": ["oxford-front.webp", "oxford-back.webp"]},
    {"category": "shirts", "title": "Linen Summer Shirt", "price": 45.0, "images": ["linen-front.webp"]},
    {"category": "tshirts", "title": "Heavyweight Cotton Tee", "price": 19.0, "images": ["tee-black.webp", "tee-white.webp"]},
    {"category": "pants", "title": "Slim Chinos", "price": 55.0, "images": ["chinos.webp"]},
    {"category": "hoodies", "title": "Fleece Hoodie", "price": 62.0, "images": ["hoodie.webp"]},
]

def seed_products(session: Session) -> int:
    """Insert the starter catalog into an empty product collection. Returns the number inserted."""
    existing = session.exec(select(Product)).all()
    if existing:
        logger.info("catalog already populated, skipping seed", products=len(existing))
        return 0

    for data in STARTER_PRODUCTS:
        session.add(Product(**data))
    session.commit()
    logger.info("seeded catalog", products=len(STARTER_PRODUCTS))
    return len(STARTER_PRODUCTS)

def main():
    configure_logging()
    create_db_and_tables()
    with Session(engine) as session:
        seed_products(session)

if __name__ == "__main__":
    main()
