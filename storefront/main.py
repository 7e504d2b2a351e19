import os
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.config import settings
from storefront.core.cookies import SignedCookieMiddleware
from storefront.core.logger import configure_logging, get_logger
from storefront.db.session import connect_database, create_db_and_tables

# Import models to ensure they are registered with SQLModel metadata
from storefront.models import User, Product, Cart

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    # Product images; StaticFiles needs the directory to exist
    os.makedirs(settings.STATIC_DIR, exist_ok=True)
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="API for the storefront: users, products and carts",
)

app.add_middleware(SignedCookieMiddleware, secret=settings.COOKIE_SECRET)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Product images
app.mount(settings.STATIC_PREFIX, StaticFiles(directory=settings.STATIC_DIR, check_dir=False), name="product-assets")

@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "ok"

from storefront.routers import user, product, cart

app.include_router(user.router, prefix="/user", tags=["user"])
app.include_router(product.router, prefix="/product", tags=["product"])
app.include_router(cart.router, prefix="/cart", tags=["cart"])

def run():
    """Connect to the database, then serve. A failed connection is logged and nothing is bound."""
    configure_logging(settings.LOG_LEVEL)
    try:
        connect_database()
    except SQLAlchemyError as e:
        logger.error("error connecting to database", error=e)
        return
    logger.info("connected to database")
    logger.info("server starting", port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
