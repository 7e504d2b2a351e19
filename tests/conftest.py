"""
Shared fixtures.

The environment is set before anything from `storefront` is imported so the
settings, engine and static mount pick up the test values.
"""
import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STATIC_DIR"] = tempfile.mkdtemp(prefix="product-assets-")
os.environ["COOKIE_SECRET"] = "test-cookie-secret"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from storefront.core.config import settings
from storefront.db.session import engine
from storefront.main import app
from storefront.models import Product, User

ALLOWED_ORIGIN = "https://mern-ecommerce-frontend-theta.vercel.app"


@pytest.fixture
def test_client():
    """Client with a fresh in-memory database for every test"""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def session(test_client):
    with Session(engine) as session:
        yield session


@pytest.fixture
def assets_dir():
    return settings.STATIC_DIR


@pytest.fixture
def catalog(session):
    """Two products with fixed ids"""
    products = [
        Product(id="p1", category="shirts", title="Linen Shirt", price=10.0, images=["linen.png"]),
        Product(id="p2", category="pants", title="Chinos", price=25.5, images=["chinos.png"]),
    ]
    for product in products:
        session.add(product)
    session.commit()
    return products


def signup_and_login(client: TestClient, email: str, password: str = "Secret123!"):
    response = client.post("/user/signup", json={"email": email, "password": password, "name": "Test"})
    assert response.status_code == 201
    response = client.post("/user/login", json={"email": email, "password": password})
    assert response.status_code == 200
    data = response.json()
    return {"user_id": data["user"]["_id"], "token": data["token"]}


@pytest.fixture
def shopper(test_client):
    """A registered user: {"user_id", "token"}"""
    return signup_and_login(test_client, "shopper@example.com")


@pytest.fixture
def other_shopper(test_client):
    return signup_and_login(test_client, "other@example.com")


@pytest.fixture
def admin(test_client, session):
    credentials = signup_and_login(test_client, "admin@example.com")
    user = session.get(User, credentials["user_id"])
    user.is_admin = True
    session.add(user)
    session.commit()
    return credentials
