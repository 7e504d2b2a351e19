from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from storefront.core.config import settings

# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
# An in-memory SQLite database only lives as long as its single connection
engine_kwargs = {"poolclass": StaticPool} if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:") else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, **engine_kwargs)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables():
    SQLModel.metadata.create_all(engine)

def connect_database():
    """Probe the database and make sure the collections exist. Raises SQLAlchemyError on failure."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    create_db_and_tables()
