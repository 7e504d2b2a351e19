from typing import List
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # Document store
    DATABASE_URL: str = Field("sqlite:///./storefront.db", validation_alias=AliasChoices("DATABASE_URL", "MONGODB_URI"))

    # Auth tokens
    SECRET_KEY: str = "supersecretkey_change_me_in_production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 1 week

    # Signed cookies (mapped from .env)
    COOKIE_SECRET: str = Field("cookiesecret_change_me", validation_alias=AliasChoices("COOKIE_SECRET", "JWT_PRIVATE_KEY"))

    CORS_ORIGINS: List[str] = [
        "https://mern-ecommerce-frontend-theta.vercel.app",
        "https://mern-ecommerce-frontend-git-main-victorchrollo14.vercel.app",
    ]

    # Product images
    STATIC_DIR: str = "ProductAssets"
    STATIC_PREFIX: str = "/product/ProductAssets"

    # Base URL the cart client talks to
    API_URL: str = Field("http://localhost:3001", validation_alias=AliasChoices("API_URL", "VITE_URL"))

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
