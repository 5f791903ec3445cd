from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from typing import List, Optional
from pathlib import Path
import urllib.parse

class Settings(BaseSettings):
    PROJECT_NAME: str = "Inventory API"
    PROJECT_VERSION: str = "0.1.0"
    # Routes are served at the root by default (/categories, /items, ...)
    API_PREFIX: str = ""
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    POSTGRES_SERVER: Optional[str] = "localhost"
    POSTGRES_USER: Optional[str] = "inventory_user"
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = "pern_inventory_app"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None # Assembled from POSTGRES_* when not given
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # Next.js dev server
    ]

    # Fixed-window limiter: 100 requests per client every 15 minutes
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_MAX_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 15 * 60

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        # backend/inventory_api/core/config.py -> repository root
        env_file=Path(__file__).resolve().parent.parent.parent.parent / ".env",
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True
    )

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        if self.DATABASE_URL:
            return self
        if self.POSTGRES_USER and self.POSTGRES_PASSWORD and \
           self.POSTGRES_SERVER and self.POSTGRES_DB and self.POSTGRES_PORT:
            # The password may contain '@', ':' or '/'
            encoded_password = urllib.parse.quote_plus(self.POSTGRES_PASSWORD)
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.POSTGRES_USER}:{encoded_password}@"
                f"{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return self

    def masked_database_url(self) -> str:
        """DATABASE_URL with the password replaced, safe to log."""
        if not self.DATABASE_URL:
            return str(self.DATABASE_URL)
        # Covers an explicit DATABASE_URL as well as the assembled one
        return make_url(self.DATABASE_URL).render_as_string(hide_password=True)

settings = Settings()
