"""
PostgreSQL settings for the catalog, chatbot and chat-history tables.

Read from POSTGRES_* variables. POSTGRES_URL, when set, wins over the
individual connection fields.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Relational store configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from mindmenu.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Connection and pool settings for the async engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(default=None, description="Full SQLAlchemy URL override")
    host: str = Field(default="localhost")
    port: int = Field(default=5432)
    user: str = Field(default="postgres")
    password: str = Field(default="postgres")
    db: str = Field(default="mindmenu", description="Database name")
    sslmode: str | None = Field(default=None, description="libpq sslmode, e.g. require for managed Postgres")

    pool_size: int = Field(default=5)
    max_overflow: int = Field(default=10)
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = Field(default=False)

    @property
    def async_database_url(self) -> URL:
        """asyncpg URL; sslmode is translated to asyncpg's ssl query parameter."""
        if self.url:
            return make_url(self.url).set(drivername="postgresql+asyncpg")

        query = {"ssl": self.sslmode} if self.sslmode else {}
        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db,
            query=query,
        )
