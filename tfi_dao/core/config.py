from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Database configuration loaded from environment variables."""

    database_scheme: str = "sqlite+pysqlite"
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "tfi"
    database_password: str = "tfi_password"
    database_name: str = "tfi_dao.db"
    database_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TFI_DAO_",
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.database_scheme.startswith("sqlite")

    @property
    def database_url(self) -> str:
        """Assemble a SQLAlchemy compatible database URL."""
        if self.is_sqlite:
            # SQLite only needs a file path (or ":memory:")
            return f"{self.database_scheme}:///{self.database_name}"
        return (
            f"{self.database_scheme}://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
