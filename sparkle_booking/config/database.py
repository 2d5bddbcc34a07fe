"""
Database configuration.
"""

from pydantic import BaseModel

from .settings import Settings


class DatabaseConfig(BaseModel):
    """Database configuration settings."""

    database_path: str = "sparkle.db"
    connection_timeout: float = 30.0
    seed_catalog: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseConfig":
        return cls(
            database_path=settings.database_path,
            connection_timeout=settings.database_timeout,
            seed_catalog=settings.seed_catalog,
        )

    def get_database_url(self) -> str:
        """Get SQLite URL for the booking database."""
        return f"sqlite:///{self.database_path}"
