"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str = "5432"
    user: str = "postgres"
    password: str
    database: str = "transcripts"
    url_override: str = ""

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full database connection URL."""
        if self.url_override:
            return self.url_override
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    def missing_settings(self) -> list[str]:
        """Names of required environment variables that are unset."""
        if self.url_override:
            return []
        missing = []
        if not self.host:
            missing.append("POSTGRES_HOST")
        if not self.password:
            missing.append("POSTGRES_PASSWORD")
        return missing


class ScreenConfig(BaseModel, frozen=True):
    """Timers used by the dashboard and review screens."""

    autosave_seconds: float = 30.0
    feedback_seconds: float = 2.0


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    screens: ScreenConfig = ScreenConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", ""),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "transcripts"),
            url_override=os.getenv("DATABASE_URL", ""),
        ),
        screens=ScreenConfig(
            autosave_seconds=float(os.getenv("REVIEW_AUTOSAVE_SECONDS", "30")),
            feedback_seconds=float(os.getenv("FEEDBACK_SECONDS", "2")),
        ),
    )
