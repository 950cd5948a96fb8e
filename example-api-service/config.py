"""Configuration management for the Example API Service.

Uses Pydantic Settings for type-safe configuration with .env file support.
Nothing here changes validation behaviour; it only controls hosting.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Service Configuration
    port: int = 8000
    allowed_origins: str = "http://localhost:3000"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse allowed origins as list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]


settings = Settings()
