"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="MenuCatalog", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")
    base_url: Optional[str] = Field(
        default=None, description="Public address used to build image URLs"
    )

    # MongoDB settings
    mongo_uri: Optional[str] = Field(
        default=None, description="MongoDB connection URI (required at startup)"
    )
    mongo_db_name: str = Field(default="menu", description="MongoDB database name")
    menu_collection: str = Field(
        default="menus", description="Collection holding menu items"
    )
    mongo_timeout_ms: int = Field(
        default=5000, ge=1, description="Server selection timeout in milliseconds"
    )

    # Upload settings
    upload_dir: str = Field(default="uploads", description="Directory for uploaded images")
    max_upload_bytes: int = Field(
        default=2 * 1024 * 1024, ge=1, description="Maximum accepted image size"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )
    cors_allow_credentials: bool = Field(
        default=False, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(
        default="Menu Catalog API", description="API documentation title"
    )
    api_description: str = Field(
        default="Menu items with optional image uploads, stored in MongoDB",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("mongo_uri", "base_url", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def public_base_url(self) -> str:
        """Address clients use to reach this server; falls back to localhost:PORT"""
        if self.base_url:
            return self.base_url.rstrip("/")
        return f"http://localhost:{self.port}"

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
