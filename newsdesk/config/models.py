"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field("127.0.0.1", description="Bind address")
    port: int = Field(5000, description="Bind port", ge=1, le=65535)
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )
    base_url: Optional[str] = Field(
        None, description="URL the CLI uses to reach the API (default: derived from host/port)"
    )

    @property
    def api_url(self) -> str:
        """Base URL for API clients."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return f"http://{self.host}:{self.port}"


class ApiConfig(BaseModel):
    """Request handling defaults."""

    default_limit: int = Field(20, description="Page size when none is given", ge=1)
    max_limit: int = Field(100, description="Largest page size a client may ask for", ge=1)
    featured_limit: int = Field(3, description="Featured articles when none is given", ge=1)
    search_min_length: int = Field(2, description="Shortest accepted search query", ge=1)

    @field_validator("max_limit")
    @classmethod
    def validate_max_limit(cls, v: int, info) -> int:
        """Validate that the page cap is not below the default page size."""
        default = info.data.get("default_limit", 20)
        if v < default:
            raise ValueError(f"max_limit ({v}) must be >= default_limit ({default})")
        return v


class SeedConfig(BaseModel):
    """Startup content."""

    sample_articles: bool = Field(True, description="Load the sample articles at startup")
    admin_username: str = Field("admin", description="Username of the seeded admin")
    admin_password: Optional[str] = Field(None, description="Admin password (prefer admin_password_env)")
    admin_password_env: Optional[str] = Field(
        "NEWSDESK_ADMIN_PASSWORD", description="Environment variable for the admin password"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    json_format: bool = Field(True, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v


class ConfigModel(BaseModel):
    """Main configuration model."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
