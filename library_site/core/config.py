"""
Configuration

Settings for library-site, read from the environment and an optional .env
file. Nested groups use a double underscore: ADMIN__PASSWORD maps to
``admin__password``.
"""

from typing import List, Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("debug", "info", "warning", "error")


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in str(value).split(",")]


class Settings(BaseSettings):
    """
    Process-wide configuration.

    Environment variables take precedence over .env values.
    """

    debug: bool = Field(default=False, description="Expose debug details in errors")
    log_level: str = Field(default="info", description=f"One of {', '.join(LOG_LEVELS)}")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Deployment environment"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        normalized = v.lower().strip()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}, got '{v}'")
        return normalized

    # Admin console: one fixed identity, checked on every admin request
    admin__username: str = Field(default="admin", description="Admin username")
    admin__password: Optional[SecretStr] = Field(
        default=None, description="Admin password; the admin API is locked when unset"
    )

    # Storage
    database__url: str = Field(
        default="sqlite:///./library_site.db",
        description="SQLAlchemy URL; sqlite:// gives a private in-memory database",
    )
    database__echo: bool = Field(default=False, description="Echo SQL statements")
    # Pool sizing applies to server databases only; sqlite ignores it
    database__pool_size: int = Field(default=5, ge=1, description="Pooled connections")
    database__max_overflow: int = Field(
        default=10, ge=0, description="Connections allowed beyond pool_size"
    )
    database__pool_timeout: int = Field(
        default=30, ge=0, description="Seconds to wait for a pooled connection"
    )
    database__pool_recycle: int = Field(
        default=3600, ge=0, description="Seconds before a connection is recycled"
    )
    database__pool_pre_ping: bool = Field(
        default=True, description="Ping connections before handing them out"
    )

    # HTTP surface
    api__title: str = Field(default="library-site", description="OpenAPI title")
    api__description: str = Field(
        default="Content and admin API for the library website",
        description="OpenAPI description",
    )
    api__version: str = Field(default="1.0.0", description="OpenAPI version")
    api__docs_url: str = Field(default="/docs", description="Swagger UI path")
    api__redoc_url: str = Field(default="/redoc", description="ReDoc path")

    # The public site may be served from another origin
    cors__allow_origins: str = Field(default="*", description="Comma-separated origins")
    cors__allow_credentials: bool = Field(
        default=False, description="Allow credentialed CORS requests"
    )
    cors__allow_methods: str = Field(
        default="GET,POST,PUT,DELETE", description="Comma-separated methods"
    )
    cors__allow_headers: str = Field(default="*", description="Comma-separated headers")

    health__check_database: bool = Field(
        default=False, description="Run a SELECT 1 in /api/health"
    )

    # Logfire
    logfire__enabled: bool = Field(default=False, description="Send telemetry to Logfire")
    logfire__service_name: str = Field(
        default="library_site", description="Logfire service name"
    )
    logfire__environment: str = Field(
        default="development", description="Logfire environment"
    )
    logfire__token: Optional[SecretStr] = Field(default=None, description="Write token")
    logfire__disable_scrubbing: Optional[bool] = Field(
        default=False, description="Turn off Logfire's own scrubbing"
    )
    logfire__instrument__fastapi: bool = Field(
        default=True, description="Trace FastAPI requests"
    )
    logfire__instrument__sqlalchemy: bool = Field(
        default=True, description="Trace SQLAlchemy queries"
    )

    # Log files
    log__dir: str = Field(default="logs", description="Directory for library_site.log")
    log__file_path: Optional[str] = Field(
        default=None, description="Explicit log file; overrides log__dir"
    )
    log__file_level: str = Field(default="INFO", description="File handler level")
    log__file_max_bytes: int = Field(
        default=10 * 1024 * 1024, gt=0, description="Rotate after this many bytes"
    )
    log__file_backup_count: int = Field(
        default=3, ge=0, description="Rotated files to keep"
    )

    @property
    def cors_allow_origins_list(self) -> List[str]:
        return _split_csv(self.cors__allow_origins)

    @property
    def cors_allow_methods_list(self) -> List[str]:
        return _split_csv(self.cors__allow_methods)

    @property
    def cors_allow_headers_list(self) -> List[str]:
        return _split_csv(self.cors__allow_headers)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


def create_settings() -> Settings:
    """
    Load settings and print a short startup summary.

    Raises:
        RuntimeError: If the environment holds invalid values
    """
    try:
        loaded = Settings()
    except Exception as e:
        print(f"❌ Configuration loading failed: {e}")
        raise RuntimeError(f"Configuration loading failed: {e}") from e

    backend = loaded.database__url.split(":", 1)[0]
    print(
        f"🔧 Configuration loaded ({loaded.environment}, "
        f"log level {loaded.log_level}, database {backend})"
    )
    if loaded.admin__password is None:
        print("⚠️  ADMIN__PASSWORD is not set: every admin request will be rejected")

    return loaded


settings = create_settings()
