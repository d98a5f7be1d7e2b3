"""
Plastics Catalog - Configuration Management with pydantic-settings

Provides validated, type-safe configuration from environment variables.
All settings can be overridden via environment variables or .env file.
"""
from functools import lru_cache
from typing import Annotated, Optional, List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.

    Environment variables take precedence over .env file values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ===================
    # Application Settings
    # ===================
    PROJECT_NAME: str = "Plastics Catalog"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"
    DEBUG: bool = Field(default=False, description="Enable debug mode")
    ENVIRONMENT: str = Field(default="development", description="deployment environment")

    # ===================
    # Database Settings
    # ===================
    DB_HOST: str = Field(default="localhost", description="PostgreSQL host")
    DB_PORT: int = Field(default=5432, description="PostgreSQL port")
    DB_NAME: str = Field(default="plastics_catalog", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: Optional[str] = Field(default=None, description="Database password")
    DB_ECHO: bool = Field(default=False, description="Log every SQL statement")
    DATABASE_URL: Optional[str] = Field(default=None, description="Full database URL (overrides other DB_ settings)")

    @property
    def database_url(self) -> str:
        """Build database URL from components or use explicit URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        credentials = self.DB_USER
        if self.DB_PASSWORD:
            credentials = f"{self.DB_USER}:{self.DB_PASSWORD}"
        return f"postgresql+psycopg2://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # ===================
    # Identity Provider / Session Settings
    # ===================
    AUTH_SECRET_KEY: str = Field(
        default="change-this-to-the-identity-provider-signing-key",
        description="Key the identity provider signs session tokens with"
    )
    AUTH_ALGORITHM: str = Field(default="HS256", description="Session token signing algorithm")
    AUTH_ISSUER: Optional[str] = Field(default=None, description="Expected token issuer (iss claim)")
    AUTH_AUDIENCE: Optional[str] = Field(default=None, description="Expected token audience (aud claim)")
    SESSION_COOKIE_NAME: str = Field(default="catalog_session", description="Cookie carrying the session token")
    SESSION_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24 * 7, description="Lifetime of locally minted session tokens")

    @field_validator("AUTH_SECRET_KEY")
    @classmethod
    def warn_default_secret(cls, v: str) -> str:
        """Warn if using default secret key."""
        if "change-this" in v.lower():
            import warnings
            warnings.warn(
                "Using default AUTH_SECRET_KEY - this is insecure for production!",
                UserWarning
            )
        return v

    # ===================
    # CORS Settings
    # ===================
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:5000",
            "http://127.0.0.1:5000",
        ],
        description="Allowed CORS origins"
    )

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated string to list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # ===================
    # Catalog Settings
    # ===================
    DEFAULT_PAGE_SIZE: int = Field(default=50, ge=1, description="Materials per page when no limit is given")
    MAX_PAGE_SIZE: int = Field(default=200, ge=1, description="Upper bound for the limit query parameter")
    MAX_COMPARE_ITEMS: int = Field(default=4, ge=2, description="Materials allowed in one comparison")

    # ===================
    # Logging Settings
    # ===================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format: json or text")
    LOG_FILE: Optional[str] = Field(default=None, description="Log file path (optional)")
    AUDIT_LOG_FILE: Optional[str] = Field(default="./logs/audit.log", description="Audit log file path")

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.ENVIRONMENT.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are only loaded once per process.
    """
    return Settings()


settings = get_settings()
