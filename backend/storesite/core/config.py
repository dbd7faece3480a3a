from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_DATABASE_URLS = frozenset({"", "postgresql://placeholder"})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database (unset or placeholder = in-memory store, no provisioning)
    DATABASE_URL: str | None = None

    # Tenant
    CLIENT_NAME: str | None = None
    DOMAIN: str | None = None

    # OpenAI
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TIMEOUT: float = 60.0

    # Unsplash
    UNSPLASH_ACCESS_KEY: str | None = None
    UNSPLASH_API_URL: str = "https://api.unsplash.com"

    # S3 / MinIO
    S3_BUCKET: str = ""
    S3_ENDPOINT_URL: str | None = None  # backend→MinIO (e.g. http://minio:9000)
    S3_PUBLIC_ENDPOINT: str | None = None  # browser→MinIO (e.g. http://localhost:9000)
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: str | None = None
    AWS_SECRET_ACCESS_KEY: str | None = None

    # CORS
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5000"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # App
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def has_database(self) -> bool:
        return (self.DATABASE_URL or "").strip() not in PLACEHOLDER_DATABASE_URLS

    @property
    def async_database_url(self) -> str | None:
        """DATABASE_URL with the asyncpg driver, or None when no real database is set."""
        if not self.has_database:
            return None
        url = self.DATABASE_URL.strip()
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+asyncpg://" + url[len(prefix) :]
        return url


settings = Settings()
