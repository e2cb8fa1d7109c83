from typing import List, Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"  # empty string disables the file sink
    SLACK_WEBHOOK_URL: str | None = None

    # Record sources
    FBI_API_BASE_URL: str = "https://api.fbi.gov/wanted/v1/list"
    INTERPOL_API_BASE_URL: str = "https://ws-public.interpol.int/notices/v1"
    INTERPOL_NOTICE_TYPE: Literal["red", "yellow"] = "red"
    ENABLED_SOURCES: List[Literal["fbi", "interpol"]] = ["fbi", "interpol"]

    # Fetching
    FETCH_TIMEOUT_SECONDS: float = 15.0
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 500
    MAX_PAGES: int = 50  # pagination safety cap
    PAGE_DELAY_SECONDS: float = 0.5  # pause between successive page fetches
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36"
    )

    # Images
    PLACEHOLDER_HOST: str = "placehold.co"

    # Photo aging collaborator
    AGE_PROGRESSION_URL: str | None = None
    AGE_PROGRESSION_TIMEOUT_SECONDS: float = 60.0

    # Docs Configuration
    DOCS_ENABLED: bool | None = None  # Override docs setting (None = auto based on ENV)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @model_validator(mode="after")
    def check_paging(self) -> "Settings":
        if not 1 <= self.DEFAULT_PAGE_SIZE <= self.MAX_PAGE_SIZE:
            raise ValueError("DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE")
        if self.MAX_PAGES < 1:
            raise ValueError("MAX_PAGES must be at least 1")
        if self.PAGE_DELAY_SECONDS < 0 or self.FETCH_TIMEOUT_SECONDS <= 0:
            raise ValueError("PAGE_DELAY_SECONDS must be >= 0 and FETCH_TIMEOUT_SECONDS > 0")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "dev"

    @property
    def debug_enabled(self) -> bool:
        """Debug mode is only enabled in development."""
        return self.is_development

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def docs_enabled(self) -> bool:
        """Swagger/ReDoc docs enabled based on environment or override."""
        if self.DOCS_ENABLED is not None:
            return self.DOCS_ENABLED
        return self.is_development


settings = Settings()
