"""Application configuration settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    APP_NAME: str = "Student Marksheet Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]

    # Store
    STORE_URL: str = "sqlite:///./students.db"
    STORE_POOLING: bool = False
    STORE_INLINE_LITERALS: bool = False

    # Upload Settings
    UPLOADS_ROOT: str = "Marksheets"
    MARKSHEETS_URL_PREFIX: str = "/marksheets"
    MAX_UPLOAD_SIZE_MB: int = 5
    ALLOWED_EXTENSIONS: list[str] = [".xlsx", ".xls"]
    ALLOWED_CONTENT_TYPES: list[str] = [
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-excel",
    ]

    @field_validator("MARKSHEETS_URL_PREFIX", mode="before")
    @classmethod
    def validate_url_prefix(cls, v: str) -> str:
        return "/" + str(v).strip("/")

    @property
    def uploads_path(self) -> Path:
        """Absolute path of the uploads root."""
        return Path(self.UPLOADS_ROOT).resolve()

    @property
    def uploads_folder_name(self) -> str:
        """Folder token that prefixes every stored marksheet path."""
        return self.uploads_path.name

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
