"""Application configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "SRT Translator Service"
    app_version: str = "0.1.0"
    app_description: str = "Translate SRT subtitle files while preserving their timecodes"

    # Environment
    environment: str = "development"  # development, staging, production

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_hosts: list[str] = ["*"]

    # Authentication
    api_key: str | None = None

    # CORS Configuration
    cors_enabled: bool = True
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Translator Configuration
    translation_delay_ms: int = 100
    designated_language: str = "hebrew"
    designated_prefix: str = "תרגום: "
    default_prefix: str = "Translation: "

    # Subtitle Files
    allowed_extensions: set[str] = {".srt"}
    output_filename_prefix: str = "translated_"
    default_output_filename: str = "subtitles.srt"
    max_upload_size: int = 10_485_760  # 10MB in bytes

    # Logging
    log_level: str = "INFO"
    log_dir: str = "./logs"
    enable_log_redaction: bool = True  # Redact sensitive data from logs

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
