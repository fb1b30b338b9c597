from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Resume Wizard"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # AI / Gemini
    google_ai_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float | None = None

    # Export
    pdf_page_size: str = "A4"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache
def get_settings() -> Settings:
    return Settings()
