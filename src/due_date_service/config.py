"""Application configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "due-date-service"

    # CORS
    cors_origins: list[str] = ["*"]

    # Calendar (0 = Monday ... 6 = Sunday, same as the stdlib calendar module)
    first_weekday: int = Field(6, ge=0, le=6)

    # Recognizer
    recognizer_enabled: bool = True
    languages: list[str] = ["en"]
    prefer_dates_from: str = "future"

    # Phrase fallback
    tonight_hour: int = Field(20, ge=0, le=23)

    class Config:
        env_prefix = "DUE_DATE_"
        case_sensitive = False


settings = Settings()
