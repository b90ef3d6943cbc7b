"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "RealEstateDB"
    VERSION: str = "0.1.0"

    # Database
    DATABASE_URL: str = "sqlite:///./realestate.db"
    SQL_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # "text" or "json"

    # Principal that receives read-only access to the property table
    READONLY_PRINCIPAL: str = "C##NAGZ"


settings = Settings()
