"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./sosrelay.db"
    STORAGE_BACKEND: str = "memory"  # memory | sql
    CORS_ORIGINS: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Serial relay to the field beacon
    NOTIFIER: str = "serial"  # serial | none
    SERIAL_PORT: str = "/dev/ttyUSB1"
    SERIAL_BAUD_RATE: int = 9600
    SERIAL_WRITE_TIMEOUT: float = 2.0

    class Config:
        env_file = ".env"


settings = Settings()
