from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings sourced from environment variables."""

    # Collection endpoint of the remote reservation API (GET lists, POST creates)
    RESERVATIONS_API_URL: str = "https://simple-reservation-api.onrender.com/api/reservations"
    REQUEST_TIMEOUT: float | None = None  # seconds; None waits indefinitely

    LOCALE: str = "ja"  # "ja" or "en"
    LOG_LEVEL: str = "INFO"

    API_PREFIX: str = "/api/v1"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
