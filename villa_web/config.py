from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    # Villa API service
    villa_api_url: str = os.getenv("VILLA_API_URL", "http://localhost:8000")
    api_timeout: float = float(os.getenv("API_TIMEOUT", "10"))

    # Session cookie signing
    session_secret: str = os.getenv("SESSION_SECRET", "magic-villa-web-session-change-this")
    session_max_age: int = 7 * 24 * 60 * 60

    # App
    app_name: str = "Magic Villa"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
