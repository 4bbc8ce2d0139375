from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./magic_villa.db")

    # Security (ApiSettings:Secret)
    secret_key: str = os.getenv("API_SECRET", "magic-villa-secret-change-this-in-production")
    algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # App
    app_name: str = "Magic Villa API"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "detailed")

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
