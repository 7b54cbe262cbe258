# Файл конфігурації, завантажує змінні з .env
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    # Pydantic v2 style model configuration
    model_config = ConfigDict(extra="ignore", env_file=".env")

    # 1. CORS
    # Кома-сепарейтед список, напр. "https://tickets.example.com,http://localhost:3000"
    FRONTEND_ORIGIN: str = ""

    # 2. Логування
    LOG_LEVEL: str = "INFO"

    APP_VERSION: str = "1.0.0"


settings = Settings()
