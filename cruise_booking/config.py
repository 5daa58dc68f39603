# cruise_booking/config.py
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    APP_NAME: str = "Cruise Booking API"

    # "memory" keeps everything in process, "sql" persists through DATABASE_URL
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./cruise_booking.db"

    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: float = 60  # supports decimal durations
    BCRYPT_ROUNDS: int = 12

    SEED_SAMPLE_DATA: bool = True
    STRICT_STATUS_TRANSITIONS: bool = False

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
