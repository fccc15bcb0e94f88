from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|test|prod

    # Security
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALG: str = Field(default="HS256")
    JWT_EXPIRES_MIN: int = Field(default=60 * 24 * 7)

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://vibe:vibe@db:5432/vibe30")
    # Demo items endpoint, kept apart from the bucket tables
    ITEMS_DATABASE_URL: str = Field(default="sqlite:///./database.sqlite")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:5173,http://localhost:3000")

    # Activity timer
    TIMER_DURATION_MINUTES: float = Field(default=30.0)
    TIMER_INTERVAL_MS: int = Field(default=50)
    TIMER_EXTEND_MINUTES: float = Field(default=5.0)

    # Seed (dev)
    SEED_DEMO: bool = Field(default=True)
    DEMO_EMAIL: str = Field(default="demo@vibe30.app")
    DEMO_PASSWORD: str = Field(default="vibe30demo")


settings = Settings()
