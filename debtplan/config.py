"""Application configuration settings."""

from decimal import Decimal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Debt Payoff Planner API"

    # Logging
    log_level: str = "INFO"

    # Simulation
    max_months: int = 600
    suggestion_floor: Decimal = Decimal("5000")

    # Server
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
