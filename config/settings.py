"""Application settings and configuration management."""
from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    DB_PATH: str = Field(default="data/interview.db")

    OLLAMA_API_URL: str = "http://127.0.0.1:11434"
    OLLAMA_MODEL: str = "phi3:mini"
    LLM_TIMEOUT_S: float = Field(default=180.0, gt=0.0)

    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60 * 24 * 7

    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "https://ai-interview-frontend-ivory.vercel.app",
        ]
    )

    INTERVIEW_HISTORY_LIMIT: int = 10
    PRACTICE_HISTORY_LIMIT: int = 20

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()
