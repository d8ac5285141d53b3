# promptgenie/settings.py
import logging
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="PromptGenie")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # model backend: gemini | openai | ollama | echo
    LLM_PROVIDER: str = Field(default="gemini")

    # secrets (absence fails each request at the outbound call, not startup)
    GEMINI_AI_API: str | None = None
    OPENAI_API_KEY: str | None = None

    GEMINI_MODEL: str = Field(default="gemini-1.5-pro")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")

    GENERATE_CONFIG_PATH: str = Field(default=str(PACKAGE_DIR / "generate" / "config.yaml"))

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        # unknown names fall back to INFO
        level = (v or "").strip().upper()
        return level if isinstance(logging.getLevelName(level), int) else "INFO"

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
