from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "gemini"
    api_key: str = ""
    model_name: str = "gemini-3-pro-preview"
    openai_model_name: str = "gpt-4o"
    openai_base_url: str | None = None

    temperature: float = 0.1
    top_p: float = 0.95
    thinking_budget: int = 32000
    request_timeout_seconds: int = 300

    max_file_size_bytes: int = 0
    prompts_dir: Path | None = None
