from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings.
    Values are read from environment variables (and the .env file).
    """

    # API settings: credential and model for the completion service
    anthropic_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"  # Claude model used for every call type

    # Invocation parameters per call type
    scope_max_tokens: int = 8000
    scope_temperature: float = 0.3  # structured extraction, keep it low
    metadata_max_tokens: int = 1000
    metadata_temperature: float = 0.1
    copilot_max_tokens: int = 4000
    copilot_temperature: float = 0.7  # free-form prose
    conversion_max_tokens: int = 8000
    conversion_temperature: float = 0.3

    # Hours for synthesized mandatory items
    default_pm_hours: int = 20
    default_testing_hours: int = 30

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    Return the cached settings instance.
    The .env file is read once per process.
    """
    return Settings()
