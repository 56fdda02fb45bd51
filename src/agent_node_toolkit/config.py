"""Configuration management for Agent Node Toolkit"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support"""

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Registry
    register_builtin_tools: bool = True

    # Formatting defaults
    default_locale: str = "en-US"
    default_currency: str = "USD"
    format_decimals: int = 2
    truncate_length: int = 100
    truncation_suffix: str = "..."

    model_config = SettingsConfigDict(
        env_prefix="AGENT_TOOLKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
