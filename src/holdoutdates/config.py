"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is loaded from environment variables prefixed with HD_."""

    # Logging
    log_level: str = "WARNING"

    # CLI defaults
    default_seed: int = 42
    default_block_size: int = 1

    model_config = {"env_file": ".env", "env_prefix": "HD_"}


def get_settings() -> Settings:
    """Return a Settings instance built from the current environment."""
    return Settings()
