from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values come from the process environment first and from a `.env` file in
    the working directory second, so the same image runs under Docker Compose
    and from a local checkout.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Documentation server
    DOCS_SERVER_URL: str = ""
    DOCS_API_KEY: str = ""  # Optional bearer credential

    # GitHub App
    GITHUB_TOKEN: str = ""  # Installation or personal access token
    GITHUB_API_URL: str = "https://api.github.com"
    WEBHOOK_SECRET: str = ""  # Empty disables signature verification

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3002
    LOG_LEVEL: str = "INFO"

    # Development and debugging
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
