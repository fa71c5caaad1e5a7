"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_AUTH_TOKEN: str | None = None

    # State store settings
    GIST_ID: str | None = None

    # Destination project settings
    PROJECT_ORG: str | None = None
    PROJECT_NAME: str | None = None

    # Source issue settings
    ISSUES_ASSIGNEE: str | None = None
    ISSUES_ORG: str | None = None
    ISSUES_PROJECT: str | None = None
