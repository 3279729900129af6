"""Configuration management for Auto Assign Issues."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from auto_assign.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Action settings loaded from the GitHub Actions environment."""

    app_name: str = "Auto Assign Issues"

    # Step inputs are exposed by the runner as INPUT_<NAME>
    github_token: Optional[str] = Field(default=None, validation_alias="INPUT_GITHUB_TOKEN")

    # Runner-provided context
    github_repository: Optional[str] = Field(default=None, validation_alias="GITHUB_REPOSITORY")
    github_event_name: Optional[str] = Field(default=None, validation_alias="GITHUB_EVENT_NAME")
    github_event_path: Optional[str] = Field(default=None, validation_alias="GITHUB_EVENT_PATH")
    github_api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")

    debug: bool = Field(default=False, validation_alias="RUNNER_DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator(
        "github_token", "github_repository", "github_event_name", "github_event_path", mode="before"
    )
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank values the way the runner does: as not supplied."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("github_api_url", mode="before")
    @classmethod
    def default_api_url(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return "https://api.github.com"
        return v.strip().rstrip("/")


def require_input(settings: Settings, name: str) -> str:
    """Return a required step input, raising ConfigurationError when it is missing."""
    value = getattr(settings, name, None)
    if not value:
        raise ConfigurationError(f"Input required and not supplied: {name}", setting_name=name)
    return value


# Global settings instance
settings = Settings()
