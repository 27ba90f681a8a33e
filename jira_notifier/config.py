"""Configuration management for Jira Notifier."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "Jira Notifier"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"
    webhook_path: str = "/jira-rc-notifier-webhook"

    # Rocket.Chat settings
    rocketchat_url: str = Field(default="http://localhost:3000")
    rocketchat_user_id: Optional[str] = Field(default=None)
    rocketchat_auth_token: Optional[str] = Field(default=None)
    rocketchat_timeout: float = Field(default=30.0)

    # Notifier settings, read through the settings reader on every event
    user_mapping_field: str = Field(default="name")
    user_mapping_json: str = Field(default="{}")
    custom_user_fields: str = Field(default="")
    skip_internal_comments: bool = Field(default=False)

    # Overrides the bundled Jira logo used for missing avatars and issue-type icons
    default_icon_url: Optional[str] = Field(default=None)


# Global settings instance
settings = Settings()
