"""Configuration for Stylebot."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CommentMode(str, Enum):
    """How the messages of a single line violation become comments."""

    SEPARATE = "separate"
    JOINED = "joined"


class PolicyScope(str, Enum):
    """How often the commenter creates a commenting policy."""

    PER_CALL = "per_call"
    PER_CANDIDATE = "per_candidate"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="STYLEBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # Commenting
    comment_mode: CommentMode = Field(default=CommentMode.SEPARATE)
    policy_scope: PolicyScope = Field(default=PolicyScope.PER_CALL)
    message_separator: str = Field(default="<br>")


settings = Settings()
