"""
Configuration settings for the template normalizer.
"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="detailed",
        description="Log format style: simple, detailed or json"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional file that receives a copy of the log"
    )

    # Output settings
    json_indent: int = Field(
        default=2,
        description="Indentation of JSON written by the CLI"
    )
    include_summary: bool = Field(
        default=False,
        description="Wrap CLI output with a summary block"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Create global settings instance
settings = Settings()
