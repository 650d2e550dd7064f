"""
Configuration management for the slappd application.
Uses Pydantic settings for type-safe environment variable handling.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Slack Configuration
    slack_token: str = Field(default="", description="Comma-separated accepted verification tokens")
    slack_signing_secret: Optional[str] = Field(default=None)
    
    # Untappd Configuration
    untappd_base_url: str = Field(default="https://api.untappd.com/v4")
    untappd_client_id: str = Field(default="")
    untappd_client_secret: str = Field(default="")
    
    # Result and shutdown limits
    max_results: int = Field(default=5, ge=1)
    shutdown_grace_period: int = Field(default=10, ge=0)
    
    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    debug: bool = Field(default=False)
    
    # Logging
    log_level: str = Field(default="INFO")
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    @property
    def accepted_tokens(self) -> List[str]:
        return [t.strip() for t in self.slack_token.split(",") if t.strip()]


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
