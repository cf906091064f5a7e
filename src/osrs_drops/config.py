"""
Configuration management for the OSRS drop-source service.

Loads settings from environment variables and config file, with sensible defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OSRS_DROPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")
    mapping_url: str = Field(
        default="https://prices.runescape.wiki/api/v1/osrs/mapping",
        description="Item id to name mapping endpoint",
    )
    wiki_base_url: str = Field(
        default="https://oldschool.runescape.wiki",
        description="Wiki origin used for page URLs and relative links",
    )
    user_agent: str = Field(
        default="ChanceMan-WebProxy/1.0 (osrs-drops)",
        description="User-Agent sent with every outbound request",
    )
    override_dir: Path = Field(
        default_factory=lambda: Path("public/chance_drops"),
        description="Directory of curated per-source drop table files",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    host: str = Field(default="127.0.0.1", description="Bind address for the HTTP server")
    port: int = Field(default=8001, description="Port for the HTTP server")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = Settings()
    return _settings
