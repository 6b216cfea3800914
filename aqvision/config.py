"""Application configuration management using Pydantic's BaseSettings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Defines all configuration settings for the gateway, loaded from .env file."""

    # API Keys (unset or empty means "use the built-in default")
    openweather_api_key: Optional[str] = None
    airnow_api_key: Optional[str] = None
    google_maps_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None

    # App settings
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Optional[str] = None

    # Upstream settings
    upstream_timeout: float = 20.0
    openaq_base_url: str = "https://api.openaq.org/v2/measurements"
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    airnow_base_url: str = "https://www.airnowapi.org/aq/observation/latLong/current/"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.5-flash"
    maps_script_url: str = "https://maps.googleapis.com/maps/api/js"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


settings = Settings()
