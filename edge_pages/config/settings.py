from datetime import datetime, timezone
from typing import Literal

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Edge Pages"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: Literal["development", "production"] = "development"

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    site: Literal["weather", "countdown"] = Field(
        default="weather",
        description="Which application `python -m edge_pages.main` serves",
    )

    openweather_api_key: str | None = Field(
        default=None, description="OpenWeatherMap API key"
    )
    weather_api_url: HttpUrl = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="Weather API base URL",
    )
    weather_api_timeout: float | None = Field(
        default=None,
        description="Weather API request timeout in seconds, None leaves it to the platform",
    )

    countdown_target: datetime = Field(
        default=datetime(2025, 12, 29, tzinfo=timezone.utc),
        description="Instant the countdown page counts down to",
    )
    countdown_title: str = "Taha & Munazza"
    countdown_subtitle: str = "Are Getting Married"
    countdown_final_message: str = "Happily Ever After!"
    countdown_tick_seconds: float = Field(
        default=1.0, description="Countdown stream tick period in seconds"
    )

    allowed_hosts: list[str] = ["*"]
    cors_allow_origins: list[str] = ["*"]
    expose_docs: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("countdown_target")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def countdown_target_ms(self) -> int:
        return int(self.countdown_target.timestamp() * 1000)


settings = Settings()
