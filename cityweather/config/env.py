from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cityweather_log_level: str = "WARNING"
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    geocoding_language: str = "en"
    request_timeout_seconds: float | None = None
