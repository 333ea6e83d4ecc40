from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_symbol(self) -> str:
        return "°F" if self is UnitSystem.IMPERIAL else "°C"

    @property
    def wind_speed_symbol(self) -> str:
        return "mph" if self is UnitSystem.IMPERIAL else "km/h"


# =============================================================================
# API Response Models (Open-Meteo Forecast API Mappings)
# =============================================================================


class OpenMeteoForecastResponse(BaseModel):
    """Top level of the forecast response; only the parts we read."""

    current: dict[str, Any] | None = None
    utc_offset_seconds: int | None = Field(default=None, gt=-86400, lt=86400)
    timezone: str | None = None


class OpenMeteoCurrentResponse(BaseModel):
    """Direct mapping to Open-Meteo current weather API response."""

    time: datetime
    temperature_2m: Annotated[float, Field(strict=True)]
    relative_humidity_2m: int
    apparent_temperature: float
    weather_code: int
    wind_speed_10m: float

    @field_validator("time", mode="before")
    @classmethod
    def parse_local_time(cls, value: Any) -> Any:
        if isinstance(value, str):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        return value


# =============================================================================
# Domain Models (Business Logic)
# =============================================================================


class CurrentConditions(BaseModel):
    """Current weather conditions for business logic."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    feels_like: float
    humidity_percent: int = Field(ge=0, le=100)
    wind_speed: float = Field(ge=0.0)
    condition_code: int = Field(ge=0, le=99)
    observed_at: datetime
    units: UnitSystem
