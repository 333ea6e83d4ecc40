from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# API Response Models (Open-Meteo Geocoding API Mappings)
# =============================================================================


class OpenMeteoGeocodingResponse(BaseModel):
    """Top level of the geocoding search response."""

    results: list[dict[str, Any]] | None = None


class OpenMeteoGeocodingResult(BaseModel):
    """Direct mapping to a single geocoding candidate."""

    name: str
    latitude: Annotated[float, Field(strict=True)]
    longitude: Annotated[float, Field(strict=True)]
    country: str | None = None
    admin1: str | None = None


# =============================================================================
# Domain Models (Business Logic)
# =============================================================================


class Location(BaseModel):
    """Resolved place with coordinates."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    region: str | None = None
