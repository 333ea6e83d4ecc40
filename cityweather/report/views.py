from pydantic import BaseModel, ConfigDict

from cityweather.forecast.views import CurrentConditions
from cityweather.geocoding.views import Location


class WeatherReport(BaseModel):
    """Location, current conditions and their textual description."""

    model_config = ConfigDict(frozen=True)

    location: Location
    conditions: CurrentConditions
    description: str
