from .service import WeatherFetcher
from .views import CurrentConditions, UnitSystem

__all__ = [
    "CurrentConditions",
    "UnitSystem",
    "WeatherFetcher",
]
