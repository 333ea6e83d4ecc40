from .service import Geocoder, validate_city_query
from .views import Location

__all__ = [
    "Geocoder",
    "Location",
    "validate_city_query",
]
