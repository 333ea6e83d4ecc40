from .env import WeatherEnv

__all__ = [
    "WeatherEnv",
]
