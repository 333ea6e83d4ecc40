# =============================================================================
# Constants
# =============================================================================

UNKNOWN_ICON = "\U0001F324\uFE0F"

_WEATHER_CODE_DESCRIPTIONS = {
    # Clear conditions
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    # Fog conditions
    45: "Fog",
    48: "Depositing rime fog",
    # Drizzle conditions
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    # Rain conditions
    61: "Light rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    # Snow conditions
    71: "Light snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    # Shower conditions
    80: "Light rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Light snow showers",
    86: "Heavy snow showers",
    # Thunderstorm conditions
    95: "Thunderstorm",
    96: "Thunderstorm with light hail",
    99: "Thunderstorm with heavy hail",
}

_SUN = "\u2600\uFE0F"
_SUN_BEHIND_CLOUD = "\u26C5"
_CLOUD = "\u2601\uFE0F"
_FOG = "\U0001F32B\uFE0F"
_SUN_BEHIND_RAIN_CLOUD = "\U0001F326\uFE0F"
_RAIN_CLOUD = "\U0001F327\uFE0F"
_SNOW_CLOUD = "\U0001F328\uFE0F"
_SNOWFLAKE = "\u2744\uFE0F"
_THUNDER_CLOUD = "\u26C8\uFE0F"

_WEATHER_CODE_ICONS = {
    0: _SUN,
    1: UNKNOWN_ICON,
    2: _SUN_BEHIND_CLOUD,
    3: _CLOUD,
    45: _FOG,
    48: _FOG,
    51: _SUN_BEHIND_RAIN_CLOUD,
    53: _SUN_BEHIND_RAIN_CLOUD,
    55: _RAIN_CLOUD,
    56: _SNOW_CLOUD,
    57: _SNOW_CLOUD,
    61: _RAIN_CLOUD,
    63: _RAIN_CLOUD,
    65: _THUNDER_CLOUD,
    66: _SNOW_CLOUD,
    67: _SNOW_CLOUD,
    71: _SNOW_CLOUD,
    73: _SNOWFLAKE,
    75: _SNOWFLAKE,
    77: _SNOW_CLOUD,
    80: _SUN_BEHIND_RAIN_CLOUD,
    81: _RAIN_CLOUD,
    82: _THUNDER_CLOUD,
    85: _SNOW_CLOUD,
    86: _SNOWFLAKE,
    95: _THUNDER_CLOUD,
    96: _THUNDER_CLOUD,
    99: _THUNDER_CLOUD,
}


def describe(code: int) -> str:
    """Get weather description from WMO weather code."""
    return _WEATHER_CODE_DESCRIPTIONS.get(code, f"Unknown condition (code: {code})")


def icon_for(code: int) -> str:
    """Get display glyph from WMO weather code."""
    return _WEATHER_CODE_ICONS.get(code, UNKNOWN_ICON)
