"""Static lookups from WMO weather codes to descriptions and icons."""

from .catalog import UNKNOWN_ICON, describe, icon_for

__all__ = [
    "UNKNOWN_ICON",
    "describe",
    "icon_for",
]
