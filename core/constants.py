# core/constants.py

"""
Application-wide constants for the Aviation Tools app.
Physics constants are in calculations.py - this file is for app config constants.
"""

import os

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
DEBUG_LOG = os.environ.get("AVIATION_TOOLS_DEBUG_LOG", "0") == "1"

# =============================================================================
# SERVER SETTINGS
# =============================================================================
SERVER_HOST = os.environ.get("AVIATION_TOOLS_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("AVIATION_TOOLS_PORT", "8050"))
SERVER_DEBUG = os.environ.get("AVIATION_TOOLS_DEBUG", "1") == "1"

# =============================================================================
# THEME SETTINGS
# =============================================================================
THEME_STORAGE_KEY = "aviation-tools-theme"
THEMES = ("dark", "light")
DEFAULT_THEME = "dark"

# =============================================================================
# DEFAULT VALUES
# =============================================================================
DEFAULT_SLOPE_ANGLE = 3.0        # degrees
DEFAULT_OPERATOR_MARGIN = 0      # ft
DEFAULT_FUEL_DENSITY = 0.8       # kg/L
DEFAULT_BANK_ANGLE = 25          # degrees
DEFAULT_DISTANCE_UNIT = "m"
DEFAULT_SPEED_UNIT = "kt"
DEFAULT_FUEL_UNIT = "liters"
DEFAULT_APPROACH_DISTANCE_UNIT = "NM"
DEFAULT_ALTITUDE_UNIT = "ft"
DEFAULT_FLYBY_UNIT = "nm"
DEFAULT_COORDINATE_FORMAT = "dd"

# =============================================================================
# INTERPRETATION THRESHOLDS
# =============================================================================
STANDARD_RATE_TURN = 3.0         # deg/s
STANDARD_RATE_TOLERANCE = 0.1    # deg/s either side

# =============================================================================
# DROPDOWN OPTIONS
# =============================================================================
DISTANCE_UNIT_LABELS = {
    "m": "m",
    "km": "km",
    "nm": "NM",
    "ft": "ft",
    "sm": "SM",
}

SPEED_UNIT_LABELS = {
    "kt": "kt",
    "kmh": "km/h",
    "ms": "m/s",
    "ftmin": "ft/min",
}

FUEL_UNIT_LABELS = {
    "liters": "L",
    "kg": "kg",
    "gallon": "gal",
    "pound": "lb",
}

COORDINATE_FORMAT_LABELS = {
    "dd": "Decimal Degrees (DD)",
    "dm": "Degrees + Decimal Minutes (DM)",
    "dms": "Degrees + Minutes + Seconds (DMS)",
    "mgrs": "MGRS (5-digit)",
}

COORDINATE_PLACEHOLDERS = {
    "dd": {
        "lat": "50.0952147",
        "lon": "14.4360100",
        "helper": "Enter latitude and longitude in decimal degrees. North/East positive, South/West negative.",
    },
    "dm": {
        "lat": "50° 5.712' N",
        "lon": "14° 26.160' E",
        "helper": "Enter degrees and decimal minutes with hemisphere (e.g., 50° 5.712' N).",
    },
    "dms": {
        "lat": "50° 5' 42.8\" N",
        "lon": "14° 26' 9.6\" E",
        "helper": "Enter degrees, minutes, seconds with hemisphere (e.g., 50° 5' 42.8\" N).",
    },
    "mgrs": {
        "lat": "",
        "lon": "",
        "helper": "Enter a 5-digit precision MGRS coordinate (e.g., 33UXP0406551).",
    },
}

# =============================================================================
# STYLING CONSTANTS
# =============================================================================
COLORS = {
    "glide_path": "green",
    "target_altitude": "black",
    "aircraft_vector": "blue",
    "wind_vector": "red",
    "ground_vector": "purple",
}
