# core/coordinates.py

"""
Coordinate parsing and formatting.
Reads Decimal Degrees (DD), Degrees + Decimal Minutes (DM),
Degrees + Minutes + Seconds (DMS) and MGRS, and writes all four back out
from a single validated latitude/longitude pair.

MGRS <-> geographic conversion is delegated to a backend object so that the
grid library can be swapped or faked; the default wraps the `mgrs` package.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable
import math
import re

import mgrs

from .exceptions import ValidationError, CoordinateFormatError, MGRSConversionError, ErrorKind
from .formatting import parse_float
from .tool_registry import dprint

MGRS_PRECISION = 5

_COORDINATE_PATTERN = re.compile(
    r"""^([NSEW])?\s*
    (-?\d+(?:\.\d+)?)                 # degrees
    (?:\s*[°º]\s*|\s*[OD]\s*|\s+)     # degree mark or whitespace
    (\d+(?:\.\d+)?)\s*'?              # minutes
    (?:\s*(\d+(?:\.\d+)?)\s*"?)?      # seconds
    \s*([NSEW])?$""",
    re.VERBOSE,
)

_MGRS_LAYOUT = re.compile(r"^([A-Z\d]+[A-Z])(\d+)$")
_WHITESPACE = re.compile(r"\s+")


class CoordinateFormat(Enum):
    DD = "dd"
    DM = "dm"
    DMS = "dms"
    MGRS = "mgrs"


@dataclass(frozen=True)
class CoordinatePair:
    lat: float
    lon: float


@dataclass(frozen=True)
class CoordinateResultSet:
    dd: str
    dm: str
    dms: str
    mgrs: str


@runtime_checkable
class MGRSBackend(Protocol):
    """Anything that converts between MGRS grid strings and latitude/longitude."""

    def to_geographic(self, grid: str) -> CoordinatePair:
        ...

    def to_mgrs(self, pair: CoordinatePair, precision: int = MGRS_PRECISION) -> str:
        ...


class MGRSLibraryBackend:
    """Grid conversions through the `mgrs` package."""

    def __init__(self):
        self._converter = mgrs.MGRS()

    def to_geographic(self, grid):
        lat, lon = self._converter.toLatLon(grid)
        return CoordinatePair(lat=float(lat), lon=float(lon))

    def to_mgrs(self, pair, precision=MGRS_PRECISION):
        grid = self._converter.toMGRS(pair.lat, pair.lon, MGRSPrecision=precision)
        if isinstance(grid, bytes):
            grid = grid.decode("ascii")
        return grid


_default_backend = None


def get_default_backend():
    global _default_backend
    if _default_backend is None:
        _default_backend = MGRSLibraryBackend()
    return _default_backend


# =============================================================================
# VALIDATION
# =============================================================================

def validate_range(lat, lon):
    if not math.isfinite(lat) or lat < -90 or lat > 90:
        raise ValidationError("Latitude must be between -90 and 90 degrees.", field="latitude")
    if not math.isfinite(lon) or lon < -180 or lon > 180:
        raise ValidationError("Longitude must be between -180 and 180 degrees.", field="longitude")


def _axis_label(is_lat):
    return "latitude" if is_lat else "longitude"


def get_sign_from_direction(direction, is_lat, negative_degrees):
    """
    +1 or -1 for a hemisphere letter. Without a letter the sign of the
    degrees is used. A letter from the other axis is rejected.
    """
    normalized = direction.upper()
    allowed = ("N", "S") if is_lat else ("E", "W")

    if normalized and normalized not in allowed:
        raise ValidationError(
            f"Use {' or '.join(allowed)} for {_axis_label(is_lat)} directions.",
            kind=ErrorKind.FORMAT,
            field=_axis_label(is_lat),
        )

    if normalized in ("S", "W"):
        return -1
    if normalized in ("N", "E"):
        return 1
    return -1 if negative_degrees else 1


def get_direction(value, is_lat):
    if is_lat:
        return "N" if value >= 0 else "S"
    return "E" if value >= 0 else "W"


# =============================================================================
# PARSING
# =============================================================================

def parse_decimal_degrees(lat_str, lon_str):
    """Two plain numbers; North/East positive."""
    message = "Please provide numeric latitude and longitude values."
    lat = parse_float(lat_str, message=message, field="latitude")
    lon = parse_float(lon_str, message=message, field="longitude")
    validate_range(lat, lon)
    return CoordinatePair(lat=lat, lon=lon)


def parse_coordinate_string(value, expect_seconds, is_lat):
    """
    Parse one DM or DMS axis value such as 50° 5.712' N or N 50 5 42.8.

    Args:
        value: Raw text from the form
        expect_seconds: True for DMS, False for DM
        is_lat: True for the latitude field

    Returns:
        Signed decimal degrees
    """
    format_label = "DMS" if expect_seconds else "DM"
    text = (value or "").strip().upper()
    match = _COORDINATE_PATTERN.match(text)

    if not match:
        raise CoordinateFormatError(f'Could not parse {format_label} value: "{value}"', field=_axis_label(is_lat))

    prefix_dir, degrees_str, minutes_str, seconds_str, suffix_dir = match.groups()
    degrees = float(degrees_str)
    minutes = float(minutes_str)
    seconds = float(seconds_str) if seconds_str is not None else 0.0

    if minutes < 0 or minutes >= 60 or seconds < 0 or seconds >= 60:
        raise ValidationError("Minutes and seconds must be between 0 and 59.", field=_axis_label(is_lat))

    if expect_seconds and seconds_str is None:
        raise CoordinateFormatError("Please include seconds for DMS coordinates.", field=_axis_label(is_lat))

    if prefix_dir and suffix_dir:
        raise CoordinateFormatError(
            f"Use a single direction letter for the {_axis_label(is_lat)} {format_label} value.",
            field=_axis_label(is_lat),
        )

    direction = prefix_dir or suffix_dir or ""

    if expect_seconds and not direction:
        raise CoordinateFormatError(
            f"Please include N/S or E/W for the {_axis_label(is_lat)} DMS value.",
            field=_axis_label(is_lat),
        )

    sign = get_sign_from_direction(direction, is_lat, degrees_str.startswith("-"))
    return sign * (abs(degrees) + minutes / 60 + seconds / 3600)


def parse_degrees_minutes(lat_str, lon_str, expect_seconds):
    lat = parse_coordinate_string(lat_str, expect_seconds, True)
    lon = parse_coordinate_string(lon_str, expect_seconds, False)
    validate_range(lat, lon)
    return CoordinatePair(lat=lat, lon=lon)


def parse_mgrs(value, backend=None):
    """
    Grid reference to latitude/longitude. Every library failure becomes the
    same MGRSConversionError; the detail only goes to the debug log.
    """
    mgrs_value = (value or "").strip()
    if not mgrs_value:
        raise ValidationError("Please enter an MGRS coordinate.", kind=ErrorKind.FORMAT, field="mgrs")

    cleaned = _WHITESPACE.sub("", mgrs_value).upper()
    backend = backend or get_default_backend()

    try:
        pair = backend.to_geographic(cleaned)
        validate_range(pair.lat, pair.lon)
    except Exception as e:
        dprint(f"[ERROR] MGRS parse failed for {cleaned!r}: {e}")
        raise MGRSConversionError() from e
    return pair


def parse_coordinates(coordinate_format, lat_str="", lon_str="", mgrs_str="", backend=None):
    """Dispatch to the parser for the selected input format."""
    try:
        coordinate_format = CoordinateFormat(coordinate_format)
    except ValueError:
        raise ValidationError("Unsupported format selected.", kind=ErrorKind.FORMAT, field="format")

    if coordinate_format is CoordinateFormat.DD:
        return parse_decimal_degrees(lat_str, lon_str)
    if coordinate_format is CoordinateFormat.DM:
        return parse_degrees_minutes(lat_str, lon_str, False)
    if coordinate_format is CoordinateFormat.DMS:
        return parse_degrees_minutes(lat_str, lon_str, True)
    return parse_mgrs(mgrs_str, backend=backend)


# =============================================================================
# FORMATTING
# =============================================================================

def format_decimal_degrees(pair):
    return f"{pair.lat:.6f}, {pair.lon:.6f}"


def format_degrees_minutes(value, is_lat):
    """48.85837 -> 48°51.502'N"""
    # thousandths of a minute, so 59.9996' carries into the next degree
    total = round(abs(value) * 60000)
    degrees, thousandths = divmod(total, 60000)
    return f"{degrees}°{thousandths / 1000:.3f}'{get_direction(value, is_lat)}"


def format_dms(value, is_lat):
    """48.85837 -> 48°51'30.1"N"""
    # tenths of a second, so 59.96" carries into the next minute
    total = round(abs(value) * 36000)
    degrees, remainder = divmod(total, 36000)
    minutes, tenths = divmod(remainder, 600)
    return f"{degrees}°{minutes}'{tenths / 10:.1f}\"{get_direction(value, is_lat)}"


def format_mgrs(mgrs_string):
    """Space out a grid reference: 31UDQ4825111932 -> 31UDQ 48251 11932"""
    match = _MGRS_LAYOUT.match(mgrs_string)
    if not match:
        return mgrs_string

    grid_part, digits = match.groups()
    half_length = len(digits) // 2
    return f"{grid_part} {digits[:half_length]} {digits[half_length:]}"


def build_coordinate_results(pair, backend=None):
    """All four display formats for one validated pair."""
    validate_range(pair.lat, pair.lon)
    backend = backend or get_default_backend()

    try:
        mgrs_raw = backend.to_mgrs(pair, MGRS_PRECISION)
    except Exception as e:
        dprint(f"[ERROR] MGRS forward failed for {pair}: {e}")
        raise MGRSConversionError("Unable to express these coordinates in MGRS.") from e

    return CoordinateResultSet(
        dd=format_decimal_degrees(pair),
        dm=f"{format_degrees_minutes(pair.lat, True)}, {format_degrees_minutes(pair.lon, False)}",
        dms=f"{format_dms(pair.lat, True)}, {format_dms(pair.lon, False)}",
        mgrs=format_mgrs(mgrs_raw),
    )
