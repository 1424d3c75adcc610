# core/formatting.py

"""
Form input parsing and result display text.
Turns raw form strings into numbers before any calculator runs, and
turns calculator results into the strings and advice shown on each page.
"""

import math

from .exceptions import NonNumericInputError
from .calculations import FEET_PER_METER
from .constants import STANDARD_RATE_TURN, STANDARD_RATE_TOLERANCE


# =============================================================================
# INPUT PARSING
# =============================================================================

def parse_float(value, message="Please fill in all fields with valid numbers.", field=None):
    """
    Read one form value as a finite float.

    Dash number inputs hand over floats or None, text inputs hand over
    strings; both are accepted.
    """
    if value is None or isinstance(value, bool):
        raise NonNumericInputError(message, field=field)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise NonNumericInputError(message, field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise NonNumericInputError(message, field=field)
    if not math.isfinite(number):
        raise NonNumericInputError(message, field=field)
    return number


def parse_floats(*values, message="Please fill in all fields with valid numbers."):
    """parse_float over several fields; the first bad one raises."""
    return [parse_float(value, message=message) for value in values]


# =============================================================================
# GENERIC NUMBER FORMATTING
# =============================================================================

def format_feet(value):
    """1554.3 -> '1,554'"""
    return f"{round(value):,}"


def format_signed_feet(value):
    """54.3 -> '+54', -12.6 -> '-13'"""
    rounded = round(value)
    sign = "+" if value >= 0 else ""
    return f"{sign}{rounded:,}"


def format_conversion_value(value):
    """Fewer decimals for bigger numbers: 1 above 1000, 2 above 100, 3 above 10, else 4."""
    if value >= 1000:
        return f"{value:.1f}"
    if value >= 100:
        return f"{value:.2f}"
    if value >= 10:
        return f"{value:.3f}"
    return f"{value:.4f}"


def format_altitude(value_ft, unit="ft"):
    converted = value_ft / FEET_PER_METER if unit == "m" else value_ft
    return f"{round(converted):,}"


def feet_from(value, unit="ft"):
    return value * FEET_PER_METER if unit == "m" else value


# =============================================================================
# ALTITUDE CORRECTION
# =============================================================================

def altitude_correction_advice(correction):
    if correction > 0:
        return (
            f"Cold temperature! You will be LOWER than indicated altitude. Add {round(correction)} ft "
            "to your decision altitude to maintain safe terrain clearance."
        )
    if correction < 0:
        return (
            f"Warm temperature. You will be HIGHER than indicated altitude by {abs(round(correction))} ft. "
            "Correction usually not applied for warmer temperatures."
        )
    return "Temperature matches ISA. No correction needed."


# =============================================================================
# TURN
# =============================================================================

def format_turn_time(time_360_seconds):
    """125 -> '2m 5s'"""
    if not math.isfinite(time_360_seconds):
        return "-"
    minutes = int(time_360_seconds // 60)
    seconds = round(time_360_seconds % 60)
    return f"{minutes}m {seconds}s"


def turn_rate_advice(rate_deg_per_sec):
    low = STANDARD_RATE_TURN - STANDARD_RATE_TOLERANCE
    high = STANDARD_RATE_TURN + STANDARD_RATE_TOLERANCE
    if low <= rate_deg_per_sec <= high:
        return "This is approximately a standard rate turn (3°/sec)."
    if rate_deg_per_sec > high:
        return "This is faster than a standard rate turn."
    return "This is slower than a standard rate turn."


def format_flyby_distance(value):
    if value >= 100:
        return f"{value:.2f}"
    if value >= 10:
        return f"{value:.3f}"
    return f"{value:.4f}"


def flyby_summary(turn_angle_deg):
    if turn_angle_deg < 0.01:
        return "No fly-by lead is required for a 0 deg track change."
    return f"Track change: {turn_angle_deg:.1f} deg."


# =============================================================================
# WIND
# =============================================================================

def format_wind_component(value):
    return f"{round(abs(value) * 10) / 10:.1f}"


def headwind_label(headwind):
    return "headwind" if headwind >= 0 else "tailwind"


def crosswind_label(side):
    side = getattr(side, "value", side)
    return "no crosswind" if side == "none" else f"from the {side}"


def format_track(ground_track):
    """7.4 -> '007'"""
    return f"{round(ground_track) % 360:03d}"


def speed_change_label(speed_change):
    if speed_change > 0:
        return "tailwind component increasing"
    if speed_change < 0:
        return "headwind component reducing"
    return "little change to"


def wind_correction_text(wca):
    if wca == 0:
        return ""
    direction = "right" if wca > 0 else "left"
    return f" Wind Correction Angle: {abs(wca):.1f}° {direction}."


# =============================================================================
# MINIMA
# =============================================================================

def minima_note(result):
    if result.uses_aircraft_minima:
        lead = (
            f"OCH is below the aircraft minima by {round(result.aircraft_adjustment)} ft. "
            "Added the difference to DA/MDA and set DH/MDH to the aircraft minima "
            "before applying the operator margin."
        )
    else:
        lead = "Used published OCA/OCH and applied the operator margin."
    return f"{lead} Always crosscheck with manual calculations!"
