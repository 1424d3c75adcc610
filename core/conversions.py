# core/conversions.py

"""
Unit conversion tables for distance, speed and fuel.
Distance and speed go through a base unit (meters, meters/second);
fuel goes through liters and needs a density for volume <-> mass.
"""

import math

from .exceptions import ValidationError

# =============================================================================
# DISTANCE (base: meters)
# =============================================================================
DISTANCE_UNITS = ("m", "km", "nm", "ft", "sm")

DISTANCE_TO_M = {
    "m": 1,
    "km": 1000,
    "nm": 1852,
    "ft": 0.3048,
    "sm": 1609.344,
}

DISTANCE_FROM_M = {
    "m": 1,
    "km": 1 / 1000,
    "nm": 1 / 1852,
    "ft": 1 / 0.3048,
    "sm": 1 / 1609.344,
}

# =============================================================================
# SPEED (base: m/s)
# =============================================================================
SPEED_UNITS = ("kt", "kmh", "ms", "ftmin")

SPEED_TO_MS = {
    "kt": 0.514444,
    "kmh": 1 / 3.6,
    "ms": 1,
    "ftmin": 0.00508,
}

SPEED_FROM_MS = {
    "kt": 1 / 0.514444,
    "kmh": 3.6,
    "ms": 1,
    "ftmin": 1 / 0.00508,
}

# =============================================================================
# FUEL (base: liters)
# =============================================================================
FUEL_UNITS = ("liters", "kg", "gallon", "pound")

LITERS_PER_GALLON = 3.785411784
KG_PER_POUND = 0.45359237


def _convert(value, from_unit, to_unit, to_base, from_base, kind):
    if from_unit not in to_base or to_unit not in from_base:
        raise ValidationError(f"Unsupported {kind} unit: {from_unit if from_unit not in to_base else to_unit}",
                              field="unit")
    if from_unit == to_unit:
        return value
    return value * to_base[from_unit] * from_base[to_unit]


def convert_distance(value, from_unit, to_unit):
    """Convert a distance between m, km, nm, ft and sm."""
    return _convert(value, from_unit, to_unit, DISTANCE_TO_M, DISTANCE_FROM_M, "distance")


def convert_speed(value, from_unit, to_unit):
    """Convert a speed between kt, kmh, ms and ftmin."""
    return _convert(value, from_unit, to_unit, SPEED_TO_MS, SPEED_FROM_MS, "speed")


def convert_distance_all(value, from_unit):
    """Convert a non-negative distance into every supported unit."""
    if value < 0:
        raise ValidationError("Distance value must be positive.", field="distance")
    return {unit: convert_distance(value, from_unit, unit) for unit in DISTANCE_UNITS}


def convert_speed_all(value, from_unit):
    """Convert a non-negative speed into every supported unit."""
    if value < 0:
        raise ValidationError("Speed value must be positive.", field="speed")
    return {unit: convert_speed(value, from_unit, unit) for unit in SPEED_UNITS}


def validate_density(density):
    if not math.isfinite(density) or density <= 0:
        raise ValidationError("Please enter a valid density greater than 0.", field="density")


def convert_to_liters(value, unit, density):
    """Volume in liters of a fuel quantity; density in kg/L."""
    validate_density(density)
    if unit == "liters":
        return value
    if unit == "kg":
        return value / density
    if unit == "gallon":
        return value * LITERS_PER_GALLON
    if unit == "pound":
        return value * KG_PER_POUND / density
    raise ValidationError("Unsupported unit selected.", field="unit")


def convert_fuel(value, unit, density):
    """
    Express a fuel quantity in liters, kg, US gallons and pounds.

    Args:
        value: Quantity in `unit`
        unit: One of FUEL_UNITS
        density: Fuel density in kg/L, > 0

    Returns:
        Dict mapping every fuel unit to its value
    """
    liters = convert_to_liters(value, unit, density)
    kg = liters * density
    return {
        "liters": liters,
        "kg": kg,
        "gallon": liters / LITERS_PER_GALLON,
        "pound": kg / KG_PER_POUND,
    }


def convert_fuel_unit(value, from_unit, to_unit, density):
    """Pairwise fuel conversion built on convert_fuel."""
    if to_unit not in FUEL_UNITS:
        raise ValidationError("Unsupported unit selected.", field="unit")
    if from_unit == to_unit:
        validate_density(density)
        return value
    return convert_fuel(value, from_unit, density)[to_unit]
