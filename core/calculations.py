# core/calculations.py

"""
Centralized aviation reference calculations.
Altitude correction, turn, fly-by, wind, ground vector, approach table
and minima math lives here. Every function is pure: numbers in,
a frozen result out, or a ValidationError.
"""

from dataclasses import dataclass
from enum import Enum
import math

import numpy as np

from .exceptions import ValidationError

g = 9.81                      # m/s², turn calculator
G_STANDARD = 9.80665          # m/s², fly-by turn
KTS_TO_MPS = 0.514444
NM_TO_M = 1852
NM_TO_FEET = 6076.12
NM_TO_KM = 1.852
FEET_PER_METER = 3.28084
KELVIN_OFFSET = 273
ISA_SEA_LEVEL_TEMP_C = 15
ISA_LAPSE_RATE_C_PER_1000FT = 2
VS_FACTOR = 101.27            # ft/min per kt of ground speed per unit slope

STRAIGHT_TRACK_CHANGE_EPS_DEG = 1e-6
MAX_SUPPORTED_TURN_ANGLE_DEG = 179
MAX_SLOPE_ANGLE_DEG = 60
CROSSWIND_DEAD_BAND = 0.05


class CrosswindSide(Enum):
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


@dataclass(frozen=True)
class AltitudeCorrectionResult:
    corrected_altitude: float
    correction: float


@dataclass(frozen=True)
class TurnResult:
    radius_meters: float
    time_360_seconds: float


@dataclass(frozen=True)
class TurnAnticipationResult:
    turn_angle_deg: float
    turn_radius_m: float
    lead_distance_m: float
    lead_distance_nm: float


@dataclass(frozen=True)
class WindComponents:
    headwind: float
    crosswind: float
    crosswind_side: CrosswindSide


@dataclass(frozen=True)
class GroundVector:
    ground_track: float
    ground_speed: float


@dataclass(frozen=True)
class ApproachRow:
    distance_nm: float
    distance_km: str
    altitude_above: float
    height_above: float


@dataclass(frozen=True)
class MinimaResult:
    decision_altitude: float
    decision_height: float
    uses_aircraft_minima: bool
    aircraft_adjustment: float


# =============================================================================
# ANGLES
# =============================================================================

def normalize_degrees(value):
    """Normalize an angle into [0, 360)."""
    normalized = math.fmod(value, 360)
    return normalized + 360 if normalized < 0 else normalized


def _require_heading(value, label):
    if value < 0 or value > 360:
        raise ValidationError(f"{label} must be between 0 and 360 degrees.", field=label)


# =============================================================================
# ALTITUDE CORRECTION
# =============================================================================

def compute_isa_temperature(elevation_ft):
    """ISA temperature (°C) at a field elevation: 15°C minus 2°C per 1000 ft."""
    return ISA_SEA_LEVEL_TEMP_C - (elevation_ft / 1000) * ISA_LAPSE_RATE_C_PER_1000FT


def calculate_temperature_correction(decision_altitude, airport_elevation, temperature):
    """
    Cold/warm temperature correction for a DA/MDA.

    correction = height_above_airport * (ISA - OAT) / (OAT + 273)

    Positive correction means colder than ISA: the aircraft is lower than
    indicated and the correction must be added to the minimum.

    Args:
        decision_altitude: DA/MDA in feet
        airport_elevation: Aerodrome elevation in feet
        temperature: Aerodrome OAT in °C

    Returns:
        AltitudeCorrectionResult
    """
    if airport_elevation >= decision_altitude:
        raise ValidationError("Airport elevation must be lower than DA/MDA.", field="airport_elevation")
    if temperature <= -KELVIN_OFFSET:
        raise ValidationError(f"Temperature must be above -{KELVIN_OFFSET}°C.", field="temperature")

    height_above_airport = decision_altitude - airport_elevation
    isa_temp = compute_isa_temperature(airport_elevation)
    actual_temp_kelvin = temperature + KELVIN_OFFSET
    correction = height_above_airport * (isa_temp - temperature) / actual_temp_kelvin
    return AltitudeCorrectionResult(
        corrected_altitude=decision_altitude + correction,
        correction=correction,
    )


# =============================================================================
# TURN PHYSICS
# =============================================================================

def calculate_turn(speed_knots, bank_angle):
    """
    Turn radius (m) and 360° turn time (s), both rounded to whole numbers.

    radius = V² / (g tan φ), rate = g tan φ / V
    A bank of 0° or 90° and beyond cannot complete a turn and yields inf.
    """
    if speed_knots <= 0:
        raise ValidationError("Speed must be greater than 0.", field="speed")

    if bank_angle <= 0 or bank_angle >= 90:
        return TurnResult(radius_meters=math.inf, time_360_seconds=math.inf)

    speed_mps = speed_knots * KTS_TO_MPS
    tan_bank = math.tan(math.radians(bank_angle))
    radius = speed_mps ** 2 / (g * tan_bank)
    turn_rate_deg_per_sec = math.degrees(g * tan_bank / speed_mps)
    time_360 = 360 / turn_rate_deg_per_sec
    return TurnResult(radius_meters=round(radius), time_360_seconds=round(time_360))


def turn_rate_from_time(time_360_seconds):
    """Turn rate in °/s from the time of a full circle; 0 for a turn that never completes."""
    if not math.isfinite(time_360_seconds) or time_360_seconds <= 0:
        return 0.0
    return 360 / time_360_seconds


# =============================================================================
# FLY-BY TURN ANTICIPATION
# =============================================================================

def smallest_turn_angle(inbound_track_deg, outbound_track_deg):
    """Smallest track change between two courses, in [0, 180]."""
    inbound = normalize_degrees(inbound_track_deg)
    outbound = normalize_degrees(outbound_track_deg)
    delta = abs(outbound - inbound)
    if delta > 180:
        delta = 360 - delta
    return delta


def compute_turn_anticipation(bank_angle_deg, ground_speed_kt, inbound_track_deg, outbound_track_deg):
    """
    Fly-by lead distance before a waypoint.

    Assumes a coordinated constant-bank turn at a representative ground
    speed over a flat Earth. lead = r * tan(Δ/2).

    Args:
        bank_angle_deg: Bank angle in degrees, > 0
        ground_speed_kt: Ground speed in knots, > 0
        inbound_track_deg: Track to the waypoint
        outbound_track_deg: Track from the waypoint

    Returns:
        TurnAnticipationResult with distances in meters and NM
    """
    if not math.isfinite(bank_angle_deg) or bank_angle_deg <= 0:
        raise ValidationError("bankAngleDeg must be a finite number > 0", field="bank_angle")
    if not math.isfinite(ground_speed_kt) or ground_speed_kt <= 0:
        raise ValidationError("groundSpeedKt must be a finite number > 0", field="ground_speed")
    if not (math.isfinite(inbound_track_deg) and math.isfinite(outbound_track_deg)):
        raise ValidationError("Inbound and outbound track must be finite numbers.", field="track")

    turn_angle_deg = smallest_turn_angle(inbound_track_deg, outbound_track_deg)

    if turn_angle_deg > MAX_SUPPORTED_TURN_ANGLE_DEG:
        raise ValidationError("Turn difference must be 179° or less for this model.", field="track")

    if turn_angle_deg < STRAIGHT_TRACK_CHANGE_EPS_DEG:
        return TurnAnticipationResult(
            turn_angle_deg=turn_angle_deg,
            turn_radius_m=math.inf,
            lead_distance_m=0.0,
            lead_distance_nm=0.0,
        )

    speed_mps = ground_speed_kt * KTS_TO_MPS
    tan_bank = math.tan(math.radians(bank_angle_deg))
    if not math.isfinite(tan_bank) or tan_bank <= 0:
        raise ValidationError("Invalid bank angle (tan(phi) not finite/positive).", field="bank_angle")

    turn_radius_m = speed_mps ** 2 / (G_STANDARD * tan_bank)
    lead_distance_m = turn_radius_m * math.tan(math.radians(turn_angle_deg) / 2)
    return TurnAnticipationResult(
        turn_angle_deg=turn_angle_deg,
        turn_radius_m=turn_radius_m,
        lead_distance_m=lead_distance_m,
        lead_distance_nm=lead_distance_m / NM_TO_M,
    )


# =============================================================================
# WIND
# =============================================================================

def calculate_wind_components(wind_speed, wind_direction, aircraft_heading):
    """
    Headwind (+) / tailwind (-) and crosswind (+ from the right, - from the left).
    """
    if wind_speed < 0:
        raise ValidationError("Wind speed must be zero or greater.", field="wind_speed")
    if wind_direction < 0 or wind_direction > 360 or aircraft_heading < 0 or aircraft_heading > 360:
        raise ValidationError(
            "Wind direction and aircraft heading must be between 0 and 360 degrees.",
            field="wind_direction",
        )

    relative = math.radians(normalize_degrees(wind_direction) - normalize_degrees(aircraft_heading))
    headwind = wind_speed * math.cos(relative)
    crosswind = wind_speed * math.sin(relative)

    side = CrosswindSide.NONE
    if abs(crosswind) >= CROSSWIND_DEAD_BAND:
        side = CrosswindSide.RIGHT if crosswind > 0 else CrosswindSide.LEFT
    return WindComponents(headwind=headwind, crosswind=crosswind, crosswind_side=side)


def calculate_ground_vector(heading, tas, wind_from_direction, wind_speed):
    """
    Wind triangle: ground track and ground speed from heading/TAS and wind.
    North is +Y, east is +X; the wind blows toward its direction + 180°.
    """
    if wind_speed < 0 or tas < 0:
        raise ValidationError("Speeds must be zero or greater.", field="speed")
    _require_heading(wind_from_direction, "Wind Direction")
    _require_heading(heading, "Aircraft Heading")

    heading_rad = math.radians(normalize_degrees(heading))
    wind_to_rad = math.radians(normalize_degrees(normalize_degrees(wind_from_direction) + 180))

    total = np.array([tas * math.sin(heading_rad), tas * math.cos(heading_rad)]) + \
        np.array([wind_speed * math.sin(wind_to_rad), wind_speed * math.cos(wind_to_rad)])

    ground_speed = float(np.hypot(total[0], total[1]))
    ground_track = normalize_degrees(math.degrees(math.atan2(total[0], total[1])))
    return GroundVector(ground_track=ground_track, ground_speed=ground_speed)


def wind_correction_angle(ground_track, heading):
    """Signed drift from heading to track in [-180, 180]; positive is right."""
    wca = ground_track - heading
    if wca > 180:
        wca -= 360
    if wca < -180:
        wca += 360
    return wca


# =============================================================================
# APPROACH TABLE
# =============================================================================

def calculate_approach_table(target_altitude, slope_angle, distance_unit="NM"):
    """
    Distance / altitude / height rows along a glide slope.

    NM spacing gives 10 rows (1..10 NM), km spacing gives 20 rows (1..20 km).
    height = distance_ft * tan(slope), altitude = target + height

    Args:
        target_altitude: Target altitude in feet
        slope_angle: Glide slope angle in degrees, 0 to 60
        distance_unit: "NM" or "km"

    Returns:
        List of ApproachRow
    """
    if not math.isfinite(slope_angle) or slope_angle < 0 or slope_angle > MAX_SLOPE_ANGLE_DEG:
        raise ValidationError("Please enter a valid slope angle (0-60°)", field="slope_angle")

    tan_slope = math.tan(math.radians(slope_angle))

    if distance_unit == "km":
        distances_km = np.arange(1, 21)
        distances_nm = distances_km / NM_TO_KM
        km_labels = [f"{int(km)}" for km in distances_km]
    elif distance_unit == "NM":
        distances_nm = np.arange(1, 11)
        km_labels = [f"{nm * NM_TO_KM:.1f}" for nm in distances_nm]
    else:
        raise ValidationError(f"Unsupported distance unit: {distance_unit}", field="distance_unit")

    heights = distances_nm * NM_TO_FEET * tan_slope
    altitudes = target_altitude + heights

    return [
        ApproachRow(
            distance_nm=int(nm) if distance_unit == "NM" else float(nm),
            distance_km=km_label,
            altitude_above=float(alt),
            height_above=float(h),
        )
        for nm, km_label, alt, h in zip(distances_nm, km_labels, altitudes, heights)
    ]


def calculate_target_vertical_speed(ground_speed, slope_angle):
    """Rate of descent (ft/min) to hold a glide slope at a given ground speed."""
    if ground_speed <= 0:
        raise ValidationError("Ground speed must be greater than 0.", field="ground_speed")
    return ground_speed * math.tan(math.radians(slope_angle)) * VS_FACTOR


# =============================================================================
# MINIMA
# =============================================================================

def calculate_minima(oca, och, aircraft_minima, operator_margin):
    """
    DA/MDA and DH/MDH from OCA/OCH, aircraft minima and operator margin.

    When OCH is below the aircraft minima, the difference is added to the
    OCA and the DH becomes the aircraft minima; the margin goes on top.
    """
    for label, value in (("OCA", oca), ("OCH", och), ("Aircraft minima", aircraft_minima),
                         ("Operator margin", operator_margin)):
        if value < 0:
            raise ValidationError(f"{label} cannot be negative.", field=label)

    uses_aircraft_minima = och < aircraft_minima
    aircraft_adjustment = aircraft_minima - och if uses_aircraft_minima else 0
    decision_altitude = oca + aircraft_adjustment + operator_margin
    decision_height = (aircraft_minima if uses_aircraft_minima else och) + operator_margin
    return MinimaResult(
        decision_altitude=decision_altitude,
        decision_height=decision_height,
        uses_aircraft_minima=uses_aircraft_minima,
        aircraft_adjustment=aircraft_adjustment,
    )
