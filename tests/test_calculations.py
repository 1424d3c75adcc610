# test_calculations.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math

import pytest

from core.calculations import *
from core.exceptions import ValidationError


def test_altitude_correction():
    print("\n=== TEST: Altitude Correction ===")
    result = calculate_temperature_correction(1500, 1000, -15)
    print(f"Correction: {result.correction:.1f} ft, corrected: {result.corrected_altitude:.1f} ft")
    assert abs(result.correction - 54.3) < 0.1, "Cold temperature correction incorrect"
    assert abs(result.corrected_altitude - 1554.3) < 0.1, "Corrected altitude incorrect"


def test_altitude_correction_warm_and_isa():
    # ISA at 1000 ft is 13°C
    assert abs(compute_isa_temperature(1000) - 13) < 1e-9, "ISA temperature incorrect"
    isa = calculate_temperature_correction(1500, 1000, 13)
    assert isa.correction == 0, "No correction expected at ISA"
    warm = calculate_temperature_correction(1500, 1000, 30)
    assert warm.correction < 0, "Warm temperature should give a negative correction"


def test_altitude_correction_rejects_airport_above_minimum():
    with pytest.raises(ValidationError) as excinfo:
        calculate_temperature_correction(1000, 1000, -15)
    assert excinfo.value.message == "Airport elevation must be lower than DA/MDA."


def test_altitude_correction_rejects_temperature_at_absolute_zero():
    for temperature in (-273, -300):
        with pytest.raises(ValidationError) as excinfo:
            calculate_temperature_correction(1500, 1000, temperature)
        assert excinfo.value.message == "Temperature must be above -273°C."
        assert excinfo.value.field == "temperature"
    # just above the limit still calculates
    result = calculate_temperature_correction(1500, 1000, -272)
    assert result.correction > 0, "Very cold air must still give a positive correction"


def test_turn_scenario():
    print("\n=== TEST: Turn 120 kt / 15° ===")
    result = calculate_turn(120, 15)
    rate = turn_rate_from_time(result.time_360_seconds)
    print(f"Radius: {result.radius_meters} m, 360° in {result.time_360_seconds} s, rate {rate:.2f} °/s")
    assert math.isfinite(result.radius_meters) and result.radius_meters > 0, "Radius must be positive and finite"
    assert abs(result.radius_meters - 1450) <= 1, "Turn radius incorrect"
    assert 2.0 <= rate <= 2.6, "Turn rate outside expected range"


def test_turn_degeneracy():
    for speed in (60, 120, 450):
        for bank in (0, 90, 95):
            result = calculate_turn(speed, bank)
            assert result.radius_meters == math.inf, f"Radius should be infinite at {bank}° bank"
            assert result.time_360_seconds == math.inf, f"Time should be infinite at {bank}° bank"
    assert turn_rate_from_time(math.inf) == 0.0


def test_turn_monotonicity():
    radii = [calculate_turn(150, bank).radius_meters for bank in (10, 20, 30, 45, 60, 75)]
    assert all(a > b for a, b in zip(radii, radii[1:])), "Radius must shrink as bank increases"

    radii = [calculate_turn(speed, 25).radius_meters for speed in (80, 120, 160, 250)]
    assert all(a < b for a, b in zip(radii, radii[1:])), "Radius must grow with speed"


def test_turn_rejects_zero_speed():
    with pytest.raises(ValidationError) as excinfo:
        calculate_turn(0, 25)
    assert excinfo.value.message == "Speed must be greater than 0."


def test_smallest_turn_angle():
    assert smallest_turn_angle(90, 135) == 45
    assert smallest_turn_angle(350, 10) == 20
    assert smallest_turn_angle(10, 350) == 20
    assert smallest_turn_angle(-90, 270) == 0


def test_flyby_lead_distance():
    print("\n=== TEST: Fly-by Turn ===")
    result = compute_turn_anticipation(25, 180, 90, 135)
    print(f"Angle: {result.turn_angle_deg}°, radius {result.turn_radius_m:.0f} m, lead {result.lead_distance_nm:.3f} NM")
    assert abs(result.turn_angle_deg - 45) < 1e-9, "Turn angle incorrect"
    expected_radius = (180 * KTS_TO_MPS) ** 2 / (G_STANDARD * math.tan(math.radians(25)))
    assert abs(result.turn_radius_m - expected_radius) < 1e-6, "Turn radius incorrect"
    assert abs(result.lead_distance_m - expected_radius * math.tan(math.radians(22.5))) < 1e-6
    assert abs(result.lead_distance_nm - result.lead_distance_m / 1852) < 1e-9
    assert abs(result.lead_distance_m - 776.7) < 1.0, "Lead distance incorrect"


def test_flyby_straight_track():
    result = compute_turn_anticipation(25, 160, 180, 180)
    assert result.turn_angle_deg == 0
    assert result.lead_distance_m == 0 and result.lead_distance_nm == 0
    assert result.turn_radius_m == math.inf


def test_flyby_rejection():
    with pytest.raises(ValidationError) as excinfo:
        compute_turn_anticipation(25, 160, 90, 270)
    assert excinfo.value.message == "Turn difference must be 179° or less for this model."

    with pytest.raises(ValidationError, match="bankAngleDeg"):
        compute_turn_anticipation(0, 160, 90, 120)
    with pytest.raises(ValidationError, match="groundSpeedKt"):
        compute_turn_anticipation(25, math.nan, 90, 120)


def test_flyby_limits():
    result = compute_turn_anticipation(25, 160, 0, 179)
    assert abs(result.turn_angle_deg - 179) < 1e-9, "179° must still be accepted"
    assert math.isfinite(result.lead_distance_m) and result.lead_distance_m > 0

    nearly_straight = compute_turn_anticipation(25, 160, 90, 90 + 1e-7)
    assert nearly_straight.lead_distance_m == 0 and nearly_straight.lead_distance_nm == 0
    assert nearly_straight.turn_radius_m == math.inf


def test_wind_component_boundary():
    result = calculate_wind_components(15, 240, 240)
    assert abs(result.headwind - 15) < 1e-9, "Headwind should equal wind speed"
    assert abs(result.crosswind) < 1e-9, "Crosswind should be zero"
    assert result.crosswind_side is CrosswindSide.NONE


def test_wind_components_sides():
    right = calculate_wind_components(10, 360, 270)
    assert abs(right.headwind) < 1e-9
    assert abs(right.crosswind - 10) < 1e-9
    assert right.crosswind_side is CrosswindSide.RIGHT

    left = calculate_wind_components(10, 180, 270)
    assert abs(left.crosswind + 10) < 1e-9
    assert left.crosswind_side is CrosswindSide.LEFT

    tail = calculate_wind_components(10, 90, 270)
    assert abs(tail.headwind + 10) < 1e-9, "Wind from behind should be a tailwind"


def test_crosswind_dead_band():
    # 10 kt at 0.2° off the nose leaves about 0.035 kt of crosswind
    small = calculate_wind_components(10, 0.2, 0)
    assert 0 < small.crosswind < 0.05
    assert small.crosswind_side is CrosswindSide.NONE, "Crosswind below 0.05 kt should not get a side"

    edge = calculate_wind_components(0.05, 90, 0)
    assert abs(edge.crosswind - 0.05) < 1e-12
    assert edge.crosswind_side is CrosswindSide.RIGHT, "0.05 kt of crosswind should get a side"


def test_wind_components_validation():
    with pytest.raises(ValidationError):
        calculate_wind_components(-1, 90, 90)
    with pytest.raises(ValidationError) as excinfo:
        calculate_wind_components(10, 361, 90)
    assert excinfo.value.message == "Wind direction and aircraft heading must be between 0 and 360 degrees."


def test_ground_vector():
    print("\n=== TEST: Ground Vector ===")
    result = calculate_ground_vector(360, 120, 270, 20)
    print(f"Track {result.ground_track:.1f}°, GS {result.ground_speed:.1f} kt")
    assert abs(result.ground_speed - math.hypot(20, 120)) < 1e-6, "Ground speed incorrect"
    assert abs(result.ground_track - math.degrees(math.atan2(20, 120))) < 1e-6, "Ground track incorrect"

    calm = calculate_ground_vector(90, 100, 0, 0)
    assert abs(calm.ground_track - 90) < 1e-9 and abs(calm.ground_speed - 100) < 1e-9

    headwind = calculate_ground_vector(90, 100, 90, 30)
    assert abs(headwind.ground_speed - 70) < 1e-9


def test_ground_vector_validation():
    with pytest.raises(ValidationError) as excinfo:
        calculate_ground_vector(90, -5, 0, 0)
    assert excinfo.value.message == "Speeds must be zero or greater."
    with pytest.raises(ValidationError) as excinfo:
        calculate_ground_vector(400, 100, 0, 10)
    assert excinfo.value.message == "Aircraft Heading must be between 0 and 360 degrees."


def test_wind_correction_angle():
    assert abs(wind_correction_angle(9.5, 0) - 9.5) < 1e-9
    assert abs(wind_correction_angle(355, 5) + 10) < 1e-9
    assert abs(wind_correction_angle(5, 355) - 10) < 1e-9


def test_approach_table_shape():
    rows = calculate_approach_table(1000, 3.0, "NM")
    assert len(rows) == 10
    assert [row.distance_nm for row in rows] == list(range(1, 11))
    assert rows[0].distance_km == "1.9"
    assert abs(rows[0].height_above - 6076.12 * math.tan(math.radians(3))) < 1e-6
    assert abs(rows[0].altitude_above - (1000 + rows[0].height_above)) < 1e-9

    rows = calculate_approach_table(1000, 3.0, "km")
    assert len(rows) == 20
    assert [row.distance_km for row in rows] == [str(km) for km in range(1, 21)]
    assert abs(rows[0].distance_nm - 1 / 1.852) < 1e-9


def test_approach_table_validation():
    for slope in (-1, 61, math.nan):
        with pytest.raises(ValidationError) as excinfo:
            calculate_approach_table(1000, slope)
        assert excinfo.value.message == "Please enter a valid slope angle (0-60°)"


def test_target_vertical_speed():
    vs = calculate_target_vertical_speed(140, 3.0)
    assert abs(vs - 140 * math.tan(math.radians(3)) * 101.27) < 1e-9
    assert 700 < vs < 800, "3° at 140 kt should be roughly 740 ft/min"
    with pytest.raises(ValidationError):
        calculate_target_vertical_speed(0, 3.0)


def test_minima_selection():
    published = calculate_minima(1200, 400, 300, 20)
    assert published.uses_aircraft_minima is False
    assert published.decision_altitude == 1220
    assert published.decision_height == 420

    aircraft = calculate_minima(1200, 150, 300, 25)
    assert aircraft.uses_aircraft_minima is True
    assert aircraft.decision_altitude == 1375
    assert aircraft.decision_height == 325
    assert aircraft.aircraft_adjustment == 150


def test_minima_rejects_negative():
    with pytest.raises(ValidationError) as excinfo:
        calculate_minima(1200, 400, 300, -5)
    assert excinfo.value.message == "Operator margin cannot be negative."


def test_normalize_degrees():
    assert normalize_degrees(370) == 10
    assert normalize_degrees(-90) == 270
    assert normalize_degrees(360) == 0


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v", "-s"]))
