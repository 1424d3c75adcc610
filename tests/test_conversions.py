# test_conversions.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import itertools

import pytest

from core.conversions import *
from core.exceptions import ValidationError


def test_identity():
    for x in (0, 1, 12.5, 8000):
        for unit in DISTANCE_UNITS:
            assert convert_distance(x, unit, unit) == x, f"Distance identity failed for {unit}"
        for unit in SPEED_UNITS:
            assert convert_speed(x, unit, unit) == x, f"Speed identity failed for {unit}"
        for unit in FUEL_UNITS:
            assert convert_fuel_unit(x, unit, unit, 0.8) == x, f"Fuel identity failed for {unit}"


def test_inverse():
    x = 123.456
    for a, b in itertools.permutations(DISTANCE_UNITS, 2):
        assert convert_distance(convert_distance(x, a, b), b, a) == pytest.approx(x), f"{a} <-> {b}"
    for a, b in itertools.permutations(SPEED_UNITS, 2):
        assert convert_speed(convert_speed(x, a, b), b, a) == pytest.approx(x), f"{a} <-> {b}"
    for a, b in itertools.permutations(FUEL_UNITS, 2):
        assert convert_fuel_unit(convert_fuel_unit(x, a, b, 0.79), b, a, 0.79) == pytest.approx(x), f"{a} <-> {b}"


def test_known_distances():
    print("\n=== TEST: Distance ===")
    converted = convert_distance_all(1, "nm")
    print(converted)
    assert converted["m"] == pytest.approx(1852)
    assert converted["km"] == pytest.approx(1.852)
    assert converted["ft"] == pytest.approx(6076.115, rel=1e-6)
    assert converted["sm"] == pytest.approx(1.15078, rel=1e-5)


def test_known_speeds():
    converted = convert_speed_all(100, "kt")
    assert converted["kmh"] == pytest.approx(185.2, rel=1e-4)
    assert converted["ms"] == pytest.approx(51.4444)
    assert converted["ftmin"] == pytest.approx(10126.85, rel=1e-4)


def test_negative_values_rejected():
    with pytest.raises(ValidationError) as excinfo:
        convert_distance_all(-1, "m")
    assert excinfo.value.message == "Distance value must be positive."
    with pytest.raises(ValidationError) as excinfo:
        convert_speed_all(-1, "kt")
    assert excinfo.value.message == "Speed value must be positive."


def test_unknown_unit_rejected():
    with pytest.raises(ValidationError):
        convert_distance(1, "furlong", "m")
    with pytest.raises(ValidationError):
        convert_speed(1, "kt", "mach")


def test_fuel():
    print("\n=== TEST: Fuel ===")
    converted = convert_fuel(100, "liters", 0.8)
    print(converted)
    assert converted["liters"] == 100
    assert converted["kg"] == pytest.approx(80)
    assert converted["gallon"] == pytest.approx(26.4172, rel=1e-5)
    assert converted["pound"] == pytest.approx(176.3698, rel=1e-5)

    from_kg = convert_fuel(80, "kg", 0.8)
    assert from_kg["liters"] == pytest.approx(100)

    from_gallon = convert_fuel(1, "gallon", 0.72)
    assert from_gallon["liters"] == pytest.approx(LITERS_PER_GALLON)
    assert from_gallon["kg"] == pytest.approx(LITERS_PER_GALLON * 0.72)


def test_fuel_density_rejected():
    for density in (0, -0.8, float("nan")):
        with pytest.raises(ValidationError) as excinfo:
            convert_fuel(100, "liters", density)
        assert excinfo.value.message == "Please enter a valid density greater than 0."
    with pytest.raises(ValidationError):
        convert_fuel_unit(100, "kg", "kg", 0)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v", "-s"]))
