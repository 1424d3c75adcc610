# core/__init__.py

"""
Core module containing the calculators, unit tables, coordinate
conversion, constants and the tool registry.
"""

from .constants import (
    DEBUG_LOG,
    SERVER_HOST,
    SERVER_PORT,
    SERVER_DEBUG,
    THEME_STORAGE_KEY,
    THEMES,
    DEFAULT_THEME,
    COLORS,
)

from .exceptions import (
    ErrorKind,
    AviationToolError,
    ValidationError,
    NonNumericInputError,
    CoordinateFormatError,
    MGRSConversionError,
)

from .calculations import (
    # Physical constants
    g, G_STANDARD, KTS_TO_MPS, NM_TO_M, NM_TO_FEET, NM_TO_KM, FEET_PER_METER,
    # Result types
    AltitudeCorrectionResult,
    TurnResult,
    TurnAnticipationResult,
    WindComponents,
    CrosswindSide,
    GroundVector,
    ApproachRow,
    MinimaResult,
    # Angles
    normalize_degrees,
    # Altitude
    compute_isa_temperature,
    calculate_temperature_correction,
    # Turn physics
    calculate_turn,
    turn_rate_from_time,
    smallest_turn_angle,
    compute_turn_anticipation,
    # Wind
    calculate_wind_components,
    calculate_ground_vector,
    wind_correction_angle,
    # Approach
    calculate_approach_table,
    calculate_target_vertical_speed,
    calculate_minima,
)

from .conversions import (
    DISTANCE_UNITS,
    SPEED_UNITS,
    FUEL_UNITS,
    convert_distance,
    convert_speed,
    convert_distance_all,
    convert_speed_all,
    convert_fuel,
    convert_fuel_unit,
)

from .coordinates import (
    CoordinateFormat,
    CoordinatePair,
    CoordinateResultSet,
    MGRSBackend,
    MGRSLibraryBackend,
    parse_decimal_degrees,
    parse_coordinate_string,
    parse_degrees_minutes,
    parse_mgrs,
    parse_coordinates,
    format_degrees_minutes,
    format_dms,
    format_mgrs,
    build_coordinate_results,
)

from .tool_registry import (
    ToolDefinition,
    TOOLS,
    get_all_tools,
    get_tool_by_id,
    get_tool_by_path,
    register_tool,
    dprint,
    resource_path,
)
