from dash import dcc, html
import dash_bootstrap_components as dbc
import plotly.graph_objects as go
import numpy as np

from core import (
    ValidationError,
    calculate_temperature_correction,
    compute_isa_temperature,
    calculate_turn,
    turn_rate_from_time,
    compute_turn_anticipation,
    calculate_wind_components,
    calculate_ground_vector,
    wind_correction_angle,
    calculate_approach_table,
    calculate_target_vertical_speed,
    calculate_minima,
    convert_distance_all,
    convert_speed_all,
    convert_fuel,
    parse_coordinates,
    build_coordinate_results,
    get_all_tools,
    get_tool_by_path,
    dprint,
    COLORS,
    NM_TO_M,
    FEET_PER_METER,
)
from core.constants import (
    DEFAULT_SLOPE_ANGLE,
    DEFAULT_OPERATOR_MARGIN,
    DEFAULT_FUEL_DENSITY,
    DEFAULT_BANK_ANGLE,
    DEFAULT_DISTANCE_UNIT,
    DEFAULT_SPEED_UNIT,
    DEFAULT_FUEL_UNIT,
    DEFAULT_APPROACH_DISTANCE_UNIT,
    DEFAULT_ALTITUDE_UNIT,
    DEFAULT_FLYBY_UNIT,
    DEFAULT_COORDINATE_FORMAT,
    DISTANCE_UNIT_LABELS,
    SPEED_UNIT_LABELS,
    FUEL_UNIT_LABELS,
    COORDINATE_FORMAT_LABELS,
    COORDINATE_PLACEHOLDERS,
)
from core.formatting import (
    parse_float,
    parse_floats,
    format_feet,
    format_signed_feet,
    format_conversion_value,
    format_altitude,
    feet_from,
    altitude_correction_advice,
    format_turn_time,
    turn_rate_advice,
    format_flyby_distance,
    flyby_summary,
    format_wind_component,
    headwind_label,
    crosswind_label,
    format_track,
    speed_change_label,
    wind_correction_text,
    minima_note,
)


def create_field_row(label, component, width="100%"):
    """Helper to create a consistent field row"""
    return html.Div([
        html.Label(label, className="tool-field-label"),
        component
    ], className="tool-field-row", style={"width": width})


def create_inline_fields(fields):
    """Helper to create inline fields - list of (label, component, width) tuples"""
    return html.Div([
        html.Div([
            html.Label(label, className="tool-field-label-inline"),
            component
        ], style={"width": width, "marginRight": "12px"})
        for label, component, width in fields
    ], className="tool-inline-row")


def number_input(id, placeholder="", value=None):
    return dcc.Input(id=id, type="number", placeholder=placeholder, value=value,
                     className="tool-input", debounce=True)


def text_input(id, placeholder=""):
    return dcc.Input(id=id, type="text", placeholder=placeholder, value="", className="tool-input")


def unit_dropdown(id, labels, value):
    return dcc.Dropdown(
        id=id,
        options=[{"label": label, "value": unit} for unit, label in labels.items()],
        value=value,
        clearable=False,
        className="tool-dropdown",
    )


def tool_page(title, description, form, button_id, result_id, button_label="Calculate"):
    return html.Div([
        html.H2(title),
        html.P(description, className="tool-description"),
        form,
        dbc.Button(button_label, id=button_id, color="primary", n_clicks=0, className="mt-2"),
        html.Div(id=result_id, className="tool-result mt-3"),
    ], className="tool-content")


def error_alert(message):
    return dbc.Alert(message, color="danger", className="tool-error")


def result_card(title, values, note=None):
    """values: list of (label, value text, element id or None)"""
    items = []
    for label, text, value_id in values:
        value_props = {"className": "value"}
        if value_id:
            value_props["id"] = value_id
        item = [html.Div(label, className="label"), html.Div(text, **value_props)]
        if value_id:
            item.append(dcc.Clipboard(target_id=value_id, title="Copy", className="copy-btn"))
        items.append(html.Div(item, className="result-value"))

    body = [html.Div(items, className="result-grid")]
    if note:
        body.append(html.Div(html.P(note), className="result-info"))
    return dbc.Card([dbc.CardHeader(html.H3(title)), dbc.CardBody(body)], className="result")


# =============================================================================
# ALTITUDE CORRECTION
# =============================================================================

def altitude_correction_layout():
    form = html.Div([
        create_field_row("DA/MDA (ft)", number_input("alt-decision", "e.g., 1500")),
        create_field_row("Airport Elevation (ft)", number_input("alt-airport", "e.g., 1000")),
        create_field_row("Airport Temperature (°C)", number_input("alt-temperature", "e.g., -15")),
    ])
    return tool_page(
        "Altitude Correction",
        "Calculate the cold temperature correction to apply to a DA/MDA.",
        form, "alt-calculate", "alt-result",
    )


def render_altitude_correction(decision, airport, temperature):
    try:
        decision, airport, temperature = parse_floats(decision, airport, temperature)
        result = calculate_temperature_correction(decision, airport, temperature)
    except ValidationError as e:
        return error_alert(e.message)

    dprint(f"[DEBUG] Altitude correction: ISA {compute_isa_temperature(airport):.1f}°C, "
           f"correction {result.correction:.1f} ft")
    return result_card("Corrected Altitude", [
        ("Corrected DA/MDA", f"{format_feet(result.corrected_altitude)} ft", None),
        ("Correction", f"{format_signed_feet(result.correction)} ft", None),
    ], note=altitude_correction_advice(result.correction))


# =============================================================================
# TURN
# =============================================================================

def turn_calculator_layout():
    form = html.Div([
        create_field_row("True Airspeed (kt)", number_input("turn-speed", "e.g., 120")),
        create_field_row("Bank Angle (°)", number_input("turn-bank", "e.g., 15")),
    ])
    return tool_page(
        "Turn Calculator",
        "Calculate turn radius and the time for a 360° turn from speed and bank angle.",
        form, "turn-calculate", "turn-result",
    )


def render_turn(speed, bank):
    try:
        speed, bank = parse_floats(speed, bank)
        result = calculate_turn(speed, bank)
        if bank <= 0 or bank >= 90:
            raise ValidationError("Bank angle must be between 0 and 90 degrees.", field="bank_angle")
    except ValidationError as e:
        return error_alert(e.message)

    rate = turn_rate_from_time(result.time_360_seconds)
    return result_card("Turn Performance", [
        ("Turn Radius", f"{format_feet(result.radius_meters)} m", None),
        ("Radius", f"{result.radius_meters / NM_TO_M:.2f} NM", None),
        ("Time for 360°", format_turn_time(result.time_360_seconds), None),
        ("Turn Rate", f"{rate:.1f} °/s", None),
    ], note=turn_rate_advice(rate))


# =============================================================================
# FLY-BY TURN
# =============================================================================

METERS_PER_FLYBY_UNIT = {"nm": 1852, "km": 1000}


def flyby_turn_layout():
    form = html.Div([
        create_inline_fields([
            ("Inbound Track (°)", number_input("flyby-inbound", "e.g., 090"), "45%"),
            ("Outbound Track (°)", number_input("flyby-outbound", "e.g., 135"), "45%"),
        ]),
        create_inline_fields([
            ("Bank Angle (°)", number_input("flyby-bank", value=DEFAULT_BANK_ANGLE), "45%"),
            ("Ground Speed (kt)", number_input("flyby-speed", "e.g., 180"), "45%"),
        ]),
        create_field_row("Distance Unit", unit_dropdown("flyby-unit", {"nm": "NM", "km": "km"}, DEFAULT_FLYBY_UNIT)),
    ])
    return tool_page(
        "Fly-by Turn",
        "Distance before the waypoint at which to start a fly-by turn so the aircraft "
        "rolls out on the outbound track.",
        form, "flyby-calculate", "flyby-result",
    )


def render_flyby_turn(inbound, outbound, bank, speed, unit):
    try:
        inbound, outbound, bank, speed = parse_floats(
            inbound, outbound, bank, speed, message="Enter valid numeric values for all fields."
        )
        if inbound < 0 or inbound > 360 or outbound < 0 or outbound > 360:
            raise ValidationError("Inbound and outbound track must be between 0 and 360 deg.", field="track")
        if bank <= 0 or bank >= 90:
            raise ValidationError("Bank angle must be greater than 0 deg and less than 90 deg.", field="bank_angle")
        result = compute_turn_anticipation(bank, speed, inbound, outbound)
    except ValidationError as e:
        return error_alert(e.message)

    meters_per_unit = METERS_PER_FLYBY_UNIT.get(unit, NM_TO_M)
    unit_label = "NM" if unit == "nm" else "km"
    radius = result.turn_radius_m / meters_per_unit if np.isfinite(result.turn_radius_m) else None
    return result_card("Turn Anticipation", [
        ("Turn Anticipation Distance",
         f"{format_flyby_distance(result.lead_distance_m / meters_per_unit)} {unit_label}", "flyby-lead"),
        ("Turn Radius", f"{format_flyby_distance(radius)} {unit_label}" if radius is not None else "-", None),
    ], note=flyby_summary(result.turn_angle_deg))


# =============================================================================
# WIND
# =============================================================================

def head_cross_wind_layout():
    form = html.Div([
        create_field_row("Wind Direction (°)", number_input("wind-direction", "e.g., 270")),
        create_field_row("Wind Speed (kt)", number_input("wind-speed", "e.g., 15")),
        create_field_row("Runway / Aircraft Heading (°)", number_input("wind-heading", "e.g., 240")),
    ])
    return tool_page(
        "Head/Cross Wind",
        "Compute headwind and crosswind components for a given runway or heading.",
        form, "wind-calculate", "wind-result",
    )


def render_wind_components(direction, speed, heading):
    try:
        direction, speed, heading = parse_floats(direction, speed, heading)
        result = calculate_wind_components(speed, direction, heading)
    except ValidationError as e:
        return error_alert(e.message)

    return result_card("Wind Components", [
        (headwind_label(result.headwind).capitalize(), f"{format_wind_component(result.headwind)} kt", None),
        ("Crosswind", f"{format_wind_component(result.crosswind)} kt {crosswind_label(result.crosswind_side)}", None),
    ])


def wind_triangle_figure(heading, tas, vector):
    """Air vector, wind vector and resulting ground vector, north up."""
    air = np.array([tas * np.sin(np.radians(heading)), tas * np.cos(np.radians(heading))])
    ground = np.array([
        vector.ground_speed * np.sin(np.radians(vector.ground_track)),
        vector.ground_speed * np.cos(np.radians(vector.ground_track)),
    ])

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=[0, air[0]], y=[0, air[1]], mode="lines+markers",
                             name="Heading / TAS", line=dict(color=COLORS["aircraft_vector"])))
    fig.add_trace(go.Scatter(x=[air[0], ground[0]], y=[air[1], ground[1]], mode="lines+markers",
                             name="Wind", line=dict(color=COLORS["wind_vector"])))
    fig.add_trace(go.Scatter(x=[0, ground[0]], y=[0, ground[1]], mode="lines+markers",
                             name="Track / GS", line=dict(color=COLORS["ground_vector"], dash="dash")))
    fig.update_layout(
        height=360,
        margin=dict(l=20, r=20, t=30, b=20),
        xaxis=dict(title="East (kt)", zeroline=True),
        yaxis=dict(title="North (kt)", zeroline=True, scaleanchor="x", scaleratio=1),
        legend=dict(orientation="h"),
    )
    return fig


def track_ground_speed_layout():
    form = html.Div([
        create_inline_fields([
            ("Wind Direction (°)", number_input("tgs-wind-direction", "e.g., 270"), "45%"),
            ("Wind Speed (kt)", number_input("tgs-wind-speed", "e.g., 20"), "45%"),
        ]),
        create_inline_fields([
            ("Aircraft Heading (°)", number_input("tgs-heading", "e.g., 360"), "45%"),
            ("True Airspeed (kt)", number_input("tgs-tas", "e.g., 120"), "45%"),
        ]),
    ])
    return tool_page(
        "Track / Ground Speed",
        "Calculate aircraft track and groundspeed from heading, TAS, and wind.",
        form, "tgs-calculate", "tgs-result",
    )


def render_track_ground_speed(wind_direction, wind_speed, heading, tas):
    try:
        wind_direction, wind_speed, heading, tas = parse_floats(
            wind_direction, wind_speed, heading, tas, message="Please fill in all fields with valid numbers"
        )
        result = calculate_ground_vector(heading, tas, wind_direction, wind_speed)
    except ValidationError as e:
        return error_alert(e.message)

    speed_change = result.ground_speed - tas
    wca = wind_correction_angle(result.ground_track, heading)
    note = (f"Ground speed {abs(speed_change):.1f} kt, {speed_change_label(speed_change)}."
            f"{wind_correction_text(wca)}")
    return html.Div([
        result_card("Ground Vector", [
            ("Ground Track", f"{format_track(result.ground_track)}°", None),
            ("Ground Speed", f"{result.ground_speed:.1f} kt", None),
        ], note=note),
        dcc.Graph(figure=wind_triangle_figure(heading, tas, result), config={"displayModeBar": False}),
    ])


# =============================================================================
# APPROACH TABLE
# =============================================================================

def approach_table_layout():
    form = html.Div([
        create_inline_fields([
            ("Target Altitude", number_input("approach-altitude", "e.g., 1200"), "45%"),
            ("Altitude Unit", unit_dropdown("approach-altitude-unit", {"ft": "ft", "m": "m"},
                                            DEFAULT_ALTITUDE_UNIT), "45%"),
        ]),
        create_inline_fields([
            ("Slope Angle (°)", number_input("approach-slope", value=DEFAULT_SLOPE_ANGLE), "45%"),
            ("Ground Speed (kt, optional)", number_input("approach-ground-speed", "e.g., 140"), "45%"),
        ]),
        create_field_row("Distance Unit", unit_dropdown("approach-distance-unit", {"NM": "NM", "km": "km"},
                                                        DEFAULT_APPROACH_DISTANCE_UNIT)),
    ])
    return tool_page(
        "Approach Table",
        "Generate approach table with distances, altitudes, and heights above Target Altitude.",
        form, "approach-calculate", "approach-result", button_label="Generate Table",
    )


def approach_profile_figure(rows, target_altitude_ft, altitude_unit, distance_unit):
    if distance_unit == "km":
        distances = np.array([float(row.distance_km) for row in rows])
    else:
        distances = np.array([row.distance_nm for row in rows])
    altitudes = np.array([row.altitude_above for row in rows])
    if altitude_unit == "m":
        altitudes = altitudes / FEET_PER_METER
        target_altitude_ft = target_altitude_ft / FEET_PER_METER

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=np.concatenate(([0], distances)), y=np.concatenate(([target_altitude_ft], altitudes)),
        mode="lines+markers", name="Glide path", line=dict(color=COLORS["glide_path"]),
    ))
    fig.add_hline(y=target_altitude_ft, line_dash="dot", line_color=COLORS["target_altitude"],
                  annotation_text="Target Altitude")
    fig.update_layout(
        height=320,
        margin=dict(l=20, r=20, t=30, b=20),
        xaxis=dict(title=f"Distance ({distance_unit})", autorange="reversed"),
        yaxis=dict(title=f"Altitude ({altitude_unit})"),
        showlegend=False,
    )
    return fig


def render_approach_table(altitude, altitude_unit, slope, ground_speed, distance_unit):
    try:
        altitude = parse_float(altitude, message="Please enter a valid Target Altitude", field="target_altitude")
        slope = parse_float(slope, message="Please enter a valid slope angle (0-60°)", field="slope_angle")
        target_altitude_ft = feet_from(altitude, altitude_unit)
        rows = calculate_approach_table(target_altitude_ft, slope, distance_unit)
    except ValidationError as e:
        return error_alert(e.message)

    distance_header = "Distance (km)" if distance_unit == "km" else "Distance (NM)"
    header = html.Thead(html.Tr([
        html.Th(distance_header),
        html.Th(f"Altitude ({altitude_unit})"),
        html.Th(f"Height above Target ({altitude_unit})"),
    ]))
    body = html.Tbody([
        html.Tr([
            html.Td(row.distance_km if distance_unit == "km" else f"{row.distance_nm} ({row.distance_km} km)"),
            html.Td(format_altitude(row.altitude_above, altitude_unit)),
            html.Td(format_altitude(row.height_above, altitude_unit)),
        ])
        for row in rows
    ])

    children = [
        html.H3(f"Target Altitude: {format_altitude(target_altitude_ft, altitude_unit)} {altitude_unit}, "
                f"slope {slope:g}°"),
        dbc.Table([header, body], bordered=True, striped=True, hover=True, size="sm"),
    ]

    if ground_speed not in (None, ""):
        try:
            vs_ft_min = calculate_target_vertical_speed(parse_float(ground_speed), slope)
        except ValidationError as e:
            dprint(f"[DEBUG] Vertical speed skipped: {e}")
        else:
            if altitude_unit == "m":
                children.insert(1, html.P(f"Target Vertical Speed: {round(vs_ft_min / FEET_PER_METER)} m/min"))
            else:
                children.insert(1, html.P(f"Target Vertical Speed: {round(vs_ft_min)} ft/min"))

    children.append(dcc.Graph(
        figure=approach_profile_figure(rows, target_altitude_ft, altitude_unit, distance_unit),
        config={"displayModeBar": False},
    ))
    return html.Div(children)


# =============================================================================
# MINIMA
# =============================================================================

def minima_layout():
    form = html.Div([
        create_inline_fields([
            ("OCA (ft)", number_input("minima-oca", "e.g., 1200"), "45%"),
            ("OCH (ft)", number_input("minima-och", "e.g., 400"), "45%"),
        ]),
        create_inline_fields([
            ("Aircraft Minima (ft)", number_input("minima-aircraft", "e.g., 300"), "45%"),
            ("Operator Margin (ft)", number_input("minima-margin", value=DEFAULT_OPERATOR_MARGIN), "45%"),
        ]),
    ])
    return tool_page(
        "DA/MDA DH/MDH",
        "Calculate DA/MDA and DH/MDH using OCA/OCH, aircraft minima and operator margin.",
        form, "minima-calculate", "minima-result",
    )


def render_minima(oca, och, aircraft_minima, margin):
    try:
        values = parse_floats(oca, och, aircraft_minima, margin)
        result = calculate_minima(*values)
    except ValidationError as e:
        return error_alert(e.message)

    return result_card("Minima", [
        ("DA/MDA", f"{format_feet(result.decision_altitude)} ft", None),
        ("DH/MDH", f"{format_feet(result.decision_height)} ft", None),
    ], note=minima_note(result))


# =============================================================================
# COORDINATES
# =============================================================================

def coordinates_layout():
    placeholders = COORDINATE_PLACEHOLDERS[DEFAULT_COORDINATE_FORMAT]
    form = html.Div([
        create_field_row("Input format", unit_dropdown("coord-format", COORDINATE_FORMAT_LABELS,
                                                       DEFAULT_COORDINATE_FORMAT)),
        html.Div([
            create_field_row("Latitude", text_input("coord-lat", placeholders["lat"])),
            create_field_row("Longitude", text_input("coord-lon", placeholders["lon"])),
        ], id="coord-latlon-inputs"),
        html.Div([
            create_field_row("MGRS Coordinate", text_input("coord-mgrs", "33UXP0406551")),
        ], id="coord-mgrs-inputs", style={"display": "none"}),
        html.Small(placeholders["helper"], id="coord-helper"),
    ])
    return tool_page(
        "Coordinates Conversion",
        "Convert between Decimal Degrees (DD), Degrees + Decimal Minutes (DM), "
        "Degrees + Minutes + Seconds (DMS) and 5-digit Military Grid Reference System (MGRS).",
        form, "coord-convert", "coord-result", button_label="Convert",
    )


def coordinate_input_state(coordinate_format):
    """Visibility, placeholders and helper text for the selected input format."""
    placeholders = COORDINATE_PLACEHOLDERS.get(coordinate_format, COORDINATE_PLACEHOLDERS["dd"])
    is_mgrs = coordinate_format == "mgrs"
    return (
        {"display": "none"} if is_mgrs else {"display": "block"},
        {"display": "block"} if is_mgrs else {"display": "none"},
        placeholders["lat"],
        placeholders["lon"],
        placeholders["helper"],
    )


def render_coordinates(coordinate_format, lat, lon, mgrs_value, backend=None):
    try:
        pair = parse_coordinates(coordinate_format, lat or "", lon or "", mgrs_value or "", backend=backend)
        results = build_coordinate_results(pair, backend=backend)
    except ValidationError as e:
        return error_alert(e.message)

    return result_card("Converted Coordinates", [
        ("Decimal Degrees (DD)", results.dd, "coord-result-dd"),
        ("Degrees + Decimal Minutes (DM)", results.dm, "coord-result-dm"),
        ("Degrees + Minutes + Seconds (DMS)", results.dms, "coord-result-dms"),
        ("MGRS (5-digit)", results.mgrs, "coord-result-mgrs"),
    ], note="Copy any format to quickly share coordinates across devices or systems.")


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

def conversion_layout(prefix, title, description, labels, default_unit, extra_fields=None):
    fields = [
        create_inline_fields([
            ("Value", number_input(f"{prefix}-value", "e.g., 100"), "45%"),
            ("Unit", unit_dropdown(f"{prefix}-unit", labels, default_unit), "45%"),
        ]),
    ]
    if extra_fields:
        fields.extend(extra_fields)
    return tool_page(title, description, html.Div(fields), f"{prefix}-convert", f"{prefix}-result",
                     button_label="Convert")


def distance_conversion_layout():
    return conversion_layout("distance", "Distance Conversion", "Convert between m, km, NM, ft, and SM.",
                             DISTANCE_UNIT_LABELS, DEFAULT_DISTANCE_UNIT)


def speed_conversion_layout():
    return conversion_layout("speed", "Speed Conversion", "Convert between kt, km/h, m/s, and ft/min.",
                             SPEED_UNIT_LABELS, DEFAULT_SPEED_UNIT)


def fuel_conversion_layout():
    density = create_field_row("Fuel Density (kg/L)", number_input("fuel-density", value=DEFAULT_FUEL_DENSITY))
    return conversion_layout("fuel", "Fuel Conversion",
                             "Convert between liters, kg, gallons, and pounds using fuel density.",
                             FUEL_UNIT_LABELS, DEFAULT_FUEL_UNIT, extra_fields=[density])


def _conversion_card(prefix, converted, labels, selected_unit, value_format):
    return result_card("Converted Values", [
        (labels[unit], f"{value_format(value)} {labels[unit]}", f"{prefix}-result-{unit}")
        for unit, value in converted.items()
        if unit != selected_unit
    ])


def render_distance_conversion(value, unit):
    try:
        value = parse_float(value, message="Please enter a valid numeric distance value.")
        converted = convert_distance_all(value, unit)
    except ValidationError as e:
        return error_alert(e.message)
    return _conversion_card("distance", converted, DISTANCE_UNIT_LABELS, unit, format_conversion_value)


def render_speed_conversion(value, unit):
    try:
        value = parse_float(value, message="Please enter a valid numeric speed value.")
        converted = convert_speed_all(value, unit)
    except ValidationError as e:
        return error_alert(e.message)
    return _conversion_card("speed", converted, SPEED_UNIT_LABELS, unit, format_conversion_value)


def render_fuel_conversion(value, unit, density):
    try:
        value = parse_float(value, message="Please enter a valid numeric value.")
        density = parse_float(density, message="Please enter a valid density greater than 0.", field="density")
        converted = convert_fuel(value, unit, density)
    except ValidationError as e:
        return error_alert(e.message)
    return _conversion_card("fuel", converted, FUEL_UNIT_LABELS, unit, lambda v: f"{v:.2f}")


# =============================================================================
# SHELL: MENU + HOME
# =============================================================================

TOOL_LAYOUTS = {
    "altitude-correction": altitude_correction_layout,
    "turn-calculator": turn_calculator_layout,
    "flyby-turn": flyby_turn_layout,
    "coordinates-conversion": coordinates_layout,
    "head-cross-wind": head_cross_wind_layout,
    "track-ground-speed": track_ground_speed_layout,
    "approach-table": approach_table_layout,
    "minima": minima_layout,
    "distance-conversion": distance_conversion_layout,
    "speed-conversion": speed_conversion_layout,
    "fuel-conversion": fuel_conversion_layout,
}


def menu_links(active_tool_id=None):
    return dbc.Nav([
        dbc.NavLink(tool.name, href=tool.path, active=tool.id == active_tool_id, className="menu-link")
        for tool in get_all_tools()
    ], vertical=True, pills=True)


def menu_layout():
    return html.Div([
        html.Div([
            html.A(html.H1("Aviation Tools", className="menu-title"), href="/", style={"textDecoration": "none"}),
            dbc.Button("Toggle theme", id="theme-toggle", color="secondary", size="sm", n_clicks=0),
        ], className="menu-header"),
        html.Div(menu_links(), id="menu-links"),
    ], className="side-menu")


def home_layout():
    cards = [
        dbc.Card(dbc.CardBody([
            html.H4(html.A(tool.name, href=tool.path)),
            html.P(tool.description),
        ]), className="tool-card")
        for tool in get_all_tools()
    ]
    return html.Div([
        html.H2("Select a tool"),
        html.Div(cards, className="tool-card-grid"),
    ], className="tool-content")


def tool_layout(tool_id):
    """Page for a registered tool id; unknown ids fall back to the home page."""
    layout = TOOL_LAYOUTS.get(tool_id)
    if layout is None:
        return home_layout()
    return layout()


def page_for_path(pathname):
    """(active tool id, page) for a URL path; anything unknown is the home page."""
    tool = get_tool_by_path(pathname)
    if tool is None:
        return None, home_layout()
    return tool.id, tool_layout(tool.id)
