import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

from core import (
    dprint,
    resource_path,
    get_all_tools,
    SERVER_HOST,
    SERVER_PORT,
    SERVER_DEBUG,
    THEMES,
    THEME_STORAGE_KEY,
    DEFAULT_THEME,
)
from tool_pages import (
    menu_layout,
    menu_links,
    page_for_path,
    coordinate_input_state,
    render_altitude_correction,
    render_turn,
    render_flyby_turn,
    render_wind_components,
    render_track_ground_speed,
    render_approach_table,
    render_minima,
    render_coordinates,
    render_distance_conversion,
    render_speed_conversion,
    render_fuel_conversion,
)


# ✅ Initialize Dash app
app = dash.Dash(
    __name__,
    suppress_callback_exceptions=True,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    assets_folder=resource_path("assets"),
)
server = app.server

app.index_string = """
<!DOCTYPE html>
<html>
    <head>
        {%metas%}
        <title>Aviation Tools</title>
        <meta name="description" content="Pilot reference calculators: cold temperature altitude correction, turn radius and rate, fly-by turn anticipation, wind components, track and ground speed, approach tables, DA/MDA minima, coordinate and unit conversions.">
        <meta name="keywords" content="Cold Temperature Correction, Turn Radius, Rate of Turn, Fly-by Turn, Crosswind, Headwind, Ground Speed, Wind Correction Angle, Approach Table, CDFA, DA/MDA, DH/MDH, OCA/OCH, MGRS, Coordinate Conversion, Fuel Conversion, Pilot Tools">
        {%favicon%}
        {%css%}
    </head>
    <body>
        {%app_entry%}
        <footer>
            {%config%}
            {%scripts%}
            {%renderer%}
        </footer>
    </body>
</html>
"""

app.layout = html.Div([
    dcc.Location(id="url"),
    dcc.Store(id=THEME_STORAGE_KEY, storage_type="local", data=DEFAULT_THEME),
    menu_layout(),
    html.Div(id="page-content", className="page-content"),
], id="app-container", className=f"app-container theme-{DEFAULT_THEME}")

dprint(f"[BOOT] Aviation Tools ready with {len(get_all_tools())} tools")


# =============================================================================
# ROUTING AND THEME
# =============================================================================

@app.callback(
    Output("page-content", "children"),
    Output("menu-links", "children"),
    Input("url", "pathname"),
)
def display_page(pathname):
    tool_id, page = page_for_path(pathname)
    dprint(f"[DEBUG] Routing {pathname!r} -> {tool_id or 'home'}")
    return page, menu_links(tool_id)


@app.callback(
    Output(THEME_STORAGE_KEY, "data"),
    Input("theme-toggle", "n_clicks"),
    State(THEME_STORAGE_KEY, "data"),
    prevent_initial_call=True
)
def toggle_theme(n_clicks, current_theme):
    if not n_clicks:
        raise PreventUpdate
    return "light" if current_theme == "dark" else "dark"


@app.callback(
    Output("app-container", "className"),
    Input(THEME_STORAGE_KEY, "data"),
)
def apply_theme(theme):
    if theme not in THEMES:
        theme = DEFAULT_THEME
    return f"app-container theme-{theme}"


# =============================================================================
# CALCULATORS
# =============================================================================

@app.callback(
    Output("alt-result", "children"),
    Input("alt-calculate", "n_clicks"),
    State("alt-decision", "value"),
    State("alt-airport", "value"),
    State("alt-temperature", "value"),
)
def update_altitude_correction(n_clicks, decision, airport, temperature):
    if not n_clicks:
        raise PreventUpdate
    return render_altitude_correction(decision, airport, temperature)


@app.callback(
    Output("turn-result", "children"),
    Input("turn-calculate", "n_clicks"),
    State("turn-speed", "value"),
    State("turn-bank", "value"),
)
def update_turn(n_clicks, speed, bank):
    if not n_clicks:
        raise PreventUpdate
    return render_turn(speed, bank)


@app.callback(
    Output("flyby-result", "children"),
    Input("flyby-calculate", "n_clicks"),
    State("flyby-inbound", "value"),
    State("flyby-outbound", "value"),
    State("flyby-bank", "value"),
    State("flyby-speed", "value"),
    State("flyby-unit", "value"),
)
def update_flyby_turn(n_clicks, inbound, outbound, bank, speed, unit):
    if not n_clicks:
        raise PreventUpdate
    return render_flyby_turn(inbound, outbound, bank, speed, unit)


@app.callback(
    Output("wind-result", "children"),
    Input("wind-calculate", "n_clicks"),
    State("wind-direction", "value"),
    State("wind-speed", "value"),
    State("wind-heading", "value"),
)
def update_wind_components(n_clicks, direction, speed, heading):
    if not n_clicks:
        raise PreventUpdate
    return render_wind_components(direction, speed, heading)


@app.callback(
    Output("tgs-result", "children"),
    Input("tgs-calculate", "n_clicks"),
    State("tgs-wind-direction", "value"),
    State("tgs-wind-speed", "value"),
    State("tgs-heading", "value"),
    State("tgs-tas", "value"),
)
def update_track_ground_speed(n_clicks, wind_direction, wind_speed, heading, tas):
    if not n_clicks:
        raise PreventUpdate
    return render_track_ground_speed(wind_direction, wind_speed, heading, tas)


@app.callback(
    Output("approach-result", "children"),
    Input("approach-calculate", "n_clicks"),
    State("approach-altitude", "value"),
    State("approach-altitude-unit", "value"),
    State("approach-slope", "value"),
    State("approach-ground-speed", "value"),
    State("approach-distance-unit", "value"),
)
def update_approach_table(n_clicks, altitude, altitude_unit, slope, ground_speed, distance_unit):
    if not n_clicks:
        raise PreventUpdate
    return render_approach_table(altitude, altitude_unit, slope, ground_speed, distance_unit)


@app.callback(
    Output("minima-result", "children"),
    Input("minima-calculate", "n_clicks"),
    State("minima-oca", "value"),
    State("minima-och", "value"),
    State("minima-aircraft", "value"),
    State("minima-margin", "value"),
)
def update_minima(n_clicks, oca, och, aircraft_minima, margin):
    if not n_clicks:
        raise PreventUpdate
    return render_minima(oca, och, aircraft_minima, margin)


# =============================================================================
# COORDINATES
# =============================================================================

@app.callback(
    Output("coord-latlon-inputs", "style"),
    Output("coord-mgrs-inputs", "style"),
    Output("coord-lat", "placeholder"),
    Output("coord-lon", "placeholder"),
    Output("coord-helper", "children"),
    Input("coord-format", "value"),
)
def update_coordinate_inputs(coordinate_format):
    return coordinate_input_state(coordinate_format)


@app.callback(
    Output("coord-result", "children"),
    Input("coord-convert", "n_clicks"),
    State("coord-format", "value"),
    State("coord-lat", "value"),
    State("coord-lon", "value"),
    State("coord-mgrs", "value"),
)
def update_coordinates(n_clicks, coordinate_format, lat, lon, mgrs_value):
    if not n_clicks:
        raise PreventUpdate
    return render_coordinates(coordinate_format, lat, lon, mgrs_value)


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

@app.callback(
    Output("distance-result", "children"),
    Input("distance-convert", "n_clicks"),
    State("distance-value", "value"),
    State("distance-unit", "value"),
)
def update_distance_conversion(n_clicks, value, unit):
    if not n_clicks:
        raise PreventUpdate
    return render_distance_conversion(value, unit)


@app.callback(
    Output("speed-result", "children"),
    Input("speed-convert", "n_clicks"),
    State("speed-value", "value"),
    State("speed-unit", "value"),
)
def update_speed_conversion(n_clicks, value, unit):
    if not n_clicks:
        raise PreventUpdate
    return render_speed_conversion(value, unit)


@app.callback(
    Output("fuel-result", "children"),
    Input("fuel-convert", "n_clicks"),
    State("fuel-value", "value"),
    State("fuel-unit", "value"),
    State("fuel-density", "value"),
)
def update_fuel_conversion(n_clicks, value, unit, density):
    if not n_clicks:
        raise PreventUpdate
    return render_fuel_conversion(value, unit, density)


if __name__ == "__main__":
    # AVIATION_TOOLS_DEBUG=1 turns on the Dash debugger and hot reload
    app.run(debug=SERVER_DEBUG, host=SERVER_HOST, port=SERVER_PORT)
