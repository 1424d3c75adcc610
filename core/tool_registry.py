# core/tool_registry.py

"""
Tool registry and debug output.
Holds the ordered list of calculator descriptors that drives the menu,
the home page cards and /tools/<id> routing.
"""

import os
import sys
from dataclasses import dataclass

from .constants import DEBUG_LOG


def dprint(*args, **kwargs):
    """Debug print that can be globally toggled."""
    if DEBUG_LOG:
        print(*args, **kwargs)


def resource_path(filename):
    """Get the absolute path to a resource, works for dev and PyInstaller."""
    if hasattr(sys, '_MEIPASS'):
        return os.path.join(sys._MEIPASS, filename)
    return filename


@dataclass(frozen=True)
class ToolDefinition:
    id: str
    name: str
    description: str

    @property
    def path(self):
        return f"/tools/{self.id}"


TOOLS = [
    ToolDefinition(
        id="altitude-correction",
        name="Altitude Correction",
        description="Calculate temperature-corrected altitude for approach procedures.",
    ),
    ToolDefinition(
        id="turn-calculator",
        name="Turn Calculator",
        description="Calculate turn radius and rate based on speed and bank angle",
    ),
    ToolDefinition(
        id="flyby-turn",
        name="Fly-by Turn",
        description="Calculate fly-by turn anticipation distance before a waypoint.",
    ),
    ToolDefinition(
        id="coordinates-conversion",
        name="Coordinates Conversion",
        description="Convert between DD, DM, DMS, and 5-digit MGRS coordinates",
    ),
    ToolDefinition(
        id="head-cross-wind",
        name="Head/Cross Wind",
        description="Compute headwind and crosswind components for a given runway or heading.",
    ),
    ToolDefinition(
        id="track-ground-speed",
        name="Track / Ground Speed",
        description="Calculate aircraft track and groundspeed from heading, TAS, and wind",
    ),
    ToolDefinition(
        id="approach-table",
        name="Approach Table",
        description="Generate approach table with distances, altitudes, and heights above Target Altitude",
    ),
    ToolDefinition(
        id="minima",
        name="DA/MDA DH/MDH",
        description="Calculate DA/MDA and DH/MDH using OCA/OCH",
    ),
    ToolDefinition(
        id="distance-conversion",
        name="Distance Conversion",
        description="Convert between m, km, NM, ft, and SM",
    ),
    ToolDefinition(
        id="speed-conversion",
        name="Speed Conversion",
        description="Convert between kt, km/h, m/s, and ft/min.",
    ),
    ToolDefinition(
        id="fuel-conversion",
        name="Fuel Conversion",
        description="Convert between liters, kg, gallons, and pounds using fuel density.",
    ),
]


def get_all_tools():
    return list(TOOLS)


def get_tool_by_id(tool_id):
    """
    Find a tool by ID.

    Args:
        tool_id: Tool identifier (e.g., "turn-calculator")

    Returns:
        ToolDefinition or None
    """
    for tool in TOOLS:
        if tool.id == tool_id:
            return tool
    return None


def get_tool_by_path(pathname):
    """Resolve /tools/<id>; anything else returns None."""
    if not pathname or not pathname.startswith("/tools/"):
        return None
    return get_tool_by_id(pathname[len("/tools/"):].strip("/"))


def register_tool(tool):
    """Append a tool unless one with the same id is already registered."""
    if get_tool_by_id(tool.id) is not None:
        dprint(f"[DEBUG] Tool already registered: {tool.id}")
        return False
    TOOLS.append(tool)
    return True
