"""Lookup tools: find_buildings_by_name, get_location, nearest_building, list_buildings."""

import json

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..errors import EmptyMap
from ..models import GeoLocation
from ._prereqs import require_state


def _describe(loc: GeoLocation) -> dict:
    return {"id": loc.id, "name": loc.name, "lat": loc.lat, "lon": loc.lon}


def register_lookup_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def find_buildings_by_name(name: str) -> str:
        """Find every building whose name matches exactly.

        **Requires:** load_campus_data first.

        Args:
            name: Building name, e.g. "Library". Several buildings may share it.
        """
        try:
            require_state(state, campus=True)
        except ValueError as e:
            return f"Error: {e}"

        matches = state.campus.by_name(name)
        if not matches:
            return f"No building named '{name}'."
        return json.dumps([_describe(b) for b in matches], indent=2)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_location(location_id: int) -> str:
        """Return a building or waypoint by id.

        **Requires:** load_campus_data first.
        """
        try:
            require_state(state, campus=True)
        except ValueError as e:
            return f"Error: {e}"

        loc = state.campus.by_id(location_id)
        if loc is None:
            return f"Error: No location with id {location_id}."
        return json.dumps(_describe(loc), indent=2)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def nearest_building(lat: float, lon: float) -> str:
        """Find the building closest (straight line) to a coordinate.

        **Requires:** load_campus_data first.

        Args:
            lat: Latitude (degrees).
            lon: Longitude (degrees).
        """
        try:
            require_state(state, campus=True)
        except ValueError as e:
            return f"Error: {e}"

        campus = state.campus
        try:
            building = campus.nearest_building(lat, lon)
        except EmptyMap as e:
            return f"Error: {e}"
        d = building.distance_to_point(lat, lon, campus.metric)
        return f"Nearest building: {building.label()} at {d:.1f} ({campus.metric_name})"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def list_buildings(limit: int = 50) -> str:
        """List buildings on the loaded campus, sorted by name.

        **Requires:** load_campus_data first.

        Args:
            limit: Maximum number of buildings to list (default 50).
        """
        try:
            require_state(state, campus=True)
        except ValueError as e:
            return f"Error: {e}"

        buildings = sorted(state.campus.buildings(), key=lambda b: (b.name or "", b.id))
        return json.dumps([_describe(b) for b in buildings[:max(limit, 0)]], indent=2)
