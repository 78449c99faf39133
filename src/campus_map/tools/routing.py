"""Routing tools: shortest_route, reachable_locations."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..errors import CampusMapError, Unreachable
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _lookup(location_id: int):
    loc = state.campus.by_id(location_id)
    if loc is None:
        raise ValueError(f"No location with id {location_id}.")
    return loc


def register_routing_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def shortest_route(start_id: int, target_id: int) -> str:
        """Find the shortest route along roads between two locations.

        **Requires:** load_campus_data first. Use find_buildings_by_name or
        nearest_building to get location ids.

        Args:
            start_id: Id of the starting building or waypoint.
            target_id: Id of the destination building or waypoint.
        """
        try:
            require_state(state, campus=True)
            start, target = _lookup(start_id), _lookup(target_id)
        except ValueError as e:
            return f"Error: {e}"

        try:
            route = state.campus.route(start, target)
        except Unreachable as e:
            logger.debug("No route: %s", e)
            return f"No route: {e}"

        stops = " -> ".join(loc.label() for loc in route.locations)
        return (
            f"Route with {len(route.locations)} stops, "
            f"total {route.total_distance:.1f} ({state.campus.metric_name}): {stops}"
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def reachable_locations(start_id: int, threshold: float | None = None) -> str:
        """List locations reachable by road that stay within a radius of the start.

        A location counts only if its straight-line distance from the start
        is below the threshold; the walked path length is not considered.
        **Requires:** load_campus_data first.

        Args:
            start_id: Id of the starting building or waypoint.
            threshold: Search radius in feet for the haversine metric
                (default from settings), or coordinate units for planar.
        """
        try:
            require_state(state, campus=True)
            start = _lookup(start_id)
        except ValueError as e:
            return f"Error: {e}"

        if threshold is None:
            threshold = state.settings.default_threshold
        try:
            found = state.campus.reachable_within(start, threshold)
        except CampusMapError as e:
            return f"Error: {e}"

        named = sorted(loc.name for loc in found if loc.name)
        return (
            f"{len(found)} location(s) reachable within {threshold:g} of {start.label()}; "
            f"named: {', '.join(named) if named else 'none'}"
        )
