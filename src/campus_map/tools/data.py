"""Data loading tool: load_campus_data."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state, DataSources
from ..core.loaders import load_campus
from ..errors import DataLoadError

logger = logging.getLogger(__name__)


def register_data_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def load_campus_data(
        buildings_path: str,
        waypoints_path: str,
        roads_path: str,
        metric: str | None = None,
    ) -> str:
        """Load campus buildings, waypoints and roads from JSON files.

        Replaces any previously loaded campus.
        **Next:** find_buildings_by_name, nearest_building, shortest_route
        or reachable_locations.

        Args:
            buildings_path: JSON array of {id, lat, lon, name} objects.
            waypoints_path: JSON array of {id, lat, lon} objects.
            roads_path: JSON array of roads, each an array of location ids.
            metric: 'haversine' (feet, default) or 'planar' (coordinate units).
        """
        # Settings change only together with a successfully loaded campus
        try:
            settings = state.settings.model_copy(deep=True)
            if metric is not None:
                settings.metric = metric
        except Exception as e:
            return f"Error: {e}"

        try:
            campus = load_campus(
                buildings_path, waypoints_path, roads_path,
                metric=settings.metric,
            )
        except DataLoadError as e:
            logger.warning("Campus data load failed: %s", e)
            return f"Error: {e}"

        state.settings = settings
        state.campus = campus
        state.sources = DataSources(
            buildings=buildings_path, waypoints=waypoints_path, roads=roads_path,
        )

        s = campus.summary()
        return (
            f"Campus loaded: {s['buildings']} buildings, {s['waypoints']} waypoints, "
            f"{s['road_segments']} road segments ({s['metric']} metric)"
        )
