"""Campus map: weighted location graph with building lookup and routing."""

from .errors import CampusMapError, DataLoadError, EmptyMap, InvalidEndpoint, Unreachable
from .models import BuildingRecord, GeoLocation, WaypointRecord
from .core.graph import WeightedGraph
from .core.map_index import MapIndex

__all__ = [
    "BuildingRecord",
    "CampusMapError",
    "DataLoadError",
    "EmptyMap",
    "GeoLocation",
    "InvalidEndpoint",
    "MapIndex",
    "Unreachable",
    "WaypointRecord",
    "WeightedGraph",
]
