"""Campus map: location registry, building set and road graph."""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

import numpy as np

from campus_map.core.geo import get_metric
from campus_map.core.graph import WeightedGraph
from campus_map.core import pathfinder
from campus_map.errors import DataLoadError, EmptyMap
from campus_map.models import BuildingRecord, GeoLocation, Route, WaypointRecord

logger = logging.getLogger(__name__)


class MapIndex:
    """Locations of a campus and the roads between them.

    The registry maps id -> GeoLocation and owns every location. The graph
    and the building set only hold ids and resolve them through the
    registry. Once built the structure is read-only.
    """

    def __init__(self, metric: str = "haversine"):
        self.metric_name = metric
        self.metric = get_metric(metric)
        self.graph: WeightedGraph[int] = WeightedGraph()
        self._locations: dict[int, GeoLocation] = {}
        # dict keys keep insertion order, which by_name and nearest_building rely on
        self._building_ids: dict[int, None] = {}

    @classmethod
    def build(
        cls,
        buildings: Iterable[BuildingRecord],
        waypoints: Iterable[WaypointRecord],
        roads: Iterable[Sequence[int]],
        metric: str = "haversine",
    ) -> "MapIndex":
        """Build a map from building, waypoint and road records.

        Every consecutive pair of ids in a road becomes an undirected edge
        weighted by the distance between the two locations.

        Raises:
            DataLoadError: on duplicate ids, roads shorter than two ids, or
                roads naming an id that no building or waypoint registered.
        """
        index = cls(metric=metric)
        for record in buildings:
            index._register(GeoLocation.from_record(record), building=True)
        for record in waypoints:
            index._register(GeoLocation.from_record(record), building=False)

        n_roads = 0
        for n_roads, road in enumerate(roads, start=1):
            index._add_road(list(road))

        logger.info(
            "Built campus map: %d buildings, %d waypoints, %d roads, %d edges",
            len(index._building_ids),
            len(index._locations) - len(index._building_ids),
            n_roads,
            index.graph.edge_count() // 2,
        )
        return index

    def _register(self, location: GeoLocation, building: bool) -> None:
        if location.id in self._locations:
            raise DataLoadError(f"Location id {location.id} is registered more than once")
        self.add_location(location, building=building)

    def _add_road(self, road: list[int]) -> None:
        if len(road) < 2:
            raise DataLoadError(f"Road {road} must list at least two location ids")
        for a, b in zip(road, road[1:]):
            loc_a, loc_b = self._locations.get(a), self._locations.get(b)
            if loc_a is None or loc_b is None:
                missing = a if loc_a is None else b
                raise DataLoadError(f"Road {road} references unknown location id {missing}")
            if not self.graph.add_undirected_edge(a, b, loc_a.distance_to(loc_b, self.metric)):
                logger.warning("Road segment %d-%d was already present", a, b)

    def add_location(self, location: GeoLocation, building: bool = False) -> bool:
        """Register location and add it as a graph vertex.

        Re-registering an existing id replaces its registry entry and sets its
        building membership from ``building``. Its vertex and road edges are
        kept as they are; edge weights are not recomputed from new
        coordinates.

        Returns True if the location id is new to the graph.
        """
        self._locations[location.id] = location
        if building:
            self._building_ids[location.id] = None
        else:
            self._building_ids.pop(location.id, None)
        return self.graph.add_vertex(location.id)

    def by_id(self, location_id: int) -> Optional[GeoLocation]:
        return self._locations.get(location_id)

    def by_name(self, name: str) -> list[GeoLocation]:
        """All buildings named exactly name, in insertion order."""
        matches = [
            self._locations[i] for i in self._building_ids
            if self._locations[i].name == name
        ]
        if not matches:
            logger.debug("No building named %r", name)
        return matches

    def buildings(self) -> set[GeoLocation]:
        return {self._locations[i] for i in self._building_ids}

    def nearest_building(self, lat: float, lon: float) -> GeoLocation:
        """Building closest to (lat, lon); the first inserted wins ties."""
        if not self._building_ids:
            raise EmptyMap("The map has no buildings")
        ids = list(self._building_ids)
        lats = np.fromiter((self._locations[i].lat for i in ids), dtype=float, count=len(ids))
        lons = np.fromiter((self._locations[i].lon for i in ids), dtype=float, count=len(ids))
        distances = self.metric(lats, lons, lat, lon)
        return self._locations[ids[int(np.argmin(distances))]]

    def reachable_within(self, start: GeoLocation, threshold: float) -> set[GeoLocation]:
        """Locations reachable by road from start whose straight-line
        distance to start is below threshold (in metric units; feet for the
        haversine metric)."""
        ids = pathfinder.reachable_within(
            self.graph, start.id, threshold, self._distance_between,
        )
        return {self._locations[i] for i in ids}

    def shortest_path(self, start: GeoLocation, target: GeoLocation) -> list[GeoLocation]:
        ids = pathfinder.shortest_path(self.graph, start.id, target.id)
        return [self._locations[i] for i in ids]

    def route(self, start: GeoLocation, target: GeoLocation) -> Route:
        ids = pathfinder.shortest_path(self.graph, start.id, target.id)
        return Route(
            locations=[self._locations[i] for i in ids],
            total_distance=pathfinder.path_weight(self.graph, ids),
        )

    def _distance_between(self, a: int, b: int) -> float:
        return self._locations[a].distance_to(self._locations[b], self.metric)

    def summary(self) -> dict:
        return {
            "metric": self.metric_name,
            "locations": len(self._locations),
            "buildings": len(self._building_ids),
            "waypoints": len(self._locations) - len(self._building_ids),
            "road_segments": self.graph.edge_count() // 2,
        }
