"""Pydantic domain models for campus locations and source records."""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from campus_map.core.geo import haversine_ft

Metric = Callable[..., float]


class BuildingRecord(BaseModel):
    id: int
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    name: str


class WaypointRecord(BaseModel):
    id: int
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    name: Optional[str] = None


class GeoLocation(BaseModel):
    """A point on the map.

    Two locations are the same location iff their ids match; name and
    coordinates do not take part in equality or hashing.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    @classmethod
    def from_record(cls, record: BuildingRecord | WaypointRecord) -> "GeoLocation":
        return cls(id=record.id, name=record.name, lat=record.lat, lon=record.lon)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoLocation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def distance_to(self, other: "GeoLocation", metric: Metric = haversine_ft) -> float:
        return float(metric(self.lat, self.lon, other.lat, other.lon))

    def distance_to_point(self, lat: float, lon: float, metric: Metric = haversine_ft) -> float:
        return float(metric(self.lat, self.lon, lat, lon))

    def label(self) -> str:
        return f"{self.name} (#{self.id})" if self.name else f"#{self.id}"


class Route(BaseModel):
    """Result of a successful shortest-path query."""
    locations: list[GeoLocation] = Field(min_length=1)
    total_distance: float = Field(ge=0)

    @property
    def start(self) -> GeoLocation:
        return self.locations[0]

    @property
    def target(self) -> GeoLocation:
        return self.locations[-1]
