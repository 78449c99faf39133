"""Session state for the campus-map MCP server.

Holds the map settings and the currently loaded campus map.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from campus_map.core.map_index import MapIndex


class MapSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    metric: Literal["haversine", "planar"] = "haversine"
    # Feet for the haversine metric, coordinate units for planar
    default_threshold: float = Field(default=500.0, gt=0)


class DataSources(BaseModel):
    buildings: str = ""
    waypoints: str = ""
    roads: str = ""


class SessionState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: MapSettings = Field(default_factory=MapSettings)
    campus: Optional[MapIndex] = None
    sources: DataSources = Field(default_factory=DataSources)

    def summary(self) -> dict:
        return {
            "campus": (
                {"loaded": True, **self.campus.summary()}
                if self.campus is not None else {"loaded": False}
            ),
            "sources": self.sources.model_dump() if self.campus is not None else None,
            "settings": self.settings.model_dump(),
        }


# Global session state: one per MCP server process
state = SessionState()
