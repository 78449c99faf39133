"""Campus data file parsing."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from campus_map.core.map_index import MapIndex
from campus_map.errors import DataLoadError
from campus_map.models import BuildingRecord, WaypointRecord

logger = logging.getLogger(__name__)

_BUILDINGS = TypeAdapter(list[BuildingRecord])
_WAYPOINTS = TypeAdapter(list[WaypointRecord])
_ROADS = TypeAdapter(list[list[int]])


def _read_json(filepath: str | Path):
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"Campus data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DataLoadError(f"Campus data file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Cannot read campus data file {path}: {e}") from e


def _validate(adapter: TypeAdapter, data, filepath):
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise DataLoadError(f"Invalid records in {filepath}: {e}") from e


def parse_buildings_file(filepath: str | Path) -> list[BuildingRecord]:
    """Parse a JSON array of ``{id, lat, lon, name}`` objects."""
    records = _validate(_BUILDINGS, _read_json(filepath), filepath)
    logger.info("Loaded %d buildings from %s", len(records), filepath)
    return records


def parse_waypoints_file(filepath: str | Path) -> list[WaypointRecord]:
    """Parse a JSON array of ``{id, lat, lon}`` objects."""
    records = _validate(_WAYPOINTS, _read_json(filepath), filepath)
    logger.info("Loaded %d waypoints from %s", len(records), filepath)
    return records


def parse_roads_file(filepath: str | Path) -> list[list[int]]:
    """Parse a JSON array of roads, each an array of location ids."""
    roads = _validate(_ROADS, _read_json(filepath), filepath)
    logger.info("Loaded %d roads from %s", len(roads), filepath)
    return roads


def load_campus(
    buildings_path: str | Path,
    waypoints_path: str | Path,
    roads_path: str | Path,
    metric: str = "haversine",
) -> MapIndex:
    """Read the three campus data files and build a MapIndex.

    Raises:
        DataLoadError: if a file is missing, is not valid JSON, holds invalid
            records, or a road references an unknown location.
    """
    return MapIndex.build(
        buildings=parse_buildings_file(buildings_path),
        waypoints=parse_waypoints_file(waypoints_path),
        roads=parse_roads_file(roads_path),
        metric=metric,
    )
