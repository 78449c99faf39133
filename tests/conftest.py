import pytest


@pytest.fixture
def campus_state():
    """Session state with a small planar campus loaded; reset afterwards."""
    from campus_map.state import state, MapSettings, DataSources
    from campus_map.core.map_index import MapIndex
    from campus_map.models import BuildingRecord, WaypointRecord

    state.settings = MapSettings(metric="planar", default_threshold=4.0)
    state.campus = MapIndex.build(
        buildings=[
            BuildingRecord(id=1, lat=0.0, lon=0.0, name="Lib"),
            BuildingRecord(id=3, lat=0.0, lon=6.0, name="Gym"),
            BuildingRecord(id=4, lat=9.0, lon=9.0, name="Lib"),
            BuildingRecord(id=5, lat=20.0, lon=20.0, name="Island"),
        ],
        waypoints=[WaypointRecord(id=2, lat=0.0, lon=3.0)],
        roads=[[1, 2, 3], [3, 4]],
        metric="planar",
    )
    state.sources = DataSources(buildings="b.json", waypoints="w.json", roads="r.json")
    yield state
    state.settings = MapSettings()
    state.campus = None
    state.sources = DataSources()


@pytest.fixture
def empty_state():
    from campus_map.state import state, MapSettings, DataSources
    state.settings = MapSettings()
    state.campus = None
    state.sources = DataSources()
    yield state


@pytest.fixture
def anyio_backend():
    return "asyncio"
