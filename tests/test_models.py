"""Tests for domain Pydantic models."""
import pytest
from pydantic import ValidationError


class TestGeoLocation:
    def test_valid_location(self):
        from campus_map.models import GeoLocation
        loc = GeoLocation(id=1, name="Library", lat=34.13, lon=-118.12)
        assert loc.name == "Library"

    def test_name_defaults_none(self):
        from campus_map.models import GeoLocation
        assert GeoLocation(id=1, lat=0.0, lon=0.0).name is None

    def test_lat_out_of_range(self):
        from campus_map.models import GeoLocation
        with pytest.raises(ValidationError):
            GeoLocation(id=1, lat=91.0, lon=0.0)

    def test_lon_out_of_range(self):
        from campus_map.models import GeoLocation
        with pytest.raises(ValidationError):
            GeoLocation(id=1, lat=0.0, lon=-181.0)

    def test_equality_is_by_id_only(self):
        from campus_map.models import GeoLocation
        a = GeoLocation(id=7, name="A", lat=0.0, lon=0.0)
        b = GeoLocation(id=7, name="B", lat=1.0, lon=1.0)
        c = GeoLocation(id=8, name="A", lat=0.0, lon=0.0)
        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_immutable(self):
        from campus_map.models import GeoLocation
        loc = GeoLocation(id=1, lat=0.0, lon=0.0)
        with pytest.raises(ValidationError):
            loc.lat = 5.0

    def test_distance_to_uses_metric(self):
        from campus_map.models import GeoLocation
        from campus_map.core.geo import planar
        a = GeoLocation(id=1, lat=0.0, lon=0.0)
        b = GeoLocation(id=2, lat=3.0, lon=4.0)
        assert a.distance_to(b, planar) == pytest.approx(5.0)
        assert isinstance(a.distance_to(b), float)

    def test_distance_to_point(self):
        from campus_map.models import GeoLocation
        from campus_map.core.geo import planar
        a = GeoLocation(id=1, lat=1.0, lon=1.0)
        assert a.distance_to_point(1.0, 1.0, planar) == 0.0

    def test_label(self):
        from campus_map.models import GeoLocation
        assert GeoLocation(id=3, name="Gym", lat=0.0, lon=0.0).label() == "Gym (#3)"
        assert GeoLocation(id=4, lat=0.0, lon=0.0).label() == "#4"


class TestRecords:
    def test_building_requires_name(self):
        from campus_map.models import BuildingRecord
        with pytest.raises(ValidationError):
            BuildingRecord(id=1, lat=0.0, lon=0.0)

    def test_waypoint_name_optional(self):
        from campus_map.models import WaypointRecord
        assert WaypointRecord(id=1, lat=0.0, lon=0.0).name is None

    def test_extra_keys_ignored(self):
        from campus_map.models import BuildingRecord
        b = BuildingRecord.model_validate(
            {"id": 1, "lat": 0.0, "lon": 0.0, "name": "Lib", "type": "library"}
        )
        assert b.name == "Lib"

    def test_location_from_record(self):
        from campus_map.models import BuildingRecord, GeoLocation
        loc = GeoLocation.from_record(BuildingRecord(id=5, lat=1.0, lon=2.0, name="Hall"))
        assert (loc.id, loc.name, loc.lat, loc.lon) == (5, "Hall", 1.0, 2.0)


class TestRoute:
    def test_route_must_have_a_location(self):
        from campus_map.models import Route
        with pytest.raises(ValidationError):
            Route(locations=[], total_distance=0.0)

    def test_start_and_target(self):
        from campus_map.models import GeoLocation, Route
        a = GeoLocation(id=1, lat=0.0, lon=0.0)
        b = GeoLocation(id=2, lat=0.0, lon=1.0)
        r = Route(locations=[a, b], total_distance=1.0)
        assert r.start == a
        assert r.target == b
