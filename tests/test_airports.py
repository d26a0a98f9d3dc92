import math

import pytest

from flightplan.airports import (
    EARTH_RADIUS_MILES,
    AirportDB,
    GeoLocation,
    UnknownAirportError,
    haversine_distance,
)


def test_same_point_has_zero_distance():
    here = GeoLocation(34.0, -118.4)
    assert haversine_distance(here, here) == pytest.approx(0.0)


def test_distance_is_symmetric():
    a = GeoLocation(34.0, -118.4)
    b = GeoLocation(40.6, -73.8)
    assert haversine_distance(a, b) == pytest.approx(haversine_distance(b, a))


def test_antipodal_points_are_half_circumference_apart():
    a = GeoLocation(0.0, 0.0)
    b = GeoLocation(0.0, 180.0)
    assert haversine_distance(a, b) == pytest.approx(math.pi * EARTH_RADIUS_MILES)


def test_quarter_is_half_of_antipodal():
    origin = GeoLocation(0.0, 0.0)
    quarter = haversine_distance(origin, GeoLocation(0.0, 90.0))
    half = haversine_distance(origin, GeoLocation(0.0, 180.0))
    assert half == pytest.approx(2 * quarter)


def test_add_airport_and_get_distance():
    db = AirportDB()
    db.add_airport("LAX", 33.9, -118.4)
    db.add_airport("JFK", 40.6, -73.8)
    expected = haversine_distance(GeoLocation(33.9, -118.4), GeoLocation(40.6, -73.8))
    assert db.get_distance("LAX", "JFK") == pytest.approx(expected)
    assert len(db) == 2
    assert "LAX" in db


def test_unknown_source_airport():
    db = AirportDB()
    db.add_airport("JFK", 40.6, -73.8)
    with pytest.raises(UnknownAirportError, match="source"):
        db.get_distance("XXX", "JFK")


def test_unknown_destination_airport():
    db = AirportDB()
    db.add_airport("JFK", 40.6, -73.8)
    with pytest.raises(UnknownAirportError, match="dest"):
        db.get_distance("JFK", "XXX")


def test_load_airport_data_skips_short_lines(tmp_path):
    path = tmp_path / "airports.txt"
    path.write_text("LAX,33.9,-118.4\nBAD,1.0\nSHORT\nJFK,40.6,-73.8,extra\nNOLON,5.0,\n")
    db = AirportDB()
    assert db.load_airport_data(path) == 2
    assert "LAX" in db
    assert "JFK" in db
    assert "BAD" not in db
    assert "NOLON" not in db


def test_load_airport_data_later_line_replaces(tmp_path):
    path = tmp_path / "airports.txt"
    path.write_text("AAA,0,0\nBBB,0,90\nBBB,0,180\n")
    db = AirportDB()
    db.load_airport_data(path)
    assert len(db) == 2
    assert db.get_distance("AAA", "BBB") == pytest.approx(math.pi * EARTH_RADIUS_MILES)


def test_load_airport_data_reads_number_prefix(tmp_path):
    path = tmp_path / "airports.txt"
    path.write_text("AAA, 0.0abc,0\nBBB,0,90xyz\n")
    db = AirportDB()
    db.load_airport_data(path)
    expected = haversine_distance(GeoLocation(0.0, 0.0), GeoLocation(0.0, 90.0))
    assert db.get_distance("AAA", "BBB") == pytest.approx(expected)


def test_load_airport_data_bad_number(tmp_path):
    path = tmp_path / "airports.txt"
    path.write_text("AAA,north,0\n")
    with pytest.raises(ValueError):
        AirportDB().load_airport_data(path)


def test_load_airport_data_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AirportDB().load_airport_data(tmp_path / "missing.txt")