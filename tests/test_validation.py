import pytest

from flightplan.flight_manager import FlightManager
from flightplan.models import FlightSegment, Itinerary
from flightplan.validation import InvalidItineraryError, validate_itinerary

HOUR = 3600

FIRST = FlightSegment("AA", 100, "LAX", "ORD", 1000, 4 * HOUR)
SECOND = FlightSegment("AA", 200, "ORD", "JFK", 1000 + 6 * HOUR, 2 * HOUR)


@pytest.fixture
def manager():
    fm = FlightManager()
    fm.add_flight(FIRST)
    fm.add_flight(SECOND)
    return fm


def _message(manager, itinerary, min_conn=HOUR, max_layover=12 * HOUR):
    with pytest.raises(InvalidItineraryError) as info:
        validate_itinerary(manager, itinerary, min_conn, max_layover)
    return str(info.value)


def test_valid_itinerary_passes_and_tight_limits_fail(manager):
    itinerary = Itinerary("LAX", "JFK", [FIRST, SECOND])
    result = validate_itinerary(manager, itinerary, HOUR, 12 * HOUR)
    assert result is None
    assert "Not enough connection time" in _message(manager, itinerary, min_conn=3 * HOUR)


def test_empty_itinerary(manager):
    assert _message(manager, Itinerary("LAX", "JFK")) == "Itinerary has no flights."


def test_source_mismatch(manager):
    msg = _message(manager, Itinerary("SFO", "JFK", [FIRST, SECOND]))
    assert msg == "Itinerary source airport mismatch: LAX != SFO"


def test_destination_mismatch(manager):
    msg = _message(manager, Itinerary("LAX", "BOS", [FIRST, SECOND]))
    assert msg == "Itinerary destination airport mismatch: JFK != BOS"


def test_flight_not_in_database(manager):
    unknown = FlightSegment("UA", 7, "LAX", "ORD", 1000, 4 * HOUR + 1)
    msg = _message(manager, Itinerary("LAX", "ORD", [unknown]))
    assert msg == "Flight UA 7 from LAX to ORD not found in flightManager database."


def test_connection_mismatch(manager):
    stray = FlightSegment("AA", 300, "DEN", "JFK", 1000 + 6 * HOUR, HOUR)
    msg = _message(manager, Itinerary("LAX", "JFK", [FIRST, stray]))
    assert msg == "Connection mismatch between flights 100 and 300: ORD != DEN"


def test_departs_before_arrival(manager):
    early = FlightSegment("AA", 400, "ORD", "JFK", 1000 + HOUR, HOUR)
    manager.add_flight(early)
    msg = _message(manager, Itinerary("LAX", "JFK", [FIRST, early]))
    assert msg == "Flight 400 departs before the previous flight arrives."


def test_not_enough_connection_time(manager):
    itinerary = Itinerary("LAX", "JFK", [FIRST, SECOND])
    msg = _message(manager, itinerary, min_conn=3 * HOUR)
    assert msg == (
        "Not enough connection time between flights 100 and 200. "
        f"Required minimum: {3 * HOUR}, actual: {2 * HOUR}"
    )


def test_layover_too_long(manager):
    itinerary = Itinerary("LAX", "JFK", [FIRST, SECOND])
    msg = _message(manager, itinerary, max_layover=HOUR)
    assert msg == (
        "Layover is too long between flights 100 and 200. "
        f"Maximum allowed: {HOUR}, actual: {2 * HOUR}"
    )


def test_second_flight_must_exist(manager):
    ghost = FlightSegment("AA", 999, "ORD", "JFK", 1000 + 6 * HOUR, 3 * HOUR)
    msg = _message(manager, Itinerary("LAX", "JFK", [FIRST, ghost]))
    assert "Flight AA 999 from ORD to JFK" in msg


def test_error_is_value_error(manager):
    with pytest.raises(ValueError):
        validate_itinerary(manager, Itinerary("LAX", "JFK"), HOUR, 12 * HOUR)