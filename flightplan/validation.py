"""Checks that an itinerary is consistent with a flight database."""

from __future__ import annotations

from .models import FlightFinder, FlightSegment, Itinerary


class InvalidItineraryError(ValueError):
    """Raised when an itinerary fails validation."""


def _is_known(flight_manager: FlightFinder, flight: FlightSegment) -> bool:
    candidates = flight_manager.find_flights(
        flight.source_airport, flight.departure_time, flight.departure_time + 1
    )
    return any(candidate == flight for candidate in candidates)


def validate_itinerary(
    flight_manager: FlightFinder,
    itinerary: Itinerary,
    min_connection_time: int,
    max_layover: int,
) -> None:
    """Raise ``InvalidItineraryError`` unless every flight and connection is valid.

    Flights must exist in ``flight_manager``, chain from the itinerary's source
    to its destination, and leave between ``min_connection_time`` and
    ``max_layover`` seconds for each connection.
    """
    flights = itinerary.flights
    if not flights:
        raise InvalidItineraryError("Itinerary has no flights.")

    first, last = flights[0], flights[-1]
    if first.source_airport != itinerary.source_airport:
        raise InvalidItineraryError(
            "Itinerary source airport mismatch: "
            f"{first.source_airport} != {itinerary.source_airport}"
        )
    if last.destination_airport != itinerary.destination_airport:
        raise InvalidItineraryError(
            "Itinerary destination airport mismatch: "
            f"{last.destination_airport} != {itinerary.destination_airport}"
        )

    for flight, following in zip(flights, [*flights[1:], None]):
        if not _is_known(flight_manager, flight):
            raise InvalidItineraryError(
                f"Flight {flight.airline} {flight.flight_no} from "
                f"{flight.source_airport} to {flight.destination_airport} "
                "not found in flightManager database."
            )
        if following is None:
            continue

        if flight.destination_airport != following.source_airport:
            raise InvalidItineraryError(
                f"Connection mismatch between flights {flight.flight_no} and "
                f"{following.flight_no}: {flight.destination_airport} != "
                f"{following.source_airport}"
            )

        layover = following.departure_time - flight.arrival_time
        if layover < min_connection_time:
            if layover < 0:
                raise InvalidItineraryError(
                    f"Flight {following.flight_no} departs before the "
                    "previous flight arrives."
                )
            raise InvalidItineraryError(
                f"Not enough connection time between flights {flight.flight_no} "
                f"and {following.flight_no}. Required minimum: "
                f"{min_connection_time}, actual: {layover}"
            )
        if layover > max_layover:
            raise InvalidItineraryError(
                f"Layover is too long between flights {flight.flight_no} and "
                f"{following.flight_no}. Maximum allowed: {max_layover}, "
                f"actual: {layover}"
            )