"""Earliest-arrival travel planning over a flight database."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Optional

from .airports import AirportDB
from .models import FlightFinder, FlightSegment, Itinerary

DEFAULT_MAX_DURATION = 24 * 3600
DEFAULT_MAX_LAYOVER = 12 * 3600
DEFAULT_MIN_CONNECTION_TIME = 3600


@dataclass(order=True)
class _Stop:
    arrival_time: int
    order: int
    airport: str = field(compare=False)


class TravelPlanner:
    """Finds the itinerary that reaches a destination as early as possible.

    ``max_duration``, ``max_layover`` and ``min_connection_time`` are in
    seconds and may be changed between searches.
    """

    def __init__(
        self,
        flight_manager: FlightFinder,
        airport_db: Optional[AirportDB] = None,
        *,
        max_duration: int = DEFAULT_MAX_DURATION,
        max_layover: int = DEFAULT_MAX_LAYOVER,
        min_connection_time: int = DEFAULT_MIN_CONNECTION_TIME,
    ) -> None:
        self._flight_manager = flight_manager
        self._airport_db = airport_db if airport_db is not None else AirportDB()
        self.max_duration = max_duration
        self.max_layover = max_layover
        self.min_connection_time = min_connection_time
        self._preferred: set[str] = set()

    @property
    def flight_manager(self) -> FlightFinder:
        return self._flight_manager

    @property
    def airport_db(self) -> AirportDB:
        return self._airport_db

    @property
    def preferred_airlines(self) -> frozenset[str]:
        """Airlines the planner is restricted to; empty means any airline."""
        return frozenset(self._preferred)

    def add_preferred_airline(self, airline: str) -> None:
        """Restrict future searches to this airline and any others added."""
        self._preferred.add(airline)

    def _candidate_flights(
        self, stop: _Stop, source_airport: str, start_time: int
    ) -> list[FlightSegment]:
        if stop.airport == source_airport:
            return self._flight_manager.find_flights(
                stop.airport, start_time, start_time + self.max_layover
            )
        return self._flight_manager.find_flights(
            stop.airport,
            stop.arrival_time + self.min_connection_time,
            stop.arrival_time + self.max_layover,
        )

    @staticmethod
    def _reconstruct(
        previous: dict[str, FlightSegment], source_airport: str, destination_airport: str
    ) -> Optional[list[FlightSegment]]:
        path: list[FlightSegment] = []
        current = destination_airport
        seen: set[str] = set()
        while current in previous and current not in seen:
            seen.add(current)
            segment = previous[current]
            path.append(segment)
            current = segment.source_airport
            if current == source_airport:
                break
        if not path or current != source_airport:
            return None
        path.reverse()
        return path

    def plan_travel(
        self, source_airport: str, destination_airport: str, start_time: int
    ) -> Optional[Itinerary]:
        """Plan the earliest-arriving trip, or return None if there is none.

        ``start_time`` is when the traveller reaches ``source_airport``.
        """
        deadline = start_time + self.max_duration
        counter = itertools.count()
        queue: list[_Stop] = [_Stop(start_time, next(counter), source_airport)]
        earliest_arrival: dict[str, int] = {source_airport: start_time}
        previous: dict[str, FlightSegment] = {}

        while queue:
            stop = heapq.heappop(queue)

            if stop.airport == destination_airport:
                path = self._reconstruct(previous, source_airport, destination_airport)
                if path is None:
                    return None
                total = stop.arrival_time - start_time
                if total > self.max_duration:
                    return None
                return Itinerary(source_airport, destination_airport, path, total)

            for flight in self._candidate_flights(stop, source_airport, start_time):
                arrival = flight.arrival_time
                if arrival > deadline:
                    continue
                if flight.departure_time - stop.arrival_time > self.max_layover:
                    continue
                if self._preferred and flight.airline not in self._preferred:
                    continue
                nxt = flight.destination_airport
                best = earliest_arrival.get(nxt)
                if best is None or arrival < best:
                    earliest_arrival[nxt] = arrival
                    previous[nxt] = flight
                    heapq.heappush(queue, _Stop(arrival, next(counter), nxt))

        return None