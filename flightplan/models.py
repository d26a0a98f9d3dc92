"""Core data types shared by the flight database and the planner."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FlightSegment:
    """A single scheduled flight between two airports."""

    airline: str
    flight_no: int
    source_airport: str
    destination_airport: str
    departure_time: int
    duration_sec: int

    @property
    def arrival_time(self) -> int:
        """Time, in UNIX seconds, at which the flight lands."""
        return self.departure_time + self.duration_sec


@dataclass
class Itinerary:
    """A sequence of flights taking a traveller from one airport to another."""

    source_airport: str
    destination_airport: str
    flights: list[FlightSegment] = field(default_factory=list)
    # From arrival at the first airport until deplaning at the last one.
    total_duration: int = 0


class FlightFinder(ABC):
    """Anything that can look up flights leaving an airport in a time window."""

    @abstractmethod
    def find_flights(
        self, source_airport: str, start_time: int, end_time: int
    ) -> list[FlightSegment]:
        """Return flights from ``source_airport`` departing in [start_time, end_time)."""