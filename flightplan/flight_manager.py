"""Flight database indexed by departure airport and departure time."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Optional, Union

from .bstset import BSTSet
from .models import FlightFinder, FlightSegment

_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class FlightDataError(ValueError):
    """Raised when a line of flight data cannot be parsed."""


class _Cursor:
    """Reads comma-separated fields and integers from one line of data."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def field(self) -> str:
        if self.pos >= len(self.text):
            raise FlightDataError(f"Invalid line format: {self.text}")
        end = self.text.find(",", self.pos)
        if end == -1:
            value = self.text[self.pos:]
            self.pos = len(self.text)
        else:
            value = self.text[self.pos:end]
            self.pos = end + 1
        return value

    def integer(self) -> int:
        match = _INT.match(self.text, self.pos)
        if match is None:
            raise FlightDataError(f"Invalid line format: {self.text}")
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            raise FlightDataError(f"Invalid line format: {self.text}")
        self.pos = match.end()
        return value

    def skip(self) -> None:
        self.pos = min(self.pos + 1, len(self.text))


def parse_flight_line(line: str) -> FlightSegment:
    """Parse ``airline,flight_no,from,to,departure,arrival,duration``."""
    cursor = _Cursor(line)
    airline = cursor.field()
    flight_no = cursor.integer()
    cursor.skip()
    source = cursor.field()
    destination = cursor.field()
    departure = cursor.integer()
    cursor.skip()
    cursor.integer()  # arrival time; the duration is authoritative
    cursor.skip()
    duration = cursor.integer()
    return FlightSegment(airline, flight_no, source, destination, departure, duration)


@dataclass(frozen=True, order=True)
class _Departure:
    departure_time: int
    airline: str
    flight_no: int
    destination_airport: str
    segment: Optional[FlightSegment] = field(default=None, compare=False)

    @classmethod
    def of(cls, segment: FlightSegment) -> "_Departure":
        return cls(
            segment.departure_time,
            segment.airline,
            segment.flight_no,
            segment.destination_airport,
            segment,
        )


class FlightManager(FlightFinder):
    """Stores flights per departure airport, ordered by departure time."""

    def __init__(self) -> None:
        self._by_airport: dict[str, BSTSet[_Departure]] = {}

    def load_flight_data(self, filename: Union[str, PathLike]) -> int:
        """Load flights from a file, one per line; return how many were read.

        Raises ``FlightDataError`` at the first malformed line; flights read
        before it stay loaded.
        """
        count = 0
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                self.add_flight(parse_flight_line(line.rstrip("\n")))
                count += 1
        return count

    def add_flight(self, segment: FlightSegment) -> None:
        """Add a flight, replacing one with the same departure key."""
        flights = self._by_airport.setdefault(segment.source_airport, BSTSet())
        flights.insert(_Departure.of(segment))

    def find_flights(
        self, source_airport: str, start_time: int, end_time: int
    ) -> list[FlightSegment]:
        """Flights leaving ``source_airport`` with start_time <= departure < end_time."""
        flights = self._by_airport.get(source_airport)
        if flights is None:
            return []
        probe = _Departure(start_time, "", 0, "")
        found: list[FlightSegment] = []
        for entry in flights.find_first_not_smaller(probe):
            if entry.departure_time >= end_time:
                break
            assert entry.segment is not None
            found.append(entry.segment)
        return found