"""Command-line front end: read a parameters file, plan a trip, print it."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from os import PathLike
from typing import Optional, Sequence, Union

from .airports import AirportDB
from .flight_manager import FlightDataError, FlightManager
from .models import Itinerary
from .planner import TravelPlanner
from .validation import InvalidItineraryError, validate_itinerary

AIRPORT_DATA_FILE = "airports.txt"
PROGRAM_NAME = "flightplan"

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ParameterError(ValueError):
    """Raised when a travel parameters file is malformed."""


def _hours_to_seconds(hours: float) -> int:
    """Convert hours to whole seconds, rounding halves away from zero."""
    seconds = hours * 3600.0
    return int(math.copysign(math.floor(abs(seconds) + 0.5), seconds))


@dataclass
class TravelParameters:
    """Everything a planning run needs, as read from a parameters file."""

    flight_data_file: str
    source_airport: str
    destination_airport: str
    start_time: int
    max_duration_hours: float
    min_connection_hours: float
    max_layover_hours: float
    preferred_airlines: list[str] = field(default_factory=list)

    @property
    def max_duration_sec(self) -> int:
        return _hours_to_seconds(self.max_duration_hours)

    @property
    def min_connection_sec(self) -> int:
        return _hours_to_seconds(self.min_connection_hours)

    @property
    def max_layover_sec(self) -> int:
        return _hours_to_seconds(self.max_layover_hours)


class _Reader:
    """Reads lines and whitespace-separated numbers from text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def line(self) -> str:
        if self.pos >= len(self.text):
            raise ParameterError("Invalid test parameters file format.")
        end = self.text.find("\n", self.pos)
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
            raise ParameterError("Invalid test parameters file format.")
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            raise ParameterError("Invalid test parameters file format.")
        self.pos = match.end()
        return value

    def number(self) -> float:
        match = _FLOAT.match(self.text, self.pos)
        if match is None:
            raise ParameterError("Invalid test parameters file format.")
        self.pos = match.end()
        return float(match.group(1))

    def skip_rest_of_line(self) -> None:
        end = self.text.find("\n", self.pos)
        self.pos = len(self.text) if end == -1 else end + 1

    def remaining_lines(self) -> list[str]:
        lines = []
        while self.pos < len(self.text):
            lines.append(self.line())
        return lines


def read_parameters(path: Union[str, PathLike]) -> TravelParameters:
    """Read a parameters file.

    The file holds the flight data file, source and destination airports on
    their own lines, then the start time (UNIX seconds), maximum duration,
    minimum connection time and maximum layover (hours), then one preferred
    airline per line.
    """
    with open(path, encoding="utf-8") as handle:
        reader = _Reader(handle.read())
    flight_data_file = reader.line()
    source = reader.line()
    destination = reader.line()
    start_time = reader.integer()
    max_duration = reader.number()
    min_connection = reader.number()
    max_layover = reader.number()
    reader.skip_rest_of_line()
    return TravelParameters(
        flight_data_file,
        source,
        destination,
        start_time,
        max_duration,
        min_connection,
        max_layover,
        reader.remaining_lines(),
    )


def format_time(unix_time: int) -> str:
    """Render a UNIX timestamp as ``YYYY-MM-DD HH:MM UTC (seconds)``."""
    moment = datetime.fromtimestamp(unix_time, timezone.utc)
    return f"{moment:%Y-%m-%d %H:%M} UTC ({unix_time})"


def _hours(seconds: int) -> str:
    return f"{seconds / 3600.0:g}"


def format_itinerary(start_time: int, itinerary: Itinerary) -> str:
    """Describe an itinerary, flight by flight, as printable text."""
    flights = itinerary.flights
    if not flights:
        raise ValueError("Itinerary has no flights.")
    lines = [
        f"Source: {itinerary.source_airport}, "
        f"Destination: {itinerary.destination_airport}, "
        f"Total Duration: {_hours(itinerary.total_duration)} hours",
        f"Arriving at source airport at: {format_time(start_time)}",
        "Wait time at initial airport: "
        f"{_hours(flights[0].departure_time - start_time)} hours",
        "Flights:",
    ]
    for flight, following in zip(flights, [*flights[1:], None]):
        lines.append(
            f"  {flight.source_airport} -> {flight.destination_airport}, "
            f"Airline: {flight.airline}, "
            f"Departure: {format_time(flight.departure_time)}, "
            f"Arrival: {format_time(flight.arrival_time)}, "
            f"Duration: {_hours(flight.duration_sec)} hours"
        )
        if following is not None:
            layover = following.departure_time - flight.arrival_time
            lines.append(f"  Layover: {_hours(layover)} hours")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the planner on a parameters file; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print(f"Usage: {PROGRAM_NAME} [ testParametersFile ]", file=sys.stderr)
        return 1

    if args:
        param_filename = args[0]
    else:
        sys.stdout.write("Enter test parameters file name: ")
        sys.stdout.flush()
        param_filename = sys.stdin.readline().rstrip("\n")

    try:
        params = read_parameters(param_filename)
    except OSError:
        print(f"Error: Failed to open {param_filename}", file=sys.stderr)
        return 1
    except ParameterError:
        print("Error: Invalid test parameters file format.", file=sys.stderr)
        return 1

    airport_db = AirportDB()
    try:
        airport_db.load_airport_data(AIRPORT_DATA_FILE)
    except OSError:
        print(f"Can't open airport database: {AIRPORT_DATA_FILE}", file=sys.stderr)
        print("Failed to load airport data.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        print("Failed to load airport data.", file=sys.stderr)
        return 1

    flight_manager = FlightManager()
    try:
        flight_manager.load_flight_data(params.flight_data_file)
    except OSError:
        print(f"Error: Unable to open file {params.flight_data_file}", file=sys.stderr)
        print(f"Failed to load flight data from {params.flight_data_file}.", file=sys.stderr)
        return 1
    except FlightDataError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Failed to load flight data from {params.flight_data_file}.", file=sys.stderr)
        return 1

    planner = TravelPlanner(
        flight_manager,
        airport_db,
        max_duration=params.max_duration_sec,
        max_layover=params.max_layover_sec,
        min_connection_time=params.min_connection_sec,
    )
    for airline in params.preferred_airlines:
        planner.add_preferred_airline(airline)

    itinerary = planner.plan_travel(
        params.source_airport, params.destination_airport, params.start_time
    )
    if itinerary is None:
        print("No itineraries found matching your criteria.")
        return 0

    try:
        validate_itinerary(
            flight_manager,
            itinerary,
            planner.min_connection_time,
            planner.max_layover,
        )
    except InvalidItineraryError as exc:
        print(f"Invalid itinerary: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_itinerary(params.start_time, itinerary))
    return 0


if __name__ == "__main__":
    sys.exit(main())