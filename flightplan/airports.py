"""Airport locations and great-circle distances between them."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

EARTH_RADIUS_MILES = 3958.8

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class UnknownAirportError(LookupError):
    """Raised when an airport code is not in the database."""


@dataclass(frozen=True)
class GeoLocation:
    """A point on the Earth's surface, in degrees."""

    latitude: float
    longitude: float


def haversine_distance(first: GeoLocation, second: GeoLocation) -> float:
    """Great-circle distance between two locations, in miles."""
    lat1 = math.radians(first.latitude)
    lon1 = math.radians(first.longitude)
    lat2 = math.radians(second.latitude)
    lon2 = math.radians(second.longitude)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return c * EARTH_RADIUS_MILES


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"Invalid coordinate: {text!r}")
    return float(match.group(0))


def _split_record(line: str) -> tuple[str, str, str] | None:
    """Return code, latitude and longitude text, or None if the line is short."""
    pieces = line.split(",")
    if len(pieces) < 3:
        return None
    if len(pieces) == 3 and pieces[2] == "":
        return None
    return pieces[0], pieces[1], pieces[2]


class AirportDB:
    """Maps airport codes to their geographic locations."""

    def __init__(self) -> None:
        self._airports: dict[str, GeoLocation] = {}

    def load_airport_data(self, filename: Union[str, PathLike]) -> int:
        """Load ``code,latitude,longitude`` lines; return how many were read.

        Lines with fewer than three fields are skipped. A later line for the
        same code replaces an earlier one.
        """
        count = 0
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                record = _split_record(line.rstrip("\n"))
                if record is None:
                    continue
                code, latitude, longitude = record
                self.add_airport(code, _parse_float(latitude), _parse_float(longitude))
                count += 1
        return count

    def add_airport(self, code: str, latitude: float, longitude: float) -> None:
        """Record the location of an airport, replacing any previous one."""
        self._airports[code] = GeoLocation(latitude, longitude)

    def get_distance(self, source_airport: str, destination_airport: str) -> float:
        """Distance in miles between two known airports."""
        source = self._airports.get(source_airport)
        if source is None:
            raise UnknownAirportError(f"Can't find source airport: {source_airport}")
        destination = self._airports.get(destination_airport)
        if destination is None:
            raise UnknownAirportError(
                f"Can't find dest airport: {destination_airport}"
            )
        return haversine_distance(source, destination)

    def __contains__(self, code: object) -> bool:
        return code in self._airports

    def __len__(self) -> int:
        return len(self._airports)