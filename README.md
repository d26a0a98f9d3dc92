# flightplan

Find the flight itinerary that reaches a destination airport at the earliest
possible time. Connections must respect a minimum connection time and a maximum
layover, and the whole trip must fit in a maximum travel duration. The search
can be limited to a set of preferred airlines.

## Installation

```
pip install .
```

## Command line

```
flightplan params.txt
```

If no file is given, the command asks for the name of one. The parameters file
holds, in this order:

1. path of the flight data file (own line)
2. source airport code (own line)
3. destination airport code (own line)
4. arrival time at the source airport (Unix seconds, an integer)
5. maximum travel duration (hours)
6. minimum connection time (hours)
7. maximum layover (hours)

Hour values may be fractional; they are rounded to whole seconds. Every line
after these names one preferred airline. With no preferred airlines, any
airline may be used.

A file named `airports.txt` must be in the current directory. Each of its lines
reads `CODE,latitude,longitude`; lines with fewer than three fields are skipped.

Each line of the flight data file reads:

```
airline,flight_no,source,destination,departure_time,arrival_time,duration_sec
```

The `arrival_time` field must be a number but is not used; a flight's arrival
is its departure time plus `duration_sec`.

The command plans a trip, checks it with `validate_itinerary`, and prints it:
each leg, its departure and arrival times in UTC, and the layover between
legs. If no route meets the limits, it prints
`No itineraries found matching your criteria.` It exits with status 1 when a
file cannot be opened or parsed, or when the planned itinerary fails
validation.

## Library use

```python
from flightplan.flight_manager import FlightManager
from flightplan.airports import AirportDB
from flightplan.planner import TravelPlanner
from flightplan.validation import validate_itinerary

flights = FlightManager()
flights.load_flight_data("flights.txt")

airports = AirportDB()
airports.load_airport_data("airports.txt")

planner = TravelPlanner(flights, airports, max_layover=6 * 3600)
planner.add_preferred_airline("United")
itinerary = planner.plan_travel("LAX", "JFK", 1736150400)
if itinerary is not None:
    validate_itinerary(flights, itinerary,
                       planner.min_connection_time, planner.max_layover)
    for leg in itinerary.flights:
        print(leg.airline, leg.flight_no, leg.source_airport, "->", leg.destination_airport)
```

- `flightplan.models` holds `FlightSegment` (with an `arrival_time` property),
  `Itinerary`, and `FlightFinder`, the interface for anything with a
  `find_flights(source_airport, start_time, end_time)` method.
- `FlightManager.load_flight_data` returns the number of flights read and
  raises `FlightDataError` at the first malformed line. `add_flight` adds a
  single `FlightSegment`; `find_flights` returns flights departing in
  `[start_time, end_time)`, ordered by departure time. `parse_flight_line`
  parses one line of flight data.
- `TravelPlanner` takes `max_duration` (default 24 hours), `max_layover`
  (default 12 hours) and `min_connection_time` (default 1 hour), all in
  seconds, as keyword arguments or attributes. `plan_travel` returns an
  `Itinerary` or `None`.
- `validate_itinerary` raises `InvalidItineraryError` when it finds a problem:
  no flights, a leg that is not in the flight data, legs that do not connect,
  too little connection time, or a layover that is too long.
- `AirportDB.get_distance` returns the great-circle distance in miles and
  raises `UnknownAirportError` for an airport it does not know.
  `haversine_distance` works on two `GeoLocation` values directly.
- `flightplan.bstset.BSTSet` is the ordered set the flight index is built on.

## What it does not do

The planner optimises for earliest arrival only. It does not rank trips by
price, distance or number of connections, and although `TravelPlanner` holds an
`AirportDB`, the search does not use airport locations.