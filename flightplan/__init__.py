"""Earliest-arrival flight itinerary planning under layover and duration limits."""

__version__ = "0.1.0"