"""Aggregate N2YO TLE data for every payload of a SpaceX mission."""

__version__ = "1.0.0"
