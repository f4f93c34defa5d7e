"""Journey AI: mood-based itinerary suggestions."""

__version__ = "1.0.0"
