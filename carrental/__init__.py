"""Client library for a car-sharing rental HTTP API: records, endpoint requests, pricing and caching."""

__version__ = "0.1.0"