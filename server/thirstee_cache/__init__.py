"""In-memory TTL cache for the Thirstee event-planning backend."""

__version__ = "1.0.0"
