"""Forward values from a JSON metrics endpoint to Librato."""

__version__ = "0.1.0"
