"""A small JSON REST service for todo entries, kept in memory, with a Swagger description."""

__version__ = "1.0.0"