"""Formula 1 team management: models, an HTTP API client and SQLite storage."""

__version__ = "0.1.0"