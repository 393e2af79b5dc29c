"""Store area, chunk expansion, boundary walls and wall openings for a mall simulation."""

__version__ = "0.1.0"