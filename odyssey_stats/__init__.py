"""Collects runtime statistics from the Odyssey connection pooler."""

__version__ = "0.1.0"
