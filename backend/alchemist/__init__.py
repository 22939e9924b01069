"""Data Alchemist — roster ingestion and validation service."""

__version__ = "1.0.0"
