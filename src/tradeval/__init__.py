"""Roster ingestion, TA Score normalization and trade comparison."""

__version__ = "0.1.0"
