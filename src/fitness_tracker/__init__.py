"""Fitness exercise log with day-grouped listing and key-value persistence."""

__version__ = "0.1.0"
