"""Builders for Redis commands, grouped by data type and handed to a caller-supplied processor."""

__version__ = "0.1.0"