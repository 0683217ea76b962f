"""Helpers for lists, database columns, thread synchronisation and loosely typed values."""

__version__ = "0.1.0"