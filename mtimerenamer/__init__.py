"""Rename files in a directory to their modification timestamp."""

__version__ = "0.1.0"
