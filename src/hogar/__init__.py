"""Hogar: household savings and shared grocery list."""

__version__ = "0.1.0"
