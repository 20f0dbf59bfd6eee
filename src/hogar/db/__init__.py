"""Database package for Hogar."""
