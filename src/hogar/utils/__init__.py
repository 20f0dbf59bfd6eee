"""Utilities for Hogar."""
