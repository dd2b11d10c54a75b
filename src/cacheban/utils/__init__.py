"""Utility helpers for cacheban."""
