"""Framework adapters for cacheban."""
