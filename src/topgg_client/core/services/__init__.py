"""Services of the core."""
