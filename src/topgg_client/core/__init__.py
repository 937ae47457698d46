"""Client core: configuration, request construction, models and services."""
