"""Adapters for external I/O (HTTP)."""
