"""Interfaces of the core.

Protocols implemented by adapters, so the client depends on abstractions.
"""
