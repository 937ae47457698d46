"""Domain models.

Pure data structures (Pydantic v2) mirroring the top.gg API schema.
"""
