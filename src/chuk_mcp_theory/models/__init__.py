"""
Pydantic models for the theory system.

This module provides:
- ChordClassDefinition: A chord class record from a library file
- ScaleDefinition: A scale record from a library file
- ChordLibrary / ScaleLibrary: Top-level library documents
"""

from chuk_mcp_theory.models.definitions import (
    ChordClassDefinition,
    ChordLibrary,
    ScaleDefinition,
    ScaleLibrary,
)

__all__ = [
    "ChordClassDefinition",
    "ChordLibrary",
    "ScaleDefinition",
    "ScaleLibrary",
]
