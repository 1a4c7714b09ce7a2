"""
Named pattern registries.

Chord classes and scales are loaded from YAML libraries (the packaged
library plus optional project files) into immutable registries.
"""

from chuk_mcp_theory.registry.chords import (
    ChordRegistry,
    default_chord_registry,
    load_chord_definitions,
)
from chuk_mcp_theory.registry.scales import (
    ScaleRegistry,
    default_scale_registry,
    load_scale_definitions,
)

__all__ = [
    "ChordRegistry",
    "ScaleRegistry",
    "default_chord_registry",
    "default_scale_registry",
    "load_chord_definitions",
    "load_scale_definitions",
]
