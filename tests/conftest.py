"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theory.registry import (
    ChordRegistry,
    ScaleRegistry,
    default_chord_registry,
    default_scale_registry,
)


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def chord_registry() -> ChordRegistry:
    """The built-in chord classes."""
    return default_chord_registry()


@pytest.fixture
def scale_registry() -> ScaleRegistry:
    """The built-in scales."""
    return default_scale_registry()
