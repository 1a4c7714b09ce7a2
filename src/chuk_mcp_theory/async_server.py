#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server provides MCP tools for music theory: parsing pitch notation,
naming and recognizing chords, describing keys and scales, and resolving
roman numeral progressions.

The chord and scale tables come from the packaged YAML library; a project
can extend them with theory/chords.yaml and theory/scales.yaml in the
working directory.

The server provides tools for:
- Parsing scientific and Helmholtz pitch notation
- Describing and identifying chords
- Listing chord classes and scales
- Describing keys and their diatonic chords
- Resolving and exporting progressions to MIDI
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.registry import ChordRegistry, ScaleRegistry
from chuk_mcp_theory.registry.chords import CHORD_LIBRARY_FILE
from chuk_mcp_theory.registry.scales import SCALE_LIBRARY_FILE
from chuk_mcp_theory.tools import register_export_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEORY_DIR = BASE_PATH / "theory"
OUTPUT_DIR = BASE_PATH / "output"
PROJECT_CHORDS_FILE = THEORY_DIR / "chords.yaml"
PROJECT_SCALES_FILE = THEORY_DIR / "scales.yaml"


def library_files(library_file: Path, project_file: Path) -> list[Path]:
    """The packaged library file, followed by the project file if present."""
    paths = [library_file]
    if project_file.exists():
        paths.append(project_file)
    return paths


# Create registries
chord_registry = ChordRegistry.from_yaml(*library_files(CHORD_LIBRARY_FILE, PROJECT_CHORDS_FILE))
scale_registry = ScaleRegistry.from_yaml(*library_files(SCALE_LIBRARY_FILE, PROJECT_SCALES_FILE))

# Register all tools
theory_tools = register_theory_tools(mcp, chord_registry, scale_registry)
export_tools = register_export_tools(mcp, chord_registry, scale_registry, OUTPUT_DIR)

# Export tool functions for direct access
theory_parse_pitch = theory_tools["theory_parse_pitch"]
theory_describe_chord = theory_tools["theory_describe_chord"]
theory_identify_chord = theory_tools["theory_identify_chord"]
theory_list_chord_classes = theory_tools["theory_list_chord_classes"]
theory_list_scales = theory_tools["theory_list_scales"]
theory_describe_key = theory_tools["theory_describe_key"]
theory_key_chords = theory_tools["theory_key_chords"]
theory_progression = theory_tools["theory_progression"]

theory_export_progression = export_tools["theory_export_progression"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Chord classes: {len(chord_registry)}")
logger.info(f"  Scales: {len(scale_registry)}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
