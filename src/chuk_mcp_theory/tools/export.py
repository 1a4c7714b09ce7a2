"""
Export tools - MCP tools for MIDI export.

Tools for rendering resolved progressions to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import Key
from chuk_mcp_theory.export import progression_to_midi, velocity_float_to_int
from chuk_mcp_theory.registry import ChordRegistry, ScaleRegistry

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    chords: ChordRegistry,
    scales: ScaleRegistry,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        chords: The chord class registry
        scales: The scale registry
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_progression(
        key: str,
        progression: str,
        output_name: str | None = None,
        tempo: int = 120,
        beats_per_chord: float = 4.0,
        octave: int = 4,
        velocity: float = 0.7,
    ) -> str:
        """
        Render a roman numeral progression to a MIDI file.

        Each chord is a block chord in close voicing, played for
        beats_per_chord beats.

        Args:
            key: Tonic and scale name ("C Diatonic Major")
            progression: Numerals separated by spaces, hyphens or '+'
            output_name: Optional output filename (without .mid extension)
            tempo: Tempo in BPM
            beats_per_chord: Length of each chord in beats
            octave: Octave of the bass note
            velocity: Loudness, 0.0-1.0

        Returns:
            JSON string with the output file path

        Example:
            theory_export_progression(key="C", progression="I-vi-IV-V")
        """
        try:
            k = Key.from_string(key, scales)
            resolved = k.progression(progression, chords)
            if not resolved:
                return json.dumps({"status": "error", "message": "Progression is empty"})

            midi_file = progression_to_midi(
                resolved,
                tempo_bpm=tempo,
                beats_per_chord=beats_per_chord,
                octave=octave,
                velocity=velocity_float_to_int(velocity),
            )

            filename = f"{output_name or 'progression'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            midi_file.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "key": k.name,
                    "chords": [c.name for c in resolved],
                    "message": f"Exported {len(resolved)} chords to {filename}",
                }
            )
        except ValueError as e:
            logger.warning(f"Failed to export {progression!r} in {key!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_progression"] = theory_export_progression

    return tools
