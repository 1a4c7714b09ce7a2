"""
Theory tools - MCP tools for pitches, chords, scales and keys.

Tools for parsing notation, naming and recognizing chords, and resolving
keys and roman numeral progressions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import Chord, ChordClass, Key, Pitch, PitchLike, as_pitch_like
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.registry import ChordRegistry, ScaleRegistry

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def chord_class_to_dict(chord_class: ChordClass) -> dict[str, Any]:
    """Summary of a chord class for tool responses."""
    return {
        "name": chord_class.name,
        "full_name": chord_class.full_name,
        "abbrs": list(chord_class.abbrs),
        "intervals": list(chord_class.semitones),
        "fingerprint": chord_class.fingerprint,
    }


def chord_to_dict(chord: Chord[PitchLike]) -> dict[str, Any]:
    """Summary of a concrete chord for tool responses."""
    return {
        "name": chord.name,
        "full_name": chord.full_name,
        "abbr": chord.abbr,
        "root": str(chord.root),
        "chord_class": chord.chord_class.name,
        "inversion": chord.inversion,
        "pitches": [str(p) for p in chord.pitches],
        "intervals": [i.semitones for i in chord.intervals],
        "interval_classes": list(chord.interval_classes),
        "midi_numbers": chord.midi_numbers(),
    }


def register_theory_tools(
    mcp: ChukMCPServer,
    chords: ChordRegistry,
    scales: ScaleRegistry,
) -> dict[str, Any]:
    """
    Register theory tools with the MCP server.

    Args:
        mcp: The MCP server instance
        chords: The chord class registry
        scales: The scale registry

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_parse_pitch(text: str) -> str:
        """
        Parse a pitch or pitch class.

        Accepts scientific notation ("E4", "B♭3"), Helmholtz notation
        ("e'", "C,") or a bare pitch class ("F#").

        Args:
            text: The pitch to parse

        Returns:
            JSON string with the numeric value and spellings

        Example:
            theory_parse_pitch(text="E4")
        """
        try:
            value = as_pitch_like(text)
            pitch_class = value.as_pitch_class()
            result: dict[str, Any] = {
                "status": "success",
                "name": str(value),
                "pitch_class": pitch_class.semitones,
                "sharp_name": pitch_class.spell(),
                "flat_name": pitch_class.spell(prefer_flats=True),
            }
            if isinstance(value, Pitch):
                result["midi_number"] = value.midi_number
                result["octave"] = value.octave
                result["scientific"] = str(value.respell())
            return json.dumps(result)
        except TheoryError as e:
            logger.warning(f"Failed to parse pitch {text!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_parse_pitch"] = theory_parse_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_chord(name: str, inversion: str | None = None) -> str:
        """
        Describe a chord or chord class by name.

        Args:
            name: A chord name ("E Major", "F#m", "C4 dom7") or a chord
                class name ("Major 7th", "m7")
            inversion: Optional inversion, a number or 'a', 'c', 'd'

        Returns:
            JSON string with the chord's pitches and intervals

        Example:
            theory_describe_chord(name="G 7", inversion="a")
        """
        try:
            parsed = Chord.from_string(name, chords)
            if isinstance(parsed, ChordClass):
                return json.dumps(
                    {"status": "success", "chord_class": chord_class_to_dict(parsed)}
                )
            chord = parsed
            if inversion:
                chord = chord.invert(int(inversion) if inversion.isdigit() else inversion)
            return json.dumps({"status": "success", "chord": chord_to_dict(chord)})
        except TheoryError as e:
            logger.warning(f"Failed to describe chord {name!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_chord"] = theory_describe_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_identify_chord(notes: list[str]) -> str:
        """
        Name the chord formed by a set of notes.

        The first note is taken as the root; the match is exact (no
        extra or missing tones).

        Args:
            notes: Note names, root first (["E", "G#", "B"] or ["C4", "E4", "G4"])

        Returns:
            JSON string with the recognized chord

        Example:
            theory_identify_chord(notes=["D", "F", "A", "C"])
        """
        try:
            chord = Chord.from_pitches([as_pitch_like(n) for n in notes], chords)
            return json.dumps({"status": "success", "chord": chord_to_dict(chord)})
        except TheoryError as e:
            logger.warning(f"Failed to identify chord {notes!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_identify_chord"] = theory_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_chord_classes() -> str:
        """
        List the known chord classes.

        Returns:
            JSON string with every chord class and its abbreviations

        Example:
            theory_list_chord_classes()
        """
        chord_classes = [chord_class_to_dict(c) for c in chords]
        return json.dumps(
            {"status": "success", "chord_classes": chord_classes, "count": len(chord_classes)}
        )

    tools["theory_list_chord_classes"] = theory_list_chord_classes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_scales() -> str:
        """
        List the known scales and their modes.

        Returns:
            JSON string with every scale

        Example:
            theory_list_scales()
        """
        scale_list = [
            {
                "name": scale.name,
                "pitch_classes": list(scale.pitch_classes),
                "parent": scale.parent.name if scale.parent else None,
                "modes": [mode.name for mode in scale.modes],
            }
            for scale in scales
        ]
        return json.dumps({"status": "success", "scales": scale_list, "count": len(scale_list)})

    tools["theory_list_scales"] = theory_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_key(key: str) -> str:
        """
        Describe a key: its notes and modes.

        Args:
            key: Tonic and scale name ("E Diatonic Major", "A Natural Minor");
                the scale defaults to Diatonic Major

        Returns:
            JSON string with the key's notes

        Example:
            theory_describe_key(key="D Harmonic Minor")
        """
        try:
            k = Key.from_string(key, scales)
            return json.dumps(
                {
                    "status": "success",
                    "key": {
                        "name": k.name,
                        "tonic": str(k.tonic),
                        "scale": k.scale.name,
                        "notes": [str(n) for n in k.notes],
                        "pitch_classes": list(k.pitch_classes),
                        "modes": [mode.name for mode in k.scale.modes],
                    },
                }
            )
        except TheoryError as e:
            logger.warning(f"Failed to describe key {key!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_key"] = theory_describe_key

    @mcp.tool  # type: ignore[arg-type]
    async def theory_key_chords(key: str, sevenths: bool = False) -> str:
        """
        List the diatonic chords of a key, one per degree.

        Args:
            key: Tonic and scale name ("E Diatonic Major")
            sevenths: Stack four notes instead of three

        Returns:
            JSON string with the chords in degree order

        Example:
            theory_key_chords(key="C", sevenths=True)
        """
        try:
            k = Key.from_string(key, scales)
            key_chords = k.chords(sevenths=sevenths, registry=chords)
            return json.dumps(
                {
                    "status": "success",
                    "key": k.name,
                    "chords": [chord_to_dict(c) for c in key_chords],
                }
            )
        except TheoryError as e:
            logger.warning(f"Failed to list chords of {key!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_key_chords"] = theory_key_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_progression(key: str, progression: str) -> str:
        """
        Resolve a roman numeral progression in a key.

        Args:
            key: Tonic and scale name ("G Diatonic Major")
            progression: Numerals separated by spaces, hyphens or '+'
                ("I-vi-IV-V", "ii V7 I", "I+♭VII+IV")

        Returns:
            JSON string with one chord per numeral

        Example:
            theory_progression(key="C", progression="ii-V-I")
        """
        try:
            k = Key.from_string(key, scales)
            resolved = k.progression(progression, chords)
            return json.dumps(
                {
                    "status": "success",
                    "key": k.name,
                    "progression": progression,
                    "chords": [chord_to_dict(c) for c in resolved],
                }
            )
        except TheoryError as e:
            logger.warning(f"Failed to resolve {progression!r} in {key!r}: {e}")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_progression"] = theory_progression

    return tools
