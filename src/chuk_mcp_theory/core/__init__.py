"""
Core theory primitives.

These are the value types everything else composes on:
- Interval: Signed distance between pitches in semitones
- PitchClass: A pitch modulo the octave (0-11)
- Pitch: An absolute pitch (C4 = 60)
- ChordClass: A named interval pattern ("Major" = 0, 4, 7)
- Chord: A chord class on a root, with an inversion
- Scale: A named pitch-class pattern with derived modes
- Key: A scale on a tonic
- RomanNumeral: Key-relative chord references ("V7", "♭VII")
"""

from chuk_mcp_theory.core.chord import Chord, ChordClass, abbreviate, fingerprint
from chuk_mcp_theory.core.pitch import Interval, Pitch, PitchClass, PitchLike, as_pitch_like
from chuk_mcp_theory.core.roman import RomanNumeral, chord_from_roman_numeral, split_progression
from chuk_mcp_theory.core.scale import Key, Scale

__all__ = [
    # Pitch
    "Interval",
    "PitchClass",
    "Pitch",
    "PitchLike",
    "as_pitch_like",
    # Chord
    "ChordClass",
    "Chord",
    "abbreviate",
    "fingerprint",
    # Scale
    "Scale",
    "Key",
    # Roman numerals
    "RomanNumeral",
    "chord_from_roman_numeral",
    "split_progression",
]
