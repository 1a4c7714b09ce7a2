#!/usr/bin/env python3
"""
Example: Explore keys, chords and modes.

This demonstrates parsing notation, naming chords, and listing the
diatonic chords of a few keys.

Usage:
    python examples/explore_keys.py
"""

from chuk_mcp_theory.core import Chord, Key, Pitch, Scale


def main() -> None:
    """Print a tour of the theory primitives."""
    # Notation: scientific and Helmholtz name the same pitch
    for name in ("E4", "e'", "B♭3", "C,"):
        pitch = Pitch.from_string(name)
        print(f"{name:>5} = MIDI {pitch.midi_number} ({pitch.respell()})")

    # Chords by name, and by their notes
    print()
    chord = Chord.from_string("E Major")
    print(f"{chord.full_name}: {' '.join(str(p) for p in chord.pitches)}")
    inverted = chord.invert("a")
    print(f"  first inversion: {' '.join(str(p) for p in inverted.pitches)}")
    notes = [Pitch.from_string(n) for n in ("D4", "F4", "A4", "C5")]
    print(f"  D F A C is {Chord.from_pitches(notes)}")

    # Diatonic chords in a few keys
    print()
    for key_name in ("E Diatonic Major", "A Natural Minor", "C Harmonic Minor"):
        key = Key.from_string(key_name)
        print(f"{key}:")
        print(f"  triads:   {', '.join(c.name for c in key.chords())}")
        print(f"  sevenths: {', '.join(c.name for c in key.chords(sevenths=True))}")

    # Modes of the major scale
    print()
    major = Scale.from_string("Diatonic Major")
    for mode in major.modes:
        print(f"{mode.name:>10}: {mode.pitch_classes}")


if __name__ == "__main__":
    main()
