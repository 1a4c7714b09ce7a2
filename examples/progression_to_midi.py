#!/usr/bin/env python3
"""
Example: Render roman numeral progressions to MIDI.

Run this script to create playable MIDI files you can open in any DAW.

Usage:
    python examples/progression_to_midi.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_theory.core import Key
from chuk_mcp_theory.export import progression_to_midi

PROGRESSIONS = [
    ("axis", "C Diatonic Major", "I-V-vi-IV"),
    ("two_five_one", "B♭ Diatonic Major", "ii V7 IΔ7"),
    ("andalusian", "A Natural Minor", "i-VII-VI-V"),
    ("mixolydian_rock", "D Diatonic Major", "I ♭VII IV I"),
]


def main() -> None:
    """Generate one MIDI file per progression."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    for filename, key_name, numerals in PROGRESSIONS:
        key = Key.from_string(key_name)
        chords = key.progression(numerals)
        print(f"{key}: {numerals}")
        print(f"  {' | '.join(c.name for c in chords)}")

        mid = progression_to_midi(chords, tempo_bpm=96, octave=3)
        path = output_dir / f"{filename}.mid"
        mid.save(str(path))
        print(f"  Created: {path}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
