"""
Export - chords to MIDI files.
"""

from chuk_mcp_theory.export.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    chords_to_events,
    events_to_midi,
    progression_to_midi,
    velocity_float_to_int,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "chords_to_events",
    "events_to_midi",
    "progression_to_midi",
    "velocity_float_to_int",
]
