"""
MIDI export - chords to sound.

Turns a sequence of chords (a resolved progression, the diatonic chords
of a key) into note events and a mido MidiFile. Chords are block chords
in close voicing above their bass, one after another.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_theory.core.chord import Chord
    from chuk_mcp_theory.core.pitch import PitchLike


# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 80


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Microseconds per beat
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick, so repeated notes retrigger
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def chords_to_events(
    chords: Sequence[Chord[PitchLike]],
    beats_per_chord: float = 4.0,
    octave: int = 4,
    velocity: int = DEFAULT_VELOCITY,
    ticks_per_beat: int = TICKS_PER_BEAT,
    channel: int = 0,
) -> list[MidiEvent]:
    """
    Lay chords end to end as block chords.

    Args:
        chords: Chords in playing order
        beats_per_chord: Length of each chord in beats
        octave: Octave for the bass of pitch-class chords; chords rooted on
            a Pitch keep their own register
        velocity: Note velocity (0-127)
        ticks_per_beat: Resolution
        channel: MIDI channel (0-15)

    Returns:
        One MidiEvent per chord tone

    Raises:
        ValueError: If a voiced note falls outside 0-127
    """
    duration = beats_to_ticks(beats_per_chord, ticks_per_beat)
    events: list[MidiEvent] = []
    for index, chord in enumerate(chords):
        start = index * duration
        for note in chord.midi_numbers(octave):
            events.append(
                MidiEvent(
                    pitch=note,
                    start_ticks=start,
                    duration_ticks=duration,
                    velocity=velocity,
                    channel=channel,
                )
            )
    return events


def progression_to_midi(
    chords: Sequence[Chord[PitchLike]],
    tempo_bpm: int = 120,
    beats_per_chord: float = 4.0,
    octave: int = 4,
    velocity: int = DEFAULT_VELOCITY,
) -> MidiFile:
    """
    Render a chord sequence as a MidiFile.

    Example:
        key = Key.from_string("C Diatonic Major")
        progression_to_midi(key.progression("I-vi-IV-V")).save("axis.mid")
    """
    events = chords_to_events(
        chords,
        beats_per_chord=beats_per_chord,
        octave=octave,
        velocity=velocity,
    )
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))
