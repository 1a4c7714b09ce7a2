"""
Chord primitives - ChordClass and Chord.

A ChordClass is a named list of intervals from an implicit root
("Major" = 0, 4, 7). A Chord is a ChordClass placed on a concrete root,
optionally inverted.

Recognition runs the other way: the intervals from a root to a set of
pitches are reduced to a fingerprint and looked up in the chord registry.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic

from chuk_mcp_theory.constants import (
    DEFAULT_CHORD_CLASS_NAME,
    INVERSION_LETTERS,
    ErrorMessages,
)
from chuk_mcp_theory.core.notation import ROOT_PATTERN, normalize
from chuk_mcp_theory.core.pitch import Interval, P, Pitch, PitchLike, as_pitch_like
from chuk_mcp_theory.core.utils import rotate
from chuk_mcp_theory.errors import (
    InvalidInversionError,
    NotationParseError,
    UnmatchedIntervalSetError,
)

if TYPE_CHECKING:
    from chuk_mcp_theory.registry.chords import ChordRegistry

_CHORD_NAME_RE = re.compile(rf"^({ROOT_PATTERN})\s*(.*)$")


def fingerprint(intervals: Iterable[Interval | int]) -> str:
    """
    Canonical lookup key for an interval set.

    Intervals are reduced mod 12, de-duplicated and sorted, so
    [0, 16, 7, 4] and [0, 4, 7] share the key "0,4,7".
    """
    semitones = {
        normalize(i.semitones if isinstance(i, Interval) else i) for i in intervals
    }
    return ",".join(str(s) for s in sorted(semitones))


def abbreviate(full_name: str) -> str:
    """
    Short display name for a chord class.

    "Major 7th" -> "Maj 7th", "Diminished" -> "Dim", "Dominant 7th" -> "Dom 7th".
    A trailing "Major" or "Minor" is kept whole ("Major" stays "Major").
    """
    name = re.sub(r"Major(?!$)", "Maj", full_name, count=1)
    name = re.sub(r"Minor(?!$)", "Min", name, count=1)
    return name.replace("Dominant", "Dom", 1).replace("Diminished", "Dim", 1)


def _chord_registry(registry: ChordRegistry | None) -> ChordRegistry:
    if registry is not None:
        return registry
    from chuk_mcp_theory.registry.chords import default_chord_registry

    return default_chord_registry()


@dataclass(frozen=True)
class ChordClass:
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked, and the first is
    always unison. For example, a major triad is root + M3 + P5.

    Immutable and hashable.
    """

    name: str
    full_name: str
    abbrs: tuple[str, ...]
    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "abbrs", tuple(self.abbrs))
        object.__setattr__(self, "intervals", tuple(self.intervals))

    @classmethod
    def from_string(cls, name: str, registry: ChordRegistry | None = None) -> ChordClass:
        """
        Look up a chord class by name, full name or abbreviation.

        Raises:
            UnknownChordNameError: If nothing is registered under the name
        """
        return _chord_registry(registry).get(name)

    @classmethod
    def from_intervals(
        cls,
        intervals: Iterable[Interval | int],
        registry: ChordRegistry | None = None,
    ) -> ChordClass:
        """
        Find the chord class with exactly this interval set.

        Intervals may be in any order and any octave; matching is exact-set,
        never subset or superset.

        Raises:
            UnmatchedIntervalSetError: If no registered class matches
        """
        return _chord_registry(registry).match(intervals)

    @property
    def abbr(self) -> str:
        """The preferred abbreviation."""
        return self.abbrs[0]

    @property
    def semitones(self) -> tuple[int, ...]:
        return tuple(i.semitones for i in self.intervals)

    @property
    def fingerprint(self) -> str:
        return fingerprint(self.intervals)

    def at(self, root: P, inversion: int = 0) -> Chord[P]:
        """Place this chord class on a root."""
        return Chord(self, root, inversion)

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Chord(Generic[P]):
    """
    A concrete chord: a chord class on a root, with an inversion.

    pitches[i] is the root transposed by intervals[i]. Inversion k rotates
    both lists left by k, so pitches[0] is always the bass.
    """

    chord_class: ChordClass
    root: P
    inversion: int = 0
    intervals: tuple[Interval, ...] = field(init=False, repr=False, compare=False)
    pitches: tuple[P, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        size = len(self.chord_class.intervals)
        if not isinstance(self.inversion, int) or not 0 <= self.inversion < size:
            raise InvalidInversionError(
                ErrorMessages.INVALID_INVERSION.format(
                    inversion=self.inversion,
                    chord=f"{self.root} {self.chord_class.name}",
                )
            )
        pitches = tuple(self.root.transpose_by(i) for i in self.chord_class.intervals)
        object.__setattr__(self, "intervals", rotate(self.chord_class.intervals, self.inversion))
        object.__setattr__(self, "pitches", rotate(pitches, self.inversion))

    @classmethod
    def from_pitches(
        cls,
        pitches: Sequence[P],
        registry: ChordRegistry | None = None,
    ) -> Chord[P]:
        """
        Recognize a set of pitches as a named chord. The first pitch is the root.

        Raises:
            UnmatchedIntervalSetError: If the intervals match no chord class
        """
        if not pitches:
            raise UnmatchedIntervalSetError(
                ErrorMessages.UNMATCHED_INTERVALS.format(intervals="()")
            )
        root = pitches[0]
        intervals = [Interval.between(root, pitch) for pitch in pitches]
        return ChordClass.from_intervals(intervals, registry).at(root)

    @classmethod
    def from_string(
        cls,
        name: str,
        registry: ChordRegistry | None = None,
    ) -> Chord[PitchLike] | ChordClass:
        """
        Parse a chord name like "E Major", "F♯m", "E4 dom7" or "Major".

        Returns a Chord when the text names a root, or the bare ChordClass
        when the whole text is a chord class name. A root with octave
        information ("E4", "e'") gives a Pitch root; a bare letter gives a
        PitchClass root. A missing class name means "Major".

        Raises:
            NotationParseError: If the text does not start with a root
            UnknownChordNameError: If the chord class part is unknown
        """
        chords = _chord_registry(registry)
        text = name.strip()
        if text in chords:
            return chords.get(text)

        match = _CHORD_NAME_RE.match(text)
        if not match:
            raise NotationParseError(ErrorMessages.NOT_CHORD_NAME.format(name=name))
        root_name, class_name = match.groups()
        chord_class = chords.get(class_name or DEFAULT_CHORD_CLASS_NAME)
        return chord_class.at(as_pitch_like(root_name))

    @property
    def name(self) -> str:
        return f"{self.root} {self.chord_class.name}"

    @property
    def full_name(self) -> str:
        return f"{self.root} {self.chord_class.full_name}"

    @property
    def abbrs(self) -> tuple[str, ...]:
        return tuple(f"{self.root} {abbr}".rstrip() for abbr in self.chord_class.abbrs)

    @property
    def abbr(self) -> str:
        """The preferred abbreviation, e.g. "E m" or "E" for E major."""
        return self.abbrs[0]

    @property
    def interval_classes(self) -> tuple[int, ...]:
        """Intervals reduced into [0, 12), in inversion order."""
        return tuple(i.pitch_class for i in self.intervals)

    def invert(self, inversion: int | str) -> Chord[P]:
        """
        Return this chord in another inversion.

        Args:
            inversion: An index, reduced modulo the chord size (so inverting
                a triad by 3 gives root position), or one of the letters
                'a', 'c', 'd' for inversions 1, 2, 3

        Raises:
            InvalidInversionError: For an unknown letter, or a letter beyond
                the chord's size
        """
        if isinstance(inversion, str):
            if inversion not in INVERSION_LETTERS:
                raise InvalidInversionError(
                    ErrorMessages.INVALID_INVERSION.format(inversion=inversion, chord=self.name)
                )
            index = INVERSION_LETTERS.index(inversion) + 1
        else:
            index = inversion % len(self.chord_class.intervals)
        return Chord(self.chord_class, self.root, index)

    def midi_numbers(self, octave: int = 4) -> list[int]:
        """
        MIDI note numbers in close voicing, each above the one before.

        Pitch-class roots are placed in the given octave; Pitch roots keep
        their own octave for the bass.
        """
        notes: list[int] = []
        for pitch in self.pitches:
            if isinstance(pitch, Pitch):
                midi = pitch.midi_number
            else:
                midi = pitch.as_pitch_class().to_midi(octave)
            while notes and midi <= notes[-1]:
                midi += 12
            notes.append(midi)
        return notes

    def __str__(self) -> str:
        return self.name
