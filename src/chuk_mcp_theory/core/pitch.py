"""
Pitch primitives - Interval, PitchClass, Pitch.

These are the foundational types for all pitch-related operations.
Interval is a signed distance in semitones.
PitchClass is a pitch modulo the octave (0-11), with an optional spelling.
Pitch is an absolute MIDI-style pitch (C4 = 60), with an optional name.

Pitch and PitchClass both satisfy the PitchLike protocol, so chords and
keys can be rooted on either.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import ClassVar, Protocol, Self, TypeVar, runtime_checkable

from chuk_mcp_theory.constants import INTERVAL_NAMES, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_theory.core.notation import (
    canonical_spelling,
    names_pitch,
    normalize,
    parse_pitch,
    parse_pitch_class,
    spell_pitch_class,
    to_scientific,
)
from chuk_mcp_theory.errors import NotationParseError

_INTERVALS_BY_NAME: dict[str, int] = {name: semitones for semitones, name in INTERVAL_NAMES.items()}


@runtime_checkable
class PitchLike(Protocol):
    """Anything a chord or key can be rooted on."""

    def transpose_by(self, interval: Interval) -> Self: ...

    def as_pitch(self) -> Pitch: ...

    def as_pitch_class(self) -> PitchClass: ...

    def respell(self, prefer_flats: bool = False) -> Self: ...

    def __str__(self) -> str: ...


P = TypeVar("P", bound=PitchLike)


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    This is the fundamental building block - scales are pitch-class offsets,
    chords are interval lists, and a chord is recognized by its intervals.
    Negative and compound (> 11) intervals are allowed; nothing here
    reduces modulo the octave.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """Create an interval from a semitone count. Always succeeds."""
        return cls(semitones)

    @classmethod
    def from_string(cls, shorthand: str) -> Interval:
        """
        Parse a shorthand interval name like 'P1', 'M3', 'm7' or 'TT'.

        Raises:
            NotationParseError: If the shorthand is not a known interval name
        """
        semitones = _INTERVALS_BY_NAME.get(shorthand.strip())
        if semitones is None:
            raise NotationParseError(ErrorMessages.NOT_INTERVAL.format(name=shorthand))
        return cls(semitones)

    @classmethod
    def between(cls, a: PitchLike | int, b: PitchLike | int) -> Interval:
        """
        Signed interval from a to b.

        Two Pitches are compared by MIDI number. If either side is a
        PitchClass, both are reduced to pitch classes first, so the result
        is the plain difference of their numbers (it may be negative).
        """
        return cls(_numeric(b, a) - _numeric(a, b))

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def name(self) -> str | None:
        """Canonical shorthand (P1..P8), or None outside a single octave."""
        return INTERVAL_NAMES.get(self._semitones)

    @property
    def pitch_class(self) -> int:
        """This interval reduced into [0, 12)."""
        return normalize(self._semitones)

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(SEMITONES_PER_OCTAVE - (self._semitones % SEMITONES_PER_OCTAVE))

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Shorthand name where one exists, otherwise the semitone count."""
        return self.name or f"{self._semitones}st"


Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)


@dataclass(frozen=True)
class PitchClass:
    """
    A pitch modulo the octave, 0-11.

    Octave-independent - C4 and C5 both have PitchClass 0.
    Enharmonic spellings share the same value and compare equal
    (C♯ == D♭); the spelling is only kept for display.
    """

    semitones: int
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "semitones", normalize(self.semitones))
        if not self.name:
            object.__setattr__(self, "name", spell_pitch_class(self.semitones))

    @classmethod
    def from_semitones(cls, semitones: int) -> PitchClass:
        """Create a pitch class, normalizing into [0, 12)."""
        return cls(semitones)

    @classmethod
    def from_string(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'D♭'.

        The spelling is kept (with ASCII accidentals shown as glyphs), so
        PitchClass.from_string('Eb').name == 'E♭'.
        """
        name = name.strip()
        return cls(parse_pitch_class(name), canonical_spelling(name))

    @classmethod
    def from_midi(cls, midi_number: int) -> PitchClass:
        """Extract the pitch class from a MIDI note number."""
        return cls(midi_number)

    def transpose_by(self, interval: Interval) -> PitchClass:
        """Transpose by an interval; the result is spelled with sharps."""
        return PitchClass(self.semitones + interval.semitones)

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass(self.semitones + semitones)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the ascending interval from this pitch class to another (0-11)."""
        return Interval(normalize(other.semitones - self.semitones))

    def to_midi(self, octave: int = 4) -> int:
        """Convert to a MIDI note number. C4 = 60."""
        return self.semitones + (octave + 1) * SEMITONES_PER_OCTAVE

    def as_pitch(self, octave: int = 4) -> Pitch:
        """This pitch class in a concrete octave (default 4)."""
        return Pitch(self.to_midi(octave))

    def as_pitch_class(self) -> PitchClass:
        return self

    def spell(self, prefer_flats: bool = False) -> str:
        """Get the sharp or flat table name, ignoring the stored spelling."""
        return spell_pitch_class(self.semitones, prefer_flats)

    def respell(self, prefer_flats: bool = False) -> PitchClass:
        """Same pitch class, spelled from the sharp or flat table."""
        return PitchClass(self.semitones, self.spell(prefer_flats))

    def __int__(self) -> int:
        return self.semitones

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"PitchClass({self.semitones}, {self.name!r})"


@dataclass(frozen=True)
class Pitch:
    """
    An absolute pitch such as "E4" or "F♯5".

    Stored as a MIDI-style number (C4 = 60, C-1 = 0); negative numbers and
    numbers above 127 are allowed. The name defaults to scientific
    notation; a parsed pitch keeps the spelling it was parsed from.
    """

    midi_number: int
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", to_scientific(self.midi_number))

    @classmethod
    def from_midi_number(cls, midi_number: int) -> Pitch:
        return cls(midi_number)

    @classmethod
    def from_string(cls, name: str) -> Pitch:
        """
        Parse scientific ("E4") or Helmholtz ("e'") notation.

        A digit anywhere in the text selects scientific notation.

        Raises:
            NotationParseError: If the text matches neither grammar
        """
        name = name.strip()
        return cls(parse_pitch(name), canonical_spelling(name))

    @property
    def pitch_class(self) -> int:
        """Pitch class number, 0-11."""
        return normalize(self.midi_number)

    @property
    def octave(self) -> int:
        """Scientific octave number (C4 is in octave 4)."""
        return self.midi_number // SEMITONES_PER_OCTAVE - 1

    def transpose_by(self, interval: Interval) -> Pitch:
        """Transpose by an interval; the result is named in scientific notation."""
        return Pitch(self.midi_number + interval.semitones)

    def as_pitch(self) -> Pitch:
        return self

    def as_pitch_class(self) -> PitchClass:
        return PitchClass(self.midi_number)

    def respell(self, prefer_flats: bool = False) -> Pitch:
        """Same pitch, named in scientific notation with sharps or flats."""
        return Pitch(
            self.midi_number,
            f"{spell_pitch_class(self.midi_number, prefer_flats)}{self.octave}",
        )

    def __int__(self) -> int:
        return self.midi_number

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Pitch({self.midi_number}, {self.name!r})"


def as_pitch_like(value: PitchLike | str) -> PitchLike:
    """
    Coerce a root argument into a Pitch or PitchClass.

    Strings carrying octave information (a digit, comma or apostrophe)
    become Pitches; bare letter names become PitchClasses.
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    if names_pitch(value):
        return Pitch.from_string(value)
    return PitchClass.from_string(value)


def _numeric(value: PitchLike | int, other: PitchLike | int) -> int:
    """Number used by Interval.between for one side, given the other side."""
    if isinstance(value, int):
        return value
    if isinstance(value, Pitch) and not isinstance(other, PitchClass):
        return value.midi_number
    return value.as_pitch_class().semitones
