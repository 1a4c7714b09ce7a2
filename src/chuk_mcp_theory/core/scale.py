"""
Scale primitives - Scale and Key.

A Scale is a named sequence of pitch-class offsets from an unspecified
tonic ("Diatonic Major" = 0 2 4 5 7 9 11). Its modes are the same
sequence started on each degree. A Key is a scale placed on a tonic,
which gives concrete notes, diatonic chords and roman numeral resolution.

Following common usage, Key here also covers what theory would call the
mode of the scale: the notes are ordered from the tonic.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING, Generic

from chuk_mcp_theory.constants import DEFAULT_SCALE_NAME, ErrorMessages
from chuk_mcp_theory.core.chord import Chord
from chuk_mcp_theory.core.notation import ROOT_PATTERN
from chuk_mcp_theory.core.pitch import Interval, P, PitchLike, as_pitch_like
from chuk_mcp_theory.core.roman import chord_from_roman_numeral, split_progression
from chuk_mcp_theory.core.utils import rotate, rotate_pitch_classes
from chuk_mcp_theory.errors import NotationParseError, UnknownScaleNameError

if TYPE_CHECKING:
    from chuk_mcp_theory.registry.chords import ChordRegistry
    from chuk_mcp_theory.registry.scales import ScaleRegistry

_KEY_NAME_RE = re.compile(rf"^({ROOT_PATTERN})\s*(.*)$")

# Scale degrees stacked in thirds, as indexes into a degree-rotated scale
_TRIAD_DEGREES = (0, 2, 4)
_SEVENTH_DEGREES = (0, 2, 4, 6)


def _scale_registry(registry: ScaleRegistry | None) -> ScaleRegistry:
    if registry is not None:
        return registry
    from chuk_mcp_theory.registry.scales import default_scale_registry

    return default_scale_registry()


@dataclass(frozen=True)
class Scale:
    """
    A scale defined by its pitch classes from the tonic.

    The pitch classes ascend from 0. For a minor scale the parent is the
    relative major; for a mode it is the scale the mode was derived from.
    Modes are built at construction, one per supplied mode name.

    Immutable and hashable (by name and pitch classes).
    """

    name: str
    pitch_classes: tuple[int, ...]
    parent: Scale | None = field(default=None, compare=False, repr=False)
    mode_names: InitVar[Sequence[str]] = ()
    modes: tuple[Scale, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self, mode_names: Sequence[str]) -> None:
        object.__setattr__(self, "pitch_classes", tuple(self.pitch_classes))
        modes = tuple(
            Scale(mode_name, rotate_pitch_classes(self.pitch_classes, i), parent=self)
            for i, mode_name in enumerate(mode_names)
        )
        object.__setattr__(self, "modes", modes)

    @classmethod
    def from_string(cls, name: str, registry: ScaleRegistry | None = None) -> Scale:
        """
        Look up a scale by name, e.g. 'Diatonic Major' or 'Blues'.

        Raises:
            UnknownScaleNameError: If no scale has this name
        """
        return _scale_registry(registry).get(name)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals from the tonic to each degree."""
        return tuple(Interval.from_semitones(pc) for pc in self.pitch_classes)

    def mode(self, name: str) -> Scale:
        """
        Get a derived mode by name.

        Raises:
            UnknownScaleNameError: If no mode of this scale has the name
        """
        for mode in self.modes:
            if mode.name == name:
                return mode
        raise UnknownScaleNameError(ErrorMessages.UNKNOWN_SCALE.format(name=name))

    def at(self, tonic: P | str) -> Key[P]:
        """
        Place this scale on a tonic.

        A string tonic is parsed the way chord roots are: "E" gives a
        PitchClass tonic, "E4" or "e'" a Pitch tonic.
        """
        return Key(self, as_pitch_like(tonic))

    def __len__(self) -> int:
        return len(self.pitch_classes)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Key(Generic[P]):
    """
    A scale on a concrete tonic.

    Examples:
        Scale.from_string("Diatonic Major").at("E")  = E major (pitch classes)
        Key.from_string("A3 Natural Minor")           = A minor from A3
    """

    scale: Scale
    tonic: P
    notes: tuple[P, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        notes = tuple(self.tonic.transpose_by(interval) for interval in self.scale.intervals)
        object.__setattr__(self, "notes", notes)

    @classmethod
    def from_string(cls, name: str, registry: ScaleRegistry | None = None) -> Key[PitchLike]:
        """
        Parse a key name like 'E Diatonic Major', 'A3 Natural Minor' or 'E'.

        The scale name defaults to 'Diatonic Major'.

        Raises:
            NotationParseError: If the text does not start with a tonic
            UnknownScaleNameError: If the scale name is unknown
        """
        match = _KEY_NAME_RE.match(name.strip())
        if not match:
            raise NotationParseError(ErrorMessages.NOT_KEY_NAME.format(name=name))
        tonic_name, scale_name = match.groups()
        scale = Scale.from_string(scale_name or DEFAULT_SCALE_NAME, registry)
        return scale.at(tonic_name)

    @property
    def name(self) -> str:
        return f"{self.tonic} {self.scale.name}"

    @property
    def pitch_classes(self) -> tuple[int, ...]:
        return self.scale.pitch_classes

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self.scale.intervals

    def chords(
        self,
        sevenths: bool = False,
        registry: ChordRegistry | None = None,
    ) -> list[Chord[P]]:
        """
        The diatonic chord on each degree, stacked in thirds.

        For degree i the scale is rotated to start there (without
        re-basing to 0) and the chord tones are the tonic transposed by
        entries 0, 2, 4 (and 6 with sevenths), wrapping around scales with
        fewer than seven notes.

        Raises:
            UnmatchedIntervalSetError: If a stacked chord is not a known
                chord class (e.g. thirds stacked in a pentatonic scale)
        """
        degrees = _SEVENTH_DEGREES if sevenths else _TRIAD_DEGREES
        pitch_classes = self.scale.pitch_classes
        chords = []
        for i in range(len(pitch_classes)):
            view = rotate(pitch_classes, i)
            chord_pitches = [
                self.tonic.transpose_by(Interval.from_semitones(view[degree % len(view)]))
                for degree in degrees
            ]
            chords.append(Chord.from_pitches(chord_pitches, registry))
        return chords

    def from_roman_numeral(
        self,
        token: str,
        registry: ChordRegistry | None = None,
    ) -> Chord[P]:
        """Resolve a roman numeral like 'V', 'vi', '♭VII' or 'V7a' in this key."""
        return chord_from_roman_numeral(token, self, registry)

    def progression(
        self,
        text: str,
        registry: ChordRegistry | None = None,
    ) -> list[Chord[P]]:
        """
        Resolve a progression like 'I-vi-IV-V', 'ii V I' or 'I+IV+V'.

        Tokens are separated by whitespace, hyphens, or a '+' placed
        directly before the next numeral.
        """
        return [self.from_roman_numeral(token, registry) for token in split_progression(text)]

    def __str__(self) -> str:
        return self.name
