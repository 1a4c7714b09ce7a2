"""
Tests for scales and keys.

Tests cover:
- Scale lookup and mode derivation
- Key parsing and notes
- Diatonic chords of a key
"""

import dataclasses

import pytest

from chuk_mcp_theory.core import Interval, Key, Pitch, PitchClass, Scale
from chuk_mcp_theory.core.utils import rotate, rotate_pitch_classes
from chuk_mcp_theory.errors import (
    NotationParseError,
    UnknownScaleNameError,
    UnmatchedIntervalSetError,
)
from chuk_mcp_theory.registry import ScaleRegistry


class TestScale:
    """Tests for Scale."""

    def test_diatonic_major(self) -> None:
        """Diatonic Major has the major pitch classes and seven modes."""
        scale = Scale.from_string("Diatonic Major")
        assert scale.pitch_classes == (0, 2, 4, 5, 7, 9, 11)
        assert len(scale.modes) == 7
        assert [m.name for m in scale.modes][:2] == ["Ionian", "Dorian"]

    def test_mode_count(self, scale_registry: ScaleRegistry) -> None:
        """A scale with named modes has one mode per pitch class."""
        for scale in scale_registry:
            if not scale.modes:
                continue
            assert len(scale.modes) == len(scale.pitch_classes)
            for mode in scale.modes:
                assert len(mode.pitch_classes) == len(scale.pitch_classes)
                assert mode.pitch_classes[0] == 0
                assert list(mode.pitch_classes) == sorted(mode.pitch_classes)
                assert mode.parent is scale

    def test_no_mode_names_no_modes(self) -> None:
        """Scales listed without mode names have no modes."""
        assert Scale.from_string("Blues").modes == ()

    def test_mode_lookup(self) -> None:
        """Modes are rotations re-based on their first degree."""
        major = Scale.from_string("Diatonic Major")
        assert major.mode("Ionian").pitch_classes == major.pitch_classes
        assert major.mode("Dorian").pitch_classes == (0, 2, 3, 5, 7, 9, 10)
        aeolian = major.mode("Aeolian")
        assert aeolian.pitch_classes == Scale.from_string("Natural Minor").pitch_classes

    def test_unknown_mode(self) -> None:
        """Unknown mode names raise UnknownScaleNameError."""
        with pytest.raises(UnknownScaleNameError):
            Scale.from_string("Diatonic Major").mode("Hypodorian")

    def test_unknown_scale(self) -> None:
        """Unknown scale names raise UnknownScaleNameError."""
        with pytest.raises(UnknownScaleNameError):
            Scale.from_string("Hyper Lydian")

    def test_intervals(self) -> None:
        """Intervals are measured from the tonic."""
        scale = Scale.from_string("Whole Tone")
        assert scale.intervals[:3] == (Interval(0), Interval(2), Interval(4))
        assert len(scale) == 6

    def test_immutable(self) -> None:
        """Scales cannot be modified after construction."""
        scale = Scale.from_string("Blues")
        with pytest.raises(dataclasses.FrozenInstanceError):
            scale.name = "Greens"  # type: ignore[misc]


class TestRotation:
    """Tests for the rotation helpers."""

    def test_rotate_returns_new_tuple(self) -> None:
        """Rotation never modifies its input."""
        items = [1, 2, 3]
        assert rotate(items, 1) == (2, 3, 1)
        assert items == [1, 2, 3]
        assert rotate(items, 3) == (1, 2, 3)
        assert rotate((), 2) == ()

    def test_rotate_pitch_classes(self) -> None:
        """Rotated pitch classes are re-based on zero."""
        assert rotate_pitch_classes((0, 2, 4, 5, 7, 9, 11), 1) == (0, 2, 3, 5, 7, 9, 10)


class TestKey:
    """Tests for Key."""

    def test_from_string(self) -> None:
        """A key name is a tonic followed by a scale name."""
        key = Key.from_string("E Diatonic Major")
        assert key.scale.name == "Diatonic Major"
        assert key.tonic == PitchClass(4)
        assert [str(n) for n in key.notes] == ["E", "F♯", "G♯", "A", "B", "C♯", "D♯"]
        assert str(key) == "E Diatonic Major"

    def test_default_scale(self) -> None:
        """A bare tonic means Diatonic Major."""
        assert Key.from_string("E").scale.name == "Diatonic Major"

    def test_pitch_tonic(self) -> None:
        """A tonic with an octave gives concrete pitches."""
        key = Key.from_string("A3 Natural Minor")
        assert key.tonic == Pitch(57)
        assert [int(n) for n in key.notes] == [57, 59, 60, 62, 64, 65, 67]

    def test_scale_at(self) -> None:
        """Scale.at binds a tonic."""
        key = Scale.from_string("Blues").at("A")
        assert [str(n) for n in key.notes] == ["A", "C", "D", "D♯", "E", "G"]
        assert key.pitch_classes == (0, 3, 5, 6, 7, 10)

    def test_errors(self) -> None:
        """Bad tonics and unknown scales are rejected."""
        with pytest.raises(NotationParseError):
            Key.from_string("Q Diatonic Major")
        with pytest.raises(UnknownScaleNameError):
            Key.from_string("E Hyper Lydian")


class TestKeyChords:
    """Tests for diatonic chords."""

    def test_e_major_triads(self) -> None:
        """E major triads, in degree order."""
        chords = Key.from_string("E Diatonic Major").chords()
        assert [c.name for c in chords] == [
            "E Major",
            "F♯ Minor",
            "G♯ Minor",
            "A Major",
            "B Major",
            "C♯ Minor",
            "D♯ Dim",
        ]

    def test_c_major_sevenths(self) -> None:
        """Seventh chords stack a fourth third."""
        chords = Key.from_string("C Diatonic Major").chords(sevenths=True)
        assert [c.name for c in chords] == [
            "C Maj 7th",
            "D Min 7th",
            "E Min 7th",
            "F Maj 7th",
            "G Dom 7th",
            "A Min 7th",
            "B Min 7th b5",
        ]

    def test_harmonic_minor_triads(self) -> None:
        """Harmonic minor has an augmented third degree."""
        chords = Key.from_string("C Harmonic Minor").chords()
        assert [c.chord_class.full_name for c in chords] == [
            "Minor",
            "Diminished",
            "Augmented",
            "Minor",
            "Major",
            "Major",
            "Diminished",
        ]

    def test_short_scale_wraps(self) -> None:
        """Degrees past the end of a short scale wrap around."""
        chords = Key.from_string("C Whole Tone").chords(sevenths=True)
        assert len(chords) == 6
        assert all(c.chord_class.full_name == "Augmented" for c in chords)

    def test_unrecognized_stack(self) -> None:
        """Stacking thirds in a pentatonic scale gives no known chord."""
        with pytest.raises(UnmatchedIntervalSetError):
            Key.from_string("C Major Pentatonic").chords()

    def test_pitch_tonic_chords(self) -> None:
        """Pitch-rooted keys give pitch-rooted chords."""
        chords = Key.from_string("C4").chords()
        assert chords[4].name == "G4 Major"
        assert chords[4].midi_numbers() == [67, 71, 74]
