"""
Tests for roman numeral parsing and resolution.
"""

import pytest

from chuk_mcp_theory.core import (
    Key,
    Pitch,
    RomanNumeral,
    Scale,
    chord_from_roman_numeral,
    split_progression,
)
from chuk_mcp_theory.errors import (
    InvalidInversionError,
    MissingTonicError,
    RomanNumeralParseError,
)


@pytest.fixture
def c_major() -> Key:
    return Key.from_string("C Diatonic Major")


class TestRomanNumeralParse:
    """Tests for parsing numeral tokens."""

    def test_case_selects_quality(self) -> None:
        """Upper case is major, lower case is minor."""
        five = RomanNumeral.parse("V")
        assert five.degree == 5
        assert five.chord_class_name == "Major"
        six = RomanNumeral.parse("vi")
        assert six.degree == 6
        assert six.chord_class_name == "Minor"

    def test_modifier(self) -> None:
        """A modifier replaces the case-derived chord class."""
        seven = RomanNumeral.parse("vii°")
        assert seven.degree == 7
        assert seven.chord_class_name == "dim"
        assert RomanNumeral.parse("V7").chord_class_name == "dom7"
        assert RomanNumeral.parse("iiø7").chord_class_name == "ø7"

    def test_flat_and_inversion(self) -> None:
        """A leading flat and a trailing inversion letter are captured."""
        numeral = RomanNumeral.parse("bVII7a")
        assert numeral.flat is True
        assert numeral.degree == 7
        assert numeral.modifier == "7"
        assert numeral.inversion == "a"
        assert str(numeral) == "♭VII7a"

    def test_mixed_case(self) -> None:
        """Mixed-case numerals are rejected."""
        with pytest.raises(RomanNumeralParseError):
            RomanNumeral.parse("Iv")

    def test_not_a_numeral(self) -> None:
        """Tokens outside the numeral grammar are rejected."""
        for token in ("X", "IIII", "", "C"):
            with pytest.raises(RomanNumeralParseError):
                RomanNumeral.parse(token)

    def test_unknown_modifier(self) -> None:
        """Unknown suffixes are rejected."""
        with pytest.raises(RomanNumeralParseError):
            RomanNumeral.parse("V#")


class TestRomanNumeralResolve:
    """Tests for resolving numerals in a key."""

    def test_dominant_in_e_major(self) -> None:
        """V in E major is B major."""
        key = Key.from_string("E Diatonic Major")
        assert key.from_roman_numeral("V").name == "B Major"

    def test_mixed_case_fails(self) -> None:
        """Resolving a mixed-case numeral fails."""
        key = Key.from_string("E Diatonic Major")
        with pytest.raises(RomanNumeralParseError):
            key.from_roman_numeral("Iv")

    def test_qualities(self, c_major: Key) -> None:
        """Case and modifiers pick the chord class."""
        resolved = {
            token: c_major.from_roman_numeral(token).name
            for token in ("I", "vi", "vii°", "V7", "I+", "I6", "IΔ7", "iiø7", "iiø")
        }
        assert resolved == {
            "I": "C Major",
            "vi": "A Minor",
            "vii°": "B Dim",
            "V7": "G Dom 7th",
            "I+": "C Augmented",
            "I6": "C 6th",
            "IΔ7": "C Maj 7th",
            "iiø7": "D Min 7th b5",
            "iiø": "D Min 7th b5",
        }

    def test_flat_lowers_degree(self, c_major: Key) -> None:
        """A leading flat lowers the root a semitone, spelled with flats."""
        assert c_major.from_roman_numeral("bVII").name == "B♭ Major"
        assert c_major.from_roman_numeral("♭III").name == "E♭ Major"
        assert c_major.from_roman_numeral("♭vi").name == "A♭ Minor"

    def test_inversion(self, c_major: Key) -> None:
        """Inversion letters apply to the resolved chord."""
        chord = c_major.from_roman_numeral("V7a")
        assert chord.inversion == 1
        assert [str(p) for p in chord.pitches] == ["B", "D", "F", "G"]

    def test_inversion_out_of_range(self, c_major: Key) -> None:
        """A triad has no third inversion."""
        with pytest.raises(InvalidInversionError):
            c_major.from_roman_numeral("Vd")

    def test_requires_tonic(self) -> None:
        """A scale without a tonic cannot resolve numerals."""
        scale = Scale.from_string("Diatonic Major")
        with pytest.raises(MissingTonicError):
            chord_from_roman_numeral("V", scale)

    def test_parse_checked_before_tonic(self) -> None:
        """A malformed token reports a parse error even without a tonic."""
        scale = Scale.from_string("Diatonic Major")
        with pytest.raises(RomanNumeralParseError):
            chord_from_roman_numeral("Iv", scale)

    def test_degree_beyond_scale(self) -> None:
        """Degrees past the end of a short scale are rejected."""
        key = Key.from_string("C Major Pentatonic")
        with pytest.raises(RomanNumeralParseError):
            key.from_roman_numeral("VI")

    def test_pitch_tonic(self) -> None:
        """Pitch-rooted keys resolve to pitch-rooted chords."""
        key = Key.from_string("C4")
        assert key.from_roman_numeral("V").root == Pitch(67)
        assert str(key.from_roman_numeral("bVII").root) == "B♭4"


class TestProgression:
    """Tests for progressions."""

    def test_hyphenated(self, c_major: Key) -> None:
        """Hyphens separate numerals."""
        chords = c_major.progression("I-vi-IV-V")
        assert [c.name for c in chords] == ["C Major", "A Minor", "F Major", "G Major"]

    def test_spaces(self, c_major: Key) -> None:
        """Whitespace separates numerals."""
        chords = c_major.progression("ii V7 I")
        assert [c.name for c in chords] == ["D Minor", "G Dom 7th", "C Major"]

    def test_plus_joins_numerals(self, c_major: Key) -> None:
        """A plus directly before a numeral separates; otherwise it is a modifier."""
        assert [c.name for c in c_major.progression("I+IV+V")] == [
            "C Major",
            "F Major",
            "G Major",
        ]
        assert [c.name for c in c_major.progression("I+ IV")] == ["C Augmented", "F Major"]

    def test_split(self) -> None:
        """Surrounding whitespace and repeated separators are ignored."""
        assert split_progression("  I - IV  ") == ["I", "IV"]
        assert split_progression("I+bVII+IV") == ["I", "bVII", "IV"]
        assert split_progression("") == []
