"""
Constants and name tables for the theory system.

No magic strings - note names, accidental glyphs, interval shorthands and
error message templates all live here.
"""

from typing import Final

# Pitch class display names, indexed by pitch class number
SHARP_NOTE_NAMES: Final[tuple[str, ...]] = (
    "C",
    "C♯",
    "D",
    "D♯",
    "E",
    "F",
    "F♯",
    "G",
    "G♯",
    "A",
    "A♯",
    "B",
)
FLAT_NOTE_NAMES: Final[tuple[str, ...]] = (
    "C",
    "D♭",
    "D",
    "E♭",
    "E",
    "F",
    "G♭",
    "G",
    "A♭",
    "A",
    "B♭",
    "B",
)

# Accidental glyph -> semitone offset
ACCIDENTAL_VALUES: Final[dict[str, int]] = {
    "#": 1,
    "♯": 1,
    "b": -1,
    "♭": -1,
    "𝄪": 2,
    "𝄫": -2,
}

# Regex character class matching any accidental glyph
ACCIDENTAL_CHARS: Final[str] = "#♯b♭𝄪𝄫"

# Base octave for lower-case Helmholtz letters (c -> 48, i.e. C3)
HELMHOLTZ_REFERENCE_OCTAVE: Final[int] = 4

SEMITONES_PER_OCTAVE: Final[int] = 12

# Interval shorthand by semitone count
INTERVAL_NAMES: Final[dict[int, str]] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
}

DEFAULT_CHORD_CLASS_NAME: Final[str] = "Major"
DEFAULT_SCALE_NAME: Final[str] = "Diatonic Major"

ROMAN_NUMERALS: Final[tuple[str, ...]] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Letters a, c, d select inversions 1, 2, 3 ("b" would read as a flat)
INVERSION_LETTERS: Final[tuple[str, ...]] = ("a", "c", "d")

# Roman numeral suffix -> chord class key
ROMAN_NUMERAL_MODIFIERS: Final[dict[str, str]] = {
    "+": "aug",
    "°": "dim",
    "6": "maj6",
    "7": "dom7",
    "+7": "+7",
    "°7": "°7",
    "ø": "ø",
    "ø7": "ø7",
    "Δ7": "maj7",
}


class ErrorMessages:
    """Standardized error messages."""

    NOT_SCIENTIFIC = "“{name}” is not in scientific notation"
    NOT_HELMHOLTZ = "“{name}” is not in Helmholtz notation"
    NOT_PITCH_CLASS = "“{name}” is not a pitch class name"
    NOT_INTERVAL = "“{name}” is not an interval name"
    NOT_CHORD_NAME = "“{name}” is not a chord name"
    NOT_KEY_NAME = "“{name}” is not a key name"
    UNKNOWN_CHORD = "Unknown chord name: “{name}”"
    UNMATCHED_INTERVALS = "No matching chord class for intervals {intervals}"
    INVALID_INVERSION = "Invalid inversion “{inversion}” for {chord}"
    UNKNOWN_SCALE = "No scale named “{name}”"
    NOT_ROMAN_NUMERAL = "“{name}” is not a chord roman numeral"
    MIXED_CASE_NUMERAL = "Roman numeral chords can't be mixed case in “{numeral}”"
    UNKNOWN_MODIFIER = "Unknown chord modifier “{modifier}” in “{name}”"
    MISSING_TONIC = "Resolving “{name}” requires a scale with a tonic"
    DEGREE_OUT_OF_RANGE = "Degree of “{name}” is beyond the notes of {key}"
    KEY_CONFLICT = "Registry key “{key}” claimed by both “{first}” and “{second}”"
    FINGERPRINT_CONFLICT = "Chord classes “{first}” and “{second}” share intervals {fingerprint}"
    UNKNOWN_PARENT = "Scale “{name}” names unknown parent “{parent}”"
