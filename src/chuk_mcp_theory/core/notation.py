"""
Notation codec - scientific and Helmholtz pitch notation.

Two grammars, chosen by whether the text contains a digit:
- Scientific: letter, accidentals, octave number ("E4", "B♭3", "C-1")
- Helmholtz: letter case picks the octave, commas lower it and
  apostrophes raise it ("C,", "c", "e'", "f♯''")

Everything here works on plain integers. The Pitch and PitchClass value
objects in pitch.py wrap these functions.
"""

from __future__ import annotations

import re

from chuk_mcp_theory.constants import (
    ACCIDENTAL_CHARS,
    ACCIDENTAL_VALUES,
    FLAT_NOTE_NAMES,
    HELMHOLTZ_REFERENCE_OCTAVE,
    SEMITONES_PER_OCTAVE,
    SHARP_NOTE_NAMES,
    ErrorMessages,
)
from chuk_mcp_theory.errors import NotationParseError

_SCIENTIFIC_RE = re.compile(rf"^([A-Ga-g])([{ACCIDENTAL_CHARS}]*)(-?\d+)$")
_HELMHOLTZ_RE = re.compile(rf"^([A-Ga-g])([{ACCIDENTAL_CHARS}]*)(,*)('*)$")
_PITCH_CLASS_RE = re.compile(rf"^([A-Ga-g])([{ACCIDENTAL_CHARS}]*)$")
_DIGIT_RE = re.compile(r"\d")

# Any spelling of a root: pitch class, scientific, or Helmholtz
ROOT_PATTERN = rf"[A-Ga-g][{ACCIDENTAL_CHARS}]*(?:-?\d+|,*'*)"


def normalize(pitch_class: int) -> int:
    """Reduce any integer into the range [0, 12)."""
    return pitch_class % SEMITONES_PER_OCTAVE


def accidental_value(accidentals: str) -> int:
    """Sum the semitone offsets of a run of accidental glyphs."""
    return sum(ACCIDENTAL_VALUES[c] for c in accidentals)


def accidental_string(semitones: int) -> str:
    """
    Render a semitone offset as accidental glyphs.

    Doubles are used where possible, with a single in front for odd counts:
    -2 -> "𝄫", 1 -> "♯", 3 -> "♯𝄪".
    """
    if semitones == 0:
        return ""
    single, double = ("♯", "𝄪") if semitones > 0 else ("♭", "𝄫")
    n = abs(semitones)
    return single * (n % 2) + double * (n // 2)


def letter_value(letter: str) -> int:
    """Pitch class of a natural letter name (case-insensitive)."""
    return SHARP_NOTE_NAMES.index(letter.upper())


def spell_pitch_class(pitch_class: int, prefer_flats: bool = False) -> str:
    """Get the display name of a pitch class number."""
    names = FLAT_NOTE_NAMES if prefer_flats else SHARP_NOTE_NAMES
    return names[normalize(pitch_class)]


def canonical_spelling(name: str) -> str:
    """
    Rewrite ASCII accidentals in a note name as glyphs.

    "Eb4" -> "E♭4", "f#''" -> "f♯''". Letter case, octave digits, commas
    and apostrophes are kept so the result parses to the same number.
    Text that is not a note name is returned unchanged.
    """
    match = re.match(rf"^([A-Ga-g])([{ACCIDENTAL_CHARS}]*)(.*)$", name)
    if not match:
        return name
    letter, accidentals, rest = match.groups()
    return letter + accidental_string(accidental_value(accidentals)) + rest


def parse_pitch_class(name: str, normal: bool = True) -> int:
    """
    Parse a pitch class name like "C", "F♯", "Bb" or "E𝄪".

    Args:
        name: Letter plus accidentals, no octave information
        normal: Reduce into [0, 12); pass False to keep the raw sum
            (needed before octave arithmetic, e.g. "B♯" -> 12)

    Returns:
        Pitch class number

    Raises:
        NotationParseError: If the name is not a pitch class name
    """
    match = _PITCH_CLASS_RE.match(name)
    if not match:
        raise NotationParseError(ErrorMessages.NOT_PITCH_CLASS.format(name=name))
    letter, accidentals = match.groups()
    pitch = letter_value(letter) + accidental_value(accidentals)
    return normalize(pitch) if normal else pitch


def parse_scientific(name: str) -> int:
    """
    Parse scientific pitch notation into a MIDI-style number (C4 = 60).

    Raises:
        NotationParseError: If the name is not in scientific notation
    """
    match = _SCIENTIFIC_RE.match(name)
    if not match:
        raise NotationParseError(ErrorMessages.NOT_SCIENTIFIC.format(name=name))
    letter, accidentals, octave = match.groups()
    return (
        letter_value(letter)
        + SEMITONES_PER_OCTAVE * (1 + int(octave))
        + accidental_value(accidentals)
    )


def parse_helmholtz(name: str) -> int:
    """
    Parse Helmholtz pitch notation into a MIDI-style number.

    Upper-case letters are one octave below lower case ("C" = C2,
    "c" = C3); each comma lowers and each apostrophe raises one octave.

    Raises:
        NotationParseError: If the name is not in Helmholtz notation
    """
    match = _HELMHOLTZ_RE.match(name)
    if not match:
        raise NotationParseError(ErrorMessages.NOT_HELMHOLTZ.format(name=name))
    letter, accidentals, commas, apostrophes = match.groups()
    pitch_class = parse_pitch_class(letter + accidentals, normal=False)
    octave = (
        HELMHOLTZ_REFERENCE_OCTAVE - int(letter.isupper()) - len(commas) + len(apostrophes)
    )
    return SEMITONES_PER_OCTAVE * octave + pitch_class


def parse_pitch(name: str) -> int:
    """Parse either notation; a digit in the text selects scientific."""
    if _DIGIT_RE.search(name):
        return parse_scientific(name)
    return parse_helmholtz(name)


def to_scientific(midi_number: int) -> str:
    """Print a MIDI-style number in scientific notation (sharp spelling)."""
    octave = midi_number // SEMITONES_PER_OCTAVE - 1
    return f"{spell_pitch_class(midi_number)}{octave}"


def names_pitch(name: str) -> bool:
    """True if a root spelling carries octave information (digits, commas, apostrophes)."""
    return bool(re.search(r"[\d,']", name))
