"""
Roman numeral resolver - key-relative chord references.

A token like "V", "vi", "vii°", "♭VII", "V7a" names a chord by scale degree:
- Upper case numerals are major, lower case are minor
- A suffix (+, °, 7, ø7, ...) picks a specific chord class instead
- A leading ♭ (or b) lowers the degree by a semitone
- A trailing a, c or d selects the first, second or third inversion

Resolution needs a Key, since the degree has to land on a real note.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chuk_mcp_theory.constants import ROMAN_NUMERAL_MODIFIERS, ROMAN_NUMERALS, ErrorMessages
from chuk_mcp_theory.core.chord import Chord, ChordClass
from chuk_mcp_theory.core.pitch import Interval, PitchLike
from chuk_mcp_theory.errors import MissingTonicError, RomanNumeralParseError

if TYPE_CHECKING:
    from chuk_mcp_theory.core.scale import Key, Scale
    from chuk_mcp_theory.registry.chords import ChordRegistry

_ROMAN_NUMERAL_RE = re.compile(r"^([♭b]?)([iI]+[vV]?|[vV][iI]*)(.*?)([acd]?)$")

# Splits a progression on whitespace, hyphens, and "+" signs that sit
# directly before the next numeral ("I+IV"); "I+ IV" keeps the modifier.
_PROGRESSION_SEPARATOR_RE = re.compile(r"[\s\-]+|\+(?=[♭b]?[iIvV])")


@dataclass(frozen=True)
class RomanNumeral:
    """
    A parsed roman numeral token, independent of any key.

    degree is 1-7 and chord_class_name is the registry key the numeral
    maps to (from its case, or from its modifier).
    """

    degree: int
    numeral: str
    chord_class_name: str
    modifier: str = ""
    flat: bool = False
    inversion: str = ""

    @classmethod
    def parse(cls, token: str) -> RomanNumeral:
        """
        Parse a roman numeral token.

        Raises:
            RomanNumeralParseError: If the token does not match the grammar,
                mixes upper and lower case in the numeral, or carries an
                unknown modifier
        """
        match = _ROMAN_NUMERAL_RE.match(token)
        if not match:
            raise RomanNumeralParseError(ErrorMessages.NOT_ROMAN_NUMERAL.format(name=token))
        accidental, numeral, modifier, inversion = match.groups()

        if numeral.upper() not in ROMAN_NUMERALS:
            raise RomanNumeralParseError(ErrorMessages.NOT_ROMAN_NUMERAL.format(name=token))
        degree = ROMAN_NUMERALS.index(numeral.upper()) + 1

        if numeral == numeral.upper():
            chord_class_name = "Major"
        elif numeral == numeral.lower():
            chord_class_name = "Minor"
        else:
            raise RomanNumeralParseError(ErrorMessages.MIXED_CASE_NUMERAL.format(numeral=numeral))

        if modifier:
            if modifier not in ROMAN_NUMERAL_MODIFIERS:
                raise RomanNumeralParseError(
                    ErrorMessages.UNKNOWN_MODIFIER.format(modifier=modifier, name=token)
                )
            chord_class_name = ROMAN_NUMERAL_MODIFIERS[modifier]

        return cls(degree, numeral, chord_class_name, modifier, bool(accidental), inversion)

    def resolve(
        self,
        key: Key[PitchLike] | Scale,
        registry: ChordRegistry | None = None,
    ) -> Chord[PitchLike]:
        """
        Resolve this numeral to a concrete chord in a key.

        Raises:
            MissingTonicError: If given a Scale with no tonic
            RomanNumeralParseError: If the degree is beyond the scale length
        """
        from chuk_mcp_theory.core.scale import Key

        if not isinstance(key, Key):
            raise MissingTonicError(ErrorMessages.MISSING_TONIC.format(name=str(self)))

        if self.degree > len(key.notes):
            raise RomanNumeralParseError(
                ErrorMessages.DEGREE_OUT_OF_RANGE.format(name=str(self), key=key.name)
            )
        root = key.notes[self.degree - 1]
        if self.flat:
            root = root.transpose_by(-Interval.MINOR_SECOND).respell(prefer_flats=True)

        chord = ChordClass.from_string(self.chord_class_name, registry).at(root)
        if self.inversion:
            chord = chord.invert(self.inversion)
        return chord

    def __str__(self) -> str:
        flat = "♭" if self.flat else ""
        return f"{flat}{self.numeral}{self.modifier}{self.inversion}"


def chord_from_roman_numeral(
    token: str,
    key: Key[PitchLike] | Scale,
    registry: ChordRegistry | None = None,
) -> Chord[PitchLike]:
    """
    Resolve a roman numeral token against a key.

    The token is parsed before the key is checked, so a malformed token
    reports a parse error even when the key has no tonic.
    """
    return RomanNumeral.parse(token).resolve(key, registry)


def split_progression(text: str) -> list[str]:
    """Split "I-IV-V", "I IV V" or "I+IV+V" into numeral tokens."""
    return [token for token in _PROGRESSION_SEPARATOR_RE.split(text.strip()) if token]
