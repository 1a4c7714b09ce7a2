"""
Error kinds raised by the theory library.

Every error is a ValueError, so callers that only care about "bad input"
can catch that; callers that want to distinguish causes catch the
specific subclass. Nothing in the library retries or downgrades these.
"""


class TheoryError(ValueError):
    """Base class for all theory errors."""


class NotationParseError(TheoryError):
    """Text does not match the scientific, Helmholtz or pitch-class grammar."""


class UnknownChordNameError(TheoryError):
    """Name or abbreviation is not in the chord class registry."""


class UnmatchedIntervalSetError(TheoryError):
    """An interval set does not correspond to any registered chord class."""


class InvalidInversionError(TheoryError):
    """Inversion index or letter is out of range or unrecognized."""


class UnknownScaleNameError(TheoryError):
    """Name is not in the scale registry."""


class RomanNumeralParseError(TheoryError):
    """Roman numeral token is malformed, mixed case, or has an unknown modifier."""


class MissingTonicError(TheoryError):
    """Roman numeral resolution was attempted on a scale without a tonic."""


class RegistryConflictError(TheoryError):
    """Two distinct definitions claim the same registry key or fingerprint."""
