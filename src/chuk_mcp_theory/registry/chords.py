"""
Chord Registry - named chord classes and the interval matcher.

The registry maps every name, full name and abbreviation of a chord class,
plus its interval fingerprint, to that class. It is built once (from the
packaged YAML library, project files, or ChordClass objects in tests) and
is read-only afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import cache
from pathlib import Path
from types import MappingProxyType

import yaml

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.chord import ChordClass, abbreviate, fingerprint
from chuk_mcp_theory.core.pitch import Interval
from chuk_mcp_theory.errors import (
    RegistryConflictError,
    UnknownChordNameError,
    UnmatchedIntervalSetError,
)
from chuk_mcp_theory.models.definitions import ChordClassDefinition, ChordLibrary

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"
CHORD_LIBRARY_FILE = LIBRARY_PATH / "chords.yaml"


def load_chord_definitions(path: Path) -> list[ChordClassDefinition]:
    """
    Load and validate the chord classes in a YAML library file.

    Raises:
        pydantic.ValidationError: If a record is malformed
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    library = ChordLibrary.model_validate(data)
    logger.debug(f"Loaded {len(library.chords)} chord definitions from {path}")
    return library.chords


def chord_class_from_definition(definition: ChordClassDefinition) -> ChordClass:
    """Create a ChordClass from a validated definition."""
    return ChordClass(
        name=definition.short_name or abbreviate(definition.name),
        full_name=definition.name,
        abbrs=tuple(definition.abbrs),
        intervals=tuple(Interval.from_semitones(s) for s in definition.intervals),
    )


class ChordRegistry:
    """
    Immutable lookup of chord classes by name and by interval set.

    Registration is strict: a key claimed by two different chord classes,
    or two classes with the same fingerprint, raises RegistryConflictError.
    Listing a key twice for the same class is harmless.
    """

    def __init__(self, chord_classes: Iterable[ChordClass] = ()):
        """
        Build the registry.

        Args:
            chord_classes: Chord classes in registration (display) order

        Raises:
            RegistryConflictError: On any key or fingerprint collision
        """
        by_name: dict[str, ChordClass] = {}
        by_fingerprint: dict[str, ChordClass] = {}
        ordered: list[ChordClass] = []

        for chord_class in chord_classes:
            for key in (chord_class.name, chord_class.full_name, *chord_class.abbrs):
                if not key:
                    continue  # the empty abbreviation of Major is display-only
                existing = by_name.get(key)
                if existing is not None and existing != chord_class:
                    raise RegistryConflictError(
                        ErrorMessages.KEY_CONFLICT.format(
                            key=key, first=existing.full_name, second=chord_class.full_name
                        )
                    )
                by_name[key] = chord_class

            key = chord_class.fingerprint
            existing = by_fingerprint.get(key)
            if existing is not None and existing != chord_class:
                raise RegistryConflictError(
                    ErrorMessages.FINGERPRINT_CONFLICT.format(
                        first=existing.full_name, second=chord_class.full_name, fingerprint=key
                    )
                )
            if existing is None:
                ordered.append(chord_class)
            by_fingerprint[key] = chord_class

        self._by_name = MappingProxyType(by_name)
        self._by_fingerprint = MappingProxyType(by_fingerprint)
        self._chord_classes = tuple(ordered)

    @classmethod
    def from_definitions(cls, definitions: Iterable[ChordClassDefinition]) -> ChordRegistry:
        return cls(chord_class_from_definition(d) for d in definitions)

    @classmethod
    def from_yaml(cls, *paths: Path) -> ChordRegistry:
        """
        Build a registry from one or more YAML library files, in order.

        Later files extend earlier ones; they cannot redefine them.
        """
        definitions: list[ChordClassDefinition] = []
        for path in paths:
            definitions.extend(load_chord_definitions(path))
        registry = cls.from_definitions(definitions)
        logger.debug(f"Chord registry ready: {len(registry)} chord classes")
        return registry

    def get(self, name: str) -> ChordClass:
        """
        Get a chord class by name, full name or abbreviation.

        Raises:
            UnknownChordNameError: If nothing is registered under the name
        """
        chord_class = self._by_name.get(name) if name else None
        if chord_class is None:
            raise UnknownChordNameError(ErrorMessages.UNKNOWN_CHORD.format(name=name))
        return chord_class

    def match(self, intervals: Iterable[Interval | int]) -> ChordClass:
        """
        Get the chord class whose interval set is exactly this one.

        Raises:
            UnmatchedIntervalSetError: If no chord class matches
        """
        key = fingerprint(intervals)
        chord_class = self._by_fingerprint.get(key)
        if chord_class is None:
            raise UnmatchedIntervalSetError(
                ErrorMessages.UNMATCHED_INTERVALS.format(intervals=f"[{key}]")
            )
        return chord_class

    def keys(self) -> list[str]:
        """Every name and abbreviation the registry answers to."""
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __iter__(self) -> Iterator[ChordClass]:
        return iter(self._chord_classes)

    def __len__(self) -> int:
        return len(self._chord_classes)

    def __repr__(self) -> str:
        return f"ChordRegistry({len(self)} chord classes)"


@cache
def default_chord_registry() -> ChordRegistry:
    """The registry of built-in chord classes, loaded on first use."""
    return ChordRegistry.from_yaml(CHORD_LIBRARY_FILE)
