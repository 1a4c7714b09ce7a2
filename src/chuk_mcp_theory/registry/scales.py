"""
Scale Registry - named scales.

Scales are loaded from YAML library files. A scale may name an earlier
scale as its parent (Natural Minor -> Diatonic Major); modes are built by
the Scale itself and are reached through their parent, not registered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import cache
from pathlib import Path
from types import MappingProxyType

import yaml

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.scale import Scale
from chuk_mcp_theory.errors import RegistryConflictError, UnknownScaleNameError
from chuk_mcp_theory.models.definitions import ScaleDefinition, ScaleLibrary

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"
SCALE_LIBRARY_FILE = LIBRARY_PATH / "scales.yaml"


def load_scale_definitions(path: Path) -> list[ScaleDefinition]:
    """
    Load and validate the scales in a YAML library file.

    Raises:
        pydantic.ValidationError: If a record is malformed
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    library = ScaleLibrary.model_validate(data)
    logger.debug(f"Loaded {len(library.scales)} scale definitions from {path}")
    return library.scales


class ScaleRegistry:
    """
    Immutable lookup of scales by name.

    Two different scales under one name raise RegistryConflictError.
    """

    def __init__(self, scales: Iterable[Scale] = ()):
        by_name: dict[str, Scale] = {}
        for scale in scales:
            existing = by_name.get(scale.name)
            if existing is not None and existing != scale:
                raise RegistryConflictError(
                    ErrorMessages.KEY_CONFLICT.format(
                        key=scale.name, first=existing.pitch_classes, second=scale.pitch_classes
                    )
                )
            by_name.setdefault(scale.name, scale)
        self._by_name = MappingProxyType(by_name)

    @classmethod
    def from_definitions(cls, definitions: Iterable[ScaleDefinition]) -> ScaleRegistry:
        """
        Build scales in order, resolving each parent by name.

        Raises:
            UnknownScaleNameError: If a parent is not defined earlier
        """
        built: dict[str, Scale] = {}
        scales: list[Scale] = []
        for definition in definitions:
            parent = None
            if definition.parent is not None:
                parent = built.get(definition.parent)
                if parent is None:
                    raise UnknownScaleNameError(
                        ErrorMessages.UNKNOWN_PARENT.format(
                            name=definition.name, parent=definition.parent
                        )
                    )
            scale = Scale(
                definition.name,
                tuple(definition.pitch_classes),
                parent=parent,
                mode_names=definition.modes,
            )
            built.setdefault(scale.name, scale)
            scales.append(scale)
        return cls(scales)

    @classmethod
    def from_yaml(cls, *paths: Path) -> ScaleRegistry:
        """Build a registry from one or more YAML library files, in order."""
        definitions: list[ScaleDefinition] = []
        for path in paths:
            definitions.extend(load_scale_definitions(path))
        registry = cls.from_definitions(definitions)
        logger.debug(f"Scale registry ready: {len(registry)} scales")
        return registry

    def get(self, name: str) -> Scale:
        """
        Get a scale by name.

        Raises:
            UnknownScaleNameError: If no scale has this name
        """
        scale = self._by_name.get(name)
        if scale is None:
            raise UnknownScaleNameError(ErrorMessages.UNKNOWN_SCALE.format(name=name))
        return scale

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __iter__(self) -> Iterator[Scale]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"ScaleRegistry({len(self)} scales)"


@cache
def default_scale_registry() -> ScaleRegistry:
    """The registry of built-in scales, loaded on first use."""
    return ScaleRegistry.from_yaml(SCALE_LIBRARY_FILE)
