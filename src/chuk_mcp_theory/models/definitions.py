"""
Definition models - the YAML schema for chord classes and scales.

These are the validated records the registries are built from. They are
data only; registries turn them into ChordClass and Scale value objects.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_theory.constants import SEMITONES_PER_OCTAVE


class ChordClassDefinition(BaseModel):
    """
    A chord class as written in a chord library file.

    Example (YAML):
        - name: Dominant 7th
          abbrs: ["7", dom7]
          intervals: [0, 4, 7, 10]
    """

    name: str = Field(..., min_length=1, description="Full (unabbreviated) chord class name")
    short_name: str | None = Field(
        None, description="Display name; derived from the full name when omitted"
    )
    abbrs: list[str] = Field(..., min_length=1, description="Abbreviations, preferred first")
    intervals: list[int] = Field(..., min_length=1, description="Semitones from the root")

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def _starts_at_root(cls, value: list[int]) -> list[int]:
        if value[0] != 0:
            raise ValueError(f"First interval must be 0 (the root), got {value[0]}")
        reduced = [semitones % SEMITONES_PER_OCTAVE for semitones in value]
        if len(set(reduced)) != len(reduced):
            raise ValueError(f"Intervals repeat a pitch class: {value}")
        return value


class ScaleDefinition(BaseModel):
    """
    A scale as written in a scale library file.

    Example (YAML):
        - name: Natural Minor
          parent: Diatonic Major
          pitch_classes: [0, 2, 3, 5, 7, 8, 10]
    """

    name: str = Field(..., min_length=1, description="Scale name")
    pitch_classes: list[int] = Field(..., min_length=1, description="Offsets from the tonic")
    parent: str | None = Field(None, description="Name of an earlier scale this derives from")
    modes: list[str] = Field(default_factory=list, description="Mode names, one per degree")

    model_config = {"frozen": True}

    @field_validator("pitch_classes")
    @classmethod
    def _ascending_from_zero(cls, value: list[int]) -> list[int]:
        if value[0] != 0:
            raise ValueError(f"First pitch class must be 0, got {value[0]}")
        if any(b <= a for a, b in zip(value, value[1:], strict=False)):
            raise ValueError(f"Pitch classes must strictly ascend: {value}")
        if value[-1] >= SEMITONES_PER_OCTAVE:
            raise ValueError(f"Pitch classes must be below 12: {value}")
        return value

    @model_validator(mode="after")
    def _one_mode_per_degree(self) -> ScaleDefinition:
        if self.modes and len(self.modes) != len(self.pitch_classes):
            raise ValueError(
                f"Scale '{self.name}' has {len(self.pitch_classes)} degrees "
                f"but {len(self.modes)} mode names"
            )
        return self


class ChordLibrary(BaseModel):
    """Top level of a chord library file."""

    schema_version: str = Field("chords/v1", alias="schema", description="Schema version")
    chords: list[ChordClassDefinition] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class ScaleLibrary(BaseModel):
    """Top level of a scale library file."""

    schema_version: str = Field("scales/v1", alias="schema", description="Schema version")
    scales: list[ScaleDefinition] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
