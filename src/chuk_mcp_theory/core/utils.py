"""Sequence helpers shared by chords and scales."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from chuk_mcp_theory.core.notation import normalize

T = TypeVar("T")


def rotate(items: Sequence[T], k: int) -> tuple[T, ...]:
    """Rotate left by k positions, returning a new tuple."""
    if not items:
        return ()
    k %= len(items)
    return tuple(items[k:]) + tuple(items[:k])


def rotate_pitch_classes(pitch_classes: Sequence[int], k: int) -> tuple[int, ...]:
    """
    Rotate a pitch-class sequence and re-base it on its new first entry.

    rotate_pitch_classes((0, 2, 4, 5, 7, 9, 11), 1) == (0, 2, 3, 5, 7, 9, 10)
    """
    rotated = rotate(pitch_classes, k)
    return tuple(normalize(pc - rotated[0]) for pc in rotated)
