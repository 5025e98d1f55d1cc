"""Tile rotation helpers.

Borders are immutable tuples, so every helper returns a new sequence and a
tile's stored form is never disturbed by the search.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple


def rotate(borders: Sequence[int]) -> Tuple[int, ...]:
    """Turn a tile one step: edge ``i`` takes the number previously on edge ``i + 1``."""
    if not borders:
        return ()
    return tuple(borders[1:]) + (borders[0],)


def rotated(borders: Sequence[int], steps: int) -> Tuple[int, ...]:
    """Apply :func:`rotate` ``steps`` times."""
    if not borders:
        return ()
    offset = steps % len(borders)
    return tuple(borders[offset:]) + tuple(borders[:offset])


def orientations(borders: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """Yield the tile in each of its orientations, starting with the stored one."""
    for steps in range(len(borders)):
        yield rotated(borders, steps)


def is_rotation_of(candidate: Sequence[int], other: Sequence[int]) -> bool:
    """True if some orientation of ``candidate`` equals ``other`` edge for edge."""
    if len(candidate) != len(other):
        return False
    target = tuple(other)
    return any(orientation == target for orientation in orientations(candidate))
