"""Data models supporting the hex puzzle solver and generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from .constants import EDGE_COUNT, TILE_COUNT, Slot
from .exceptions import InvalidPuzzleError


@dataclass(frozen=True)
class Tile:
    """A hexagonal piece: an id and its border numbers in edge order."""

    id: int
    borders: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.borders) != EDGE_COUNT:
            raise InvalidPuzzleError(
                f"Tile {self.id}: expected {EDGE_COUNT} borders, got {len(self.borders)}"
            )

    def has_distinct_borders(self) -> bool:
        return len(set(self.borders)) == len(self.borders)


TileSet = Dict[int, Tile]


def tile_set_from_rows(rows: Sequence[Sequence[int]]) -> TileSet:
    """Build a tile set from border rows; row ``i`` becomes tile ``i``."""
    return {index: Tile(index, tuple(int(value) for value in row)) for index, row in enumerate(rows)}


def check_tile_set(tiles: TileSet, tile_count: int = TILE_COUNT) -> None:
    """Raise :class:`InvalidPuzzleError` unless ``tiles`` is a complete puzzle instance."""
    if len(tiles) != tile_count:
        raise InvalidPuzzleError(f"Expected {tile_count} tiles, got {len(tiles)}")
    if sorted(tiles) != list(range(tile_count)):
        raise InvalidPuzzleError(f"Tile ids must be 0..{tile_count - 1}, got {sorted(tiles)}")
    for tile_id, tile in tiles.items():
        if tile.id != tile_id:
            raise InvalidPuzzleError(f"Tile stored under id {tile_id} reports id {tile.id}")


@dataclass(frozen=True)
class Placement:
    """A tile sitting in a slot, turned ``rotation`` steps from its stored form."""

    slot: Slot
    tile_id: int
    rotation: int
    borders: Tuple[int, ...]

    def border(self, edge: int) -> int:
        return self.borders[edge]


@dataclass(frozen=True)
class Arrangement:
    """Tiles placed on the board, in visiting order."""

    placements: Tuple[Placement, ...]

    def __iter__(self) -> Iterator[Placement]:
        return iter(self.placements)

    def __len__(self) -> int:
        return len(self.placements)

    def placement(self, slot: Slot) -> Optional[Placement]:
        for placement in self.placements:
            if placement.slot == slot:
                return placement
        return None

    def tile_ids(self) -> Tuple[int, ...]:
        return tuple(placement.tile_id for placement in self.placements)

    def to_jsonable(self) -> list:
        return [
            {
                "slot": placement.slot.value,
                "tile": placement.tile_id,
                "rotation": placement.rotation,
                "borders": list(placement.borders),
            }
            for placement in self.placements
        ]
