"""Shared constants, slot enumeration and board topology for the hex puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


TILE_COUNT = 7
EDGE_COUNT = 6
MIN_BORDER = 1
MAX_BORDER = 6
# Largest border the digit-string encoding and the board drawing can show.
MAX_DIGIT_BORDER = 9


class Slot(str, Enum):
    """Board positions, declared in the order the solver visits them."""

    CENTER = "center"
    NORTH = "north"
    NORTHEAST = "northeast"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    NORTHWEST = "northwest"


VISIT_ORDER: Tuple[Slot, ...] = tuple(Slot)

# A border is addressed by the slot holding the tile and the edge index on it.
EdgeRef = Tuple[Slot, int]
EdgePair = Tuple[EdgeRef, EdgeRef]

# Edges are numbered clockwise from the top: 0 top, 1 upper right,
# 2 lower right, 3 bottom, 4 lower left, 5 upper left.
FIT_PAIRS: Dict[Slot, Tuple[EdgePair, ...]] = {
    Slot.CENTER: (),
    Slot.NORTH: (
        ((Slot.NORTH, 3), (Slot.CENTER, 0)),
    ),
    Slot.NORTHEAST: (
        ((Slot.CENTER, 1), (Slot.NORTHEAST, 4)),
        ((Slot.NORTH, 2), (Slot.NORTHEAST, 5)),
    ),
    Slot.SOUTHEAST: (
        ((Slot.SOUTHEAST, 5), (Slot.CENTER, 2)),
        ((Slot.NORTHEAST, 3), (Slot.SOUTHEAST, 0)),
    ),
    Slot.SOUTH: (
        ((Slot.SOUTH, 0), (Slot.CENTER, 3)),
        ((Slot.SOUTH, 1), (Slot.SOUTHEAST, 4)),
    ),
    Slot.SOUTHWEST: (
        ((Slot.SOUTHWEST, 1), (Slot.CENTER, 4)),
        ((Slot.SOUTHWEST, 2), (Slot.SOUTH, 5)),
    ),
    Slot.NORTHWEST: (
        ((Slot.NORTHWEST, 2), (Slot.CENTER, 5)),
        ((Slot.SOUTHWEST, 0), (Slot.NORTHWEST, 3)),
        ((Slot.NORTH, 4), (Slot.NORTHWEST, 1)),
    ),
}

# Borders that will later have to match the same edge-distinct tile, so they
# must differ from each other. Keyed by the slot that was just filled.
DUPLICATE_PAIRS: Dict[Slot, Tuple[EdgePair, ...]] = {
    Slot.CENTER: (),
    Slot.NORTH: (
        ((Slot.NORTH, 2), (Slot.CENTER, 1)),
        ((Slot.NORTH, 4), (Slot.CENTER, 5)),
    ),
    Slot.NORTHEAST: (
        ((Slot.CENTER, 2), (Slot.NORTHEAST, 3)),
    ),
    Slot.SOUTHEAST: (
        ((Slot.SOUTHEAST, 4), (Slot.CENTER, 3)),
    ),
    Slot.SOUTH: (
        ((Slot.SOUTH, 5), (Slot.CENTER, 4)),
    ),
    Slot.SOUTHWEST: (
        ((Slot.SOUTHWEST, 0), (Slot.CENTER, 5)),
        ((Slot.NORTH, 4), (Slot.CENTER, 5)),
        ((Slot.NORTH, 4), (Slot.SOUTHWEST, 0)),
    ),
    Slot.NORTHWEST: (),
}


@dataclass(frozen=True)
class HexTopology:
    """Visiting order plus the per-slot matching tables used by the solver."""

    visit_order: Tuple[Slot, ...] = VISIT_ORDER
    fit_pairs: Dict[Slot, Tuple[EdgePair, ...]] = field(default_factory=lambda: dict(FIT_PAIRS))
    duplicate_pairs: Dict[Slot, Tuple[EdgePair, ...]] = field(
        default_factory=lambda: dict(DUPLICATE_PAIRS)
    )
    edge_count: int = EDGE_COUNT

    @property
    def slot_count(self) -> int:
        return len(self.visit_order)

    def position(self, slot: Slot) -> int:
        return self.visit_order.index(slot)

    def adjacency_pairs(self) -> Tuple[EdgePair, ...]:
        """Every pair of touching edges on a full board."""
        pairs: Tuple[EdgePair, ...] = ()
        for slot in self.visit_order:
            pairs += self.fit_pairs.get(slot, ())
        return pairs


DEFAULT_TOPOLOGY = HexTopology()
