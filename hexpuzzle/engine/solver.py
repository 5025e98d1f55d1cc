"""Backtracking solver for the seven-tile hex puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from ..core.constants import DEFAULT_TOPOLOGY, HexTopology, Slot
from ..core.models import Arrangement, Placement, Tile, TileSet, check_tile_set
from ..utils.logger import get_logger
from .board import BoardState
from .predicates import can_short_circuit, does_not_fit, no_duplicates
from .rotation import rotated

LOGGER = get_logger(__name__)

StepObserver = Callable[[BoardState], None]


@dataclass
class SolveStats:
    placements: int = 0
    rotations: int = 0
    short_circuits: int = 0
    duplicate_rejections: int = 0


class HexSolver:
    """Depth-first search over slots in visiting order.

    Every free tile is tried in every slot, rotated until it fits its placed
    neighbors. Tile sets with a repeated border on some tile are searched
    without the short circuit and duplicate tests. A found arrangement is
    returned up the recursion by value and the board is always left empty
    once :meth:`solve` returns.
    """

    def __init__(
        self,
        topology: HexTopology = DEFAULT_TOPOLOGY,
        observer: Optional[StepObserver] = None,
    ) -> None:
        self.topology = topology
        self.observer = observer
        self.board = BoardState(topology)
        self.stats = SolveStats()
        self.last_arrangement: Optional[Arrangement] = None
        self.pruning = True

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def solve(self, tiles: TileSet) -> Optional[Arrangement]:
        """Return a valid arrangement of ``tiles`` or ``None`` if there is none.

        Raises :class:`InvalidPuzzleError` when ``tiles`` is not a complete
        instance for the topology.
        """
        check_tile_set(tiles, tile_count=self.topology.slot_count)
        self.board.reset()
        self.stats = SolveStats()
        # The short circuit and duplicate tests assume six different numbers per tile.
        self.pruning = all(tile.has_distinct_borders() for tile in tiles.values())
        if not self.pruning:
            LOGGER.debug("Repeated borders on a tile; searching every orientation without pruning")
        try:
            arrangement = self._search(tiles, 0)
        finally:
            self.board.reset()
        self.last_arrangement = arrangement
        LOGGER.debug(
            "Search %s after %d placements (%d rotations, %d short circuits, %d duplicate rejections)",
            "solved" if arrangement else "exhausted",
            self.stats.placements,
            self.stats.rotations,
            self.stats.short_circuits,
            self.stats.duplicate_rejections,
        )
        return arrangement

    def is_solvable(self, tiles: TileSet) -> bool:
        return self.solve(tiles) is not None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _search(self, tiles: TileSet, position: int) -> Optional[Arrangement]:
        slot = self.topology.visit_order[position]
        is_last = position == self.topology.slot_count - 1

        for tile_id in sorted(tiles):
            if self.board.is_on_board(tile_id):
                continue
            try:
                for _ in self._fitting_rotations(tiles[tile_id], position):
                    if self.pruning and not no_duplicates(self.board, slot):
                        self.stats.duplicate_rejections += 1
                        continue
                    if is_last:
                        return self.board.to_arrangement()
                    arrangement = self._search(tiles, position + 1)
                    if arrangement is not None:
                        return arrangement
            finally:
                self.board.clear(slot)
        return None

    def _fitting_rotations(self, tile: Tile, position: int) -> Iterator[int]:
        """Put ``tile`` in the slot at ``position`` and yield each rotation that fits.

        With pruning on, at most one rotation can match the first neighbor
        edge, so the first fit is the only one and the short circuit may stop
        the turning early. Without pruning every distinct orientation is
        tried. The center stays at rotation 0: turning the whole board maps
        any solution onto one with an unturned center.
        """
        slot = self.topology.visit_order[position]
        if self.pruning:
            rotation = self._place_fitting(tile, slot)
            if rotation is not None:
                yield rotation
            return

        limit = 1 if position == 0 else self.topology.edge_count
        seen = set()
        for rotation in range(limit):
            borders = rotated(tile.borders, rotation)
            if borders in seen:
                continue
            seen.add(borders)
            if rotation > 0:
                self.stats.rotations += 1
            self._put(tile, slot, rotation)
            if not does_not_fit(self.board, slot):
                yield rotation

    def _place_fitting(self, tile: Tile, slot: Slot) -> Optional[int]:
        """Put ``tile`` in ``slot`` and turn it until it fits; None if it never can."""
        rotation = 0
        self._put(tile, slot, rotation)
        while does_not_fit(self.board, slot):
            if can_short_circuit(self.board, slot):
                self.stats.short_circuits += 1
                return None
            rotation += 1
            if rotation == self.topology.edge_count:
                return None
            self.stats.rotations += 1
            self._put(tile, slot, rotation)
        return rotation

    def _put(self, tile: Tile, slot: Slot, rotation: int) -> None:
        if rotation == 0:
            self.stats.placements += 1
        self.board.place(Placement(slot, tile.id, rotation, rotated(tile.borders, rotation)))
        if self.observer is not None:
            self.observer(self.board)


def solve(tiles: TileSet, topology: HexTopology = DEFAULT_TOPOLOGY) -> Optional[Arrangement]:
    return HexSolver(topology).solve(tiles)


def is_solvable(tiles: TileSet, topology: HexTopology = DEFAULT_TOPOLOGY) -> bool:
    """True if the seven tiles admit an arrangement with every touching edge equal."""
    return HexSolver(topology).is_solvable(tiles)
