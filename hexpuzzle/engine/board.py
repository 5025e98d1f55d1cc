"""Board state: which tile sits in which slot while a search runs."""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from ..core.constants import DEFAULT_TOPOLOGY, HexTopology, Slot
from ..core.exceptions import SlotPlacementError
from ..core.models import Arrangement, Placement


class BoardState:
    """Mutable slot -> placement record owned by a single solver.

    Filled slots always form a prefix of the topology's visiting order.
    """

    def __init__(self, topology: HexTopology = DEFAULT_TOPOLOGY) -> None:
        self.topology = topology
        self.slots: Dict[Slot, Optional[Placement]] = {slot: None for slot in topology.visit_order}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, placement: Placement) -> None:
        slot = placement.slot
        expected = self.filled_count()
        if self.slots.get(slot) is None and self.topology.position(slot) != expected:
            raise SlotPlacementError(
                f"Slot {slot.value} is out of order; next free slot is "
                f"{self.topology.visit_order[expected].value}"
            )
        current = self.slots[slot]
        if self.is_on_board(placement.tile_id) and (current is None or current.tile_id != placement.tile_id):
            raise SlotPlacementError(f"Tile {placement.tile_id} is already on the board")
        self.slots[slot] = placement

    def clear(self, slot: Slot) -> None:
        if self.slots[slot] is None:
            return
        position = self.topology.position(slot)
        if position != self.filled_count() - 1:
            raise SlotPlacementError(f"Slot {slot.value} is not the last filled slot")
        self.slots[slot] = None

    def reset(self) -> None:
        for slot in self.slots:
            self.slots[slot] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def placement(self, slot: Slot) -> Optional[Placement]:
        return self.slots[slot]

    def border(self, slot: Slot, edge: int) -> int:
        placement = self.slots[slot]
        if placement is None:
            raise SlotPlacementError(f"Slot {slot.value} is empty")
        return placement.border(edge)

    def filled(self) -> List[Placement]:
        return [placement for placement in self.slots.values() if placement is not None]

    def filled_count(self) -> int:
        return sum(1 for placement in self.slots.values() if placement is not None)

    def is_empty(self) -> bool:
        return self.filled_count() == 0

    def is_full(self) -> bool:
        return self.filled_count() == self.topology.slot_count

    def occupied_tile_ids(self) -> Set[int]:
        return {placement.tile_id for placement in self.slots.values() if placement is not None}

    def is_on_board(self, tile_id: int) -> bool:
        return tile_id in self.occupied_tile_ids()

    def to_arrangement(self) -> Arrangement:
        return Arrangement(tuple(self.filled()))
