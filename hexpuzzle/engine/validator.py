"""Deterministic rule validation for finished arrangements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import DEFAULT_TOPOLOGY, HexTopology
from ..core.exceptions import ValidationError
from ..core.models import Arrangement, TileSet
from ..utils.logger import get_logger
from .rotation import rotated


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class ArrangementValidator:
    """Checks an arrangement against the tile set it claims to solve."""

    def __init__(self, topology: HexTopology = DEFAULT_TOPOLOGY) -> None:
        self.topology = topology

    def validate(self, arrangement: Arrangement, tiles: TileSet) -> ValidationResult:
        try:
            self._check_slots(arrangement)
            self._check_tile_usage(arrangement, tiles)
            self._check_orientations(arrangement, tiles)
            self._check_edges(arrangement)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_slots(self, arrangement: Arrangement) -> None:
        slots = tuple(placement.slot for placement in arrangement)
        if slots != self.topology.visit_order:
            raise ValidationError(
                f"Arrangement covers {[slot.value for slot in slots]}, expected every slot in visiting order"
            )

    def _check_tile_usage(self, arrangement: Arrangement, tiles: TileSet) -> None:
        used = arrangement.tile_ids()
        if sorted(used) != sorted(tiles):
            raise ValidationError(f"Tiles used {sorted(used)} do not match tile set {sorted(tiles)}")

    def _check_orientations(self, arrangement: Arrangement, tiles: TileSet) -> None:
        for placement in arrangement:
            expected = rotated(tiles[placement.tile_id].borders, placement.rotation)
            if placement.borders != expected:
                raise ValidationError(
                    f"Tile {placement.tile_id} in {placement.slot.value} shows {placement.borders}, "
                    f"rotation {placement.rotation} gives {expected}"
                )

    def _check_edges(self, arrangement: Arrangement) -> None:
        for (slot_a, edge_a), (slot_b, edge_b) in self.topology.adjacency_pairs():
            placement_a = arrangement.placement(slot_a)
            placement_b = arrangement.placement(slot_b)
            if placement_a is None or placement_b is None:
                raise ValidationError(f"Edge {slot_a.value}[{edge_a}] or {slot_b.value}[{edge_b}] has no tile")
            if placement_a.border(edge_a) != placement_b.border(edge_b):
                raise ValidationError(
                    f"Edge mismatch: {slot_a.value}[{edge_a}]={placement_a.border(edge_a)} "
                    f"vs {slot_b.value}[{edge_b}]={placement_b.border(edge_b)}"
                )
