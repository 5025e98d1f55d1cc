"""Independent CP-SAT formulation of the hex puzzle using OR-Tools.

Used to cross-check the backtracking solver: it shares only the adjacency
table with it, none of the pruning.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..core.constants import DEFAULT_TOPOLOGY, HexTopology, Slot
from ..core.exceptions import OracleError
from ..core.models import Arrangement, Placement, TileSet, check_tile_set
from ..utils.logger import get_logger
from .rotation import rotated

LOGGER = get_logger(__name__)


def solve_with_cp_sat(
    tiles: TileSet,
    topology: HexTopology = DEFAULT_TOPOLOGY,
    timeout: float = 30.0,
) -> Optional[Arrangement]:
    """Find an arrangement via CP-SAT.

    Args:
        tiles: Complete tile set for the topology.
        topology: Slots and the touching-edge table.
        timeout: Solver time limit in seconds.

    Returns:
        An arrangement, or None if the model is infeasible.

    Raises:
        OracleError: if CP-SAT stops before proving either outcome.
    """
    check_tile_set(tiles, tile_count=topology.slot_count)
    model = cp_model.CpModel()
    slots = topology.visit_order
    rotations = range(topology.edge_count)

    # ------------------------------------------------------------------
    # Step 1: one (slot, rotation) per tile, one (tile, rotation) per slot
    # ------------------------------------------------------------------
    choice: Dict[Tuple[int, Slot, int], cp_model.IntVar] = {}
    for tile_id in tiles:
        for slot in slots:
            for rotation in rotations:
                choice[(tile_id, slot, rotation)] = model.new_bool_var(
                    f"x_{tile_id}_{slot.value}_{rotation}"
                )

    for slot in slots:
        model.add_exactly_one([choice[(tile_id, slot, r)] for tile_id in tiles for r in rotations])
    for tile_id in tiles:
        model.add_exactly_one([choice[(tile_id, slot, r)] for slot in slots for r in rotations])

    # ------------------------------------------------------------------
    # Step 2: border value shown on every edge of every slot
    # ------------------------------------------------------------------
    values = [value for tile in tiles.values() for value in tile.borders]
    low, high = min(values), max(values)
    oriented = {
        (tile_id, rotation): rotated(tile.borders, rotation)
        for tile_id, tile in tiles.items()
        for rotation in rotations
    }

    border_vars: Dict[Tuple[Slot, int], cp_model.IntVar] = {}
    for slot in slots:
        for edge in rotations:
            var = model.new_int_var(low, high, f"b_{slot.value}_{edge}")
            model.add(
                var
                == sum(
                    choice[(tile_id, slot, rotation)] * oriented[(tile_id, rotation)][edge]
                    for tile_id in tiles
                    for rotation in rotations
                )
            )
            border_vars[(slot, edge)] = var

    # ------------------------------------------------------------------
    # Step 3: touching edges carry equal numbers
    # ------------------------------------------------------------------
    for (slot_a, edge_a), (slot_b, edge_b) in topology.adjacency_pairs():
        model.add(border_vars[(slot_a, edge_a)] == border_vars[(slot_b, edge_b)])

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 4

    status = solver.solve(model)

    if status == cp_model.INFEASIBLE:
        LOGGER.debug("CP-SAT: tile set is infeasible (%.2fs)", solver.wall_time)
        return None
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        raise OracleError(f"CP-SAT ended without an answer (status={solver.status_name(status)})")

    LOGGER.debug("CP-SAT: arrangement found in %.2fs", solver.wall_time)

    placements: List[Placement] = []
    for slot in slots:
        for tile_id in tiles:
            for rotation in rotations:
                if solver.value(choice[(tile_id, slot, rotation)]):
                    placements.append(
                        Placement(slot, tile_id, rotation, oriented[(tile_id, rotation)])
                    )
    return Arrangement(tuple(placements))


def is_solvable_cp_sat(tiles: TileSet, topology: HexTopology = DEFAULT_TOPOLOGY) -> bool:
    return solve_with_cp_sat(tiles, topology) is not None


def cross_check(tiles: TileSet, solver_says_solvable: bool, topology: HexTopology = DEFAULT_TOPOLOGY) -> bool:
    """True when CP-SAT agrees with the backtracking solver's verdict."""
    oracle_says_solvable = is_solvable_cp_sat(tiles, topology)
    if oracle_says_solvable != solver_says_solvable:
        LOGGER.warning(
            "Solver and CP-SAT disagree: solver=%s, cp-sat=%s",
            solver_says_solvable,
            oracle_says_solvable,
        )
        return False
    return True
