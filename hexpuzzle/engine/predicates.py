"""Fit and pruning tests evaluated against the tiles currently on the board.

Each test looks only at the slot that was just filled and the tables held by
the board's :class:`HexTopology`. The two pruning tests rely on every tile
carrying six different border numbers, which generated tiles always do; the
solver leaves them out for any tile set where some tile repeats a number.
"""

from __future__ import annotations

from ..core.constants import EdgePair, Slot
from .board import BoardState


def _matches(board: BoardState, pair: EdgePair) -> bool:
    (slot_a, edge_a), (slot_b, edge_b) = pair
    return board.border(slot_a, edge_a) == board.border(slot_b, edge_b)


def does_not_fit(board: BoardState, slot: Slot) -> bool:
    """True if the tile in ``slot`` disagrees with any neighbor already placed."""
    pairs = board.topology.fit_pairs.get(slot, ())
    return not all(_matches(board, pair) for pair in pairs)


def can_short_circuit(board: BoardState, slot: Slot) -> bool:
    """True if no further rotation of the tile in ``slot`` can ever fit.

    With distinct borders only one orientation matches a given neighbor edge,
    so when one of the first two required pairs matches and the other does
    not, every other orientation breaks the matching pair.
    """
    pairs = board.topology.fit_pairs.get(slot, ())
    if len(pairs) < 2:
        return False
    return _matches(board, pairs[0]) != _matches(board, pairs[1])


def no_duplicates(board: BoardState, slot: Slot) -> bool:
    """False if filling ``slot`` leaves two borders that a later tile must both equal."""
    pairs = board.topology.duplicate_pairs.get(slot, ())
    return not any(_matches(board, pair) for pair in pairs)
