"""Flat encodings of arrangements and text parsing of tile sets."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..core.constants import EDGE_COUNT, MAX_DIGIT_BORDER, TILE_COUNT
from ..core.exceptions import InvalidPuzzleError
from ..core.models import Placement, TileSet, tile_set_from_rows


_GROUP_SPLIT_RE = re.compile(r"[\s;]+")


def encode_arrangement(placements: Iterable[Placement]) -> List[int]:
    """Tile id followed by its six current borders, for each filled slot in order.

    Accepts an :class:`Arrangement` or the filled prefix of a board.
    """
    encoded: List[int] = []
    for placement in placements:
        encoded.append(placement.tile_id)
        encoded.extend(placement.borders)
    return encoded


def check_single_digits(values: Iterable[int]) -> List[int]:
    """Return ``values`` as a list; raise if one of them is not a single digit."""
    values = list(values)
    wide = sorted({value for value in values if not 0 <= value <= MAX_DIGIT_BORDER})
    if wide:
        raise InvalidPuzzleError(f"Borders {wide} do not fit the one-digit-per-edge encoding")
    return values


def encode_arrangement_string(placements: Iterable[Placement]) -> str:
    return "".join(str(value) for value in check_single_digits(encode_arrangement(placements)))


def parse_tile_set(text: str) -> TileSet:
    """Parse seven tiles written as ``123456 234561 ...``.

    Groups are separated by whitespace or ``;``. Inside a group numbers are
    either comma separated (``1,2,3,4,5,6``) or one digit each; every border
    must be a single digit.
    """
    groups = [group for group in _GROUP_SPLIT_RE.split(text.strip()) if group]
    if len(groups) != TILE_COUNT:
        raise InvalidPuzzleError(f"Expected {TILE_COUNT} tiles, got {len(groups)} in {text!r}")

    rows: List[List[int]] = []
    for group in groups:
        parts = [part for part in group.split(",") if part] if "," in group else list(group)
        try:
            row = [int(part) for part in parts]
        except ValueError as exc:
            raise InvalidPuzzleError(f"Tile {group!r} contains a non-numeric border") from exc
        if len(row) != EDGE_COUNT:
            raise InvalidPuzzleError(f"Tile {group!r} has {len(row)} borders, expected {EDGE_COUNT}")
        rows.append(check_single_digits(row))
    return tile_set_from_rows(rows)


def format_tile_set_text(tiles: TileSet) -> str:
    """Inverse of :func:`parse_tile_set`."""
    return " ".join(
        "".join(str(value) for value in check_single_digits(tiles[tile_id].borders)) for tile_id in sorted(tiles)
    )
