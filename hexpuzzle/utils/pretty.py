"""Pretty-print helpers for tile sets and hex boards."""

from __future__ import annotations

import string
import sys
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import EDGE_COUNT, Slot
from ..core.models import Placement, TileSet
from ..io.encoding import check_single_digits, encode_arrangement

if TYPE_CHECKING:
    from ..engine.board import BoardState
    from ..engine.generator import PuzzleResult


PLACEHOLDERS = string.ascii_lowercase + string.ascii_uppercase

# One hex per glyph. Digit ``d`` marks offset ``d`` of the slot's encoded
# block: 0 is the tile id, 1..6 are edges 0..5.
GLYPH: Tuple[str, ...] = (
    "  __1__  ",
    " /6   2\\ ",
    " \\5 0 3/ ",
    "  --4--  ",
)

# Top-left corner (row, column) of each slot's glyph on the canvas.
SLOT_ORIGINS: Dict[Slot, Tuple[int, int]] = {
    Slot.CENTER: (4, 10),
    Slot.NORTH: (0, 10),
    Slot.NORTHEAST: (2, 20),
    Slot.SOUTHEAST: (6, 20),
    Slot.SOUTH: (8, 10),
    Slot.SOUTHWEST: (6, 0),
    Slot.NORTHWEST: (2, 0),
}

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def build_board_template() -> List[str]:
    """Lay out every slot's glyph, with placeholder letters in place of digits."""
    block = 1 + EDGE_COUNT
    height = max(row for row, _ in SLOT_ORIGINS.values()) + len(GLYPH)
    width = max(col for _, col in SLOT_ORIGINS.values()) + len(GLYPH[0])
    canvas = [[" "] * width for _ in range(height)]

    for position, slot in enumerate(Slot):
        origin_row, origin_col = SLOT_ORIGINS[slot]
        for dr, glyph_line in enumerate(GLYPH):
            for dc, char in enumerate(glyph_line):
                if char.isdigit():
                    char = PLACEHOLDERS[position * block + int(char)]
                elif char == " ":
                    continue
                canvas[origin_row + dr][origin_col + dc] = char
    return ["".join(row).rstrip() for row in canvas]


BOARD_TEMPLATE: Tuple[str, ...] = tuple(build_board_template())


def fill_template_line(line: str, encoded: Sequence[int]) -> str:
    """Replace placeholder letters with encoded numbers; missing ones become blanks."""
    out: List[str] = []
    for char in line:
        if char in PLACEHOLDERS:
            index = PLACEHOLDERS.index(char)
            out.append(str(encoded[index]) if index < len(encoded) else " ")
        else:
            out.append(char)
    return "".join(out)


def format_board(placements: Iterable[Placement], template: Sequence[str] = BOARD_TEMPLATE) -> str:
    encoded = check_single_digits(encode_arrangement(placements))
    return "\n".join(fill_template_line(line, encoded).rstrip() for line in template)


def format_tile_set(tiles: TileSet) -> str:
    return "\n".join(
        f"{tile_id}: " + " ".join(str(value) for value in tiles[tile_id].borders)
        for tile_id in sorted(tiles)
    )


def print_puzzle_result(result: PuzzleResult, *, stream=None) -> None:
    """Print the solved board plus the generation summary."""

    stream = stream or sys.stdout
    print(format_board(result.arrangement), file=stream)
    print(file=stream)
    print(f"The program went through {result.attempts} possible sets of game pieces.", file=stream)
    print(f"Set number {result.attempts} is actually solvable.", file=stream)
    print("Here it is:", file=stream)
    print(format_tile_set(result.tiles), file=stream)
    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)


@dataclass
class RenderConfig:
    frame_time: float = 0.0
    clear_screen: bool = True


class FrameRenderer:
    """Solver observer that redraws the board after every step."""

    def __init__(self, config: Optional[RenderConfig] = None, stream=None, sleep=time.sleep) -> None:
        self.config = config or RenderConfig()
        self.stream = stream or sys.stdout
        self.sleep = sleep
        self.frames = 0

    def __call__(self, board: BoardState) -> None:
        if self.config.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        print(format_board(board.filled()), file=self.stream)
        self.stream.flush()
        self.frames += 1
        if self.config.frame_time > 0:
            self.sleep(self.config.frame_time)
