"""Random tile-set generation.

Two layers:
  1. ``TileSetGenerator`` draws seven edge-distinct tiles, none of which is a
     rotation of another.
  2. ``PuzzleGenerator`` keeps drawing sets until the solver finds one that
     has an arrangement.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import EDGE_COUNT, MAX_BORDER, MAX_DIGIT_BORDER, MIN_BORDER, TILE_COUNT
from ..core.exceptions import GenerationError
from ..core.models import Arrangement, Tile, TileSet
from ..utils.logger import get_logger
from .rotation import is_rotation_of
from .solver import HexSolver


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    seed: Optional[int] = None
    min_border: int = MIN_BORDER
    max_border: int = MAX_BORDER
    max_tile_attempts: int = 10_000
    max_set_attempts: int = 10_000

    def validate(self) -> None:
        span = self.max_border - self.min_border + 1
        if span < EDGE_COUNT:
            raise GenerationError(
                f"Border range {self.min_border}..{self.max_border} has {max(span, 0)} values; "
                f"a tile needs {EDGE_COUNT} different ones"
            )
        if self.min_border < 0 or self.max_border > MAX_DIGIT_BORDER:
            raise GenerationError(
                f"Borders must stay within 0..{MAX_DIGIT_BORDER} to be written one digit per edge"
            )
        if self.max_tile_attempts < TILE_COUNT or self.max_set_attempts < 1:
            raise GenerationError("Attempt limits are too small to produce a tile set")


@dataclass
class PuzzleResult:
    tiles: TileSet
    arrangement: Arrangement
    attempts: int
    seed: Optional[int] = None


class TileSetGenerator:
    """Draws tile sets whose tiles are pairwise distinct under rotation."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.config.validate()
        self.rng = rng or random.Random(self.config.seed)

    def generate_random_set(self) -> TileSet:
        tiles: TileSet = {}
        draws = 0
        while len(tiles) < TILE_COUNT:
            draws += 1
            if draws > self.config.max_tile_attempts:
                raise GenerationError(
                    f"Unable to draw {TILE_COUNT} distinct tiles in {self.config.max_tile_attempts} attempts"
                )
            borders = self._draw_borders()
            if any(is_rotation_of(borders, earlier.borders) for earlier in tiles.values()):
                LOGGER.debug("Discarding tile %s: rotation of an earlier tile", borders)
                continue
            tile_id = len(tiles)
            tiles[tile_id] = Tile(tile_id, borders)
        return tiles

    def _draw_borders(self) -> Tuple[int, ...]:
        # Redraw on collision so the six numbers on one tile are all different.
        borders: List[int] = []
        while len(borders) < EDGE_COUNT:
            value = self.rng.randint(self.config.min_border, self.config.max_border)
            if value in borders:
                continue
            borders.append(value)
        return tuple(borders)


class PuzzleGenerator:
    """Generates tile sets until one of them is solvable."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        solver: Optional[HexSolver] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.tile_generator = TileSetGenerator(self.config)
        self.solver = solver or HexSolver()

    def generate(self) -> PuzzleResult:
        for attempt in range(1, self.config.max_set_attempts + 1):
            tiles = self.tile_generator.generate_random_set()
            arrangement = self.solver.solve(tiles)
            if arrangement is None:
                LOGGER.debug("Tile set %d has no arrangement", attempt)
                continue
            LOGGER.info("Tile set %d is solvable", attempt)
            return PuzzleResult(
                tiles=tiles,
                arrangement=arrangement,
                attempts=attempt,
                seed=self.config.seed,
            )
        raise GenerationError(
            f"No solvable tile set found in {self.config.max_set_attempts} attempts"
        )


def generate_random_set(seed: Optional[int] = None) -> TileSet:
    return TileSetGenerator(GeneratorConfig(seed=seed)).generate_random_set()
