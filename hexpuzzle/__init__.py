"""Solver and generator for the seven-tile hex edge-matching puzzle.

This package exposes the public API surface via:

- ``hexpuzzle.engine.solver.HexSolver``: backtracking search for an arrangement.
- ``hexpuzzle.engine.generator.TileSetGenerator`` and ``PuzzleGenerator``:
  random tile sets, optionally drawn until one is solvable.
- ``hexpuzzle.io.encoding`` helpers: flat arrangement encoding and tile parsing.
"""

from .core.models import Arrangement, Placement, Tile, TileSet, tile_set_from_rows
from .engine.generator import GeneratorConfig, PuzzleGenerator, TileSetGenerator, generate_random_set
from .engine.solver import HexSolver, is_solvable

__all__ = [
    "Arrangement",
    "Placement",
    "Tile",
    "TileSet",
    "tile_set_from_rows",
    "GeneratorConfig",
    "PuzzleGenerator",
    "TileSetGenerator",
    "generate_random_set",
    "HexSolver",
    "is_solvable",
]

__version__ = "0.1.0"
