"""CLI entrypoint for the seven-tile hex puzzle solver."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from hexpuzzle.core.exceptions import GenerationError, InvalidPuzzleError
from hexpuzzle.core.models import TileSet
from hexpuzzle.engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from hexpuzzle.engine.oracle import cross_check
from hexpuzzle.engine.solver import HexSolver
from hexpuzzle.engine.validator import ArrangementValidator
from hexpuzzle.io.encoding import (
    encode_arrangement,
    encode_arrangement_string,
    format_tile_set_text,
    parse_tile_set,
)
from hexpuzzle.utils.logger import configure_logging, get_logger, parse_level
from hexpuzzle.utils.pretty import (
    FrameRenderer,
    RenderConfig,
    format_board,
    format_tile_set,
    print_puzzle_result,
)

LOGGER = get_logger("hexpuzzle.cli")

MAX_FRAME_TIME = 5.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and solve seven-tile hex edge-matching puzzles",
    )
    parser.add_argument(
        "--frame-time",
        type=float,
        default=0.0,
        help="Seconds to show each search step (0-5); 0 skips the animation",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--tiles",
        type=str,
        help="Solve these tiles instead of generating: seven groups such as '123456 246135 ...'",
    )
    parser.add_argument(
        "--max-set-attempts",
        type=int,
        default=10_000,
        help="Give up after drawing this many unsolvable tile sets",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check the answer with the CP-SAT model",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def animate(tiles: TileSet, frame_time: float) -> None:
    """Re-run the search, drawing the board after every placement and rotation."""
    renderer = FrameRenderer(RenderConfig(frame_time=frame_time))
    HexSolver(observer=renderer).solve(tiles)
    LOGGER.info("Animated %d frames", renderer.frames)


def build_payload(result: PuzzleResult, verified: Optional[bool]) -> Dict[str, Any]:
    return {
        "attempts": result.attempts,
        "seed": result.seed,
        "tiles": {str(tile_id): list(tile.borders) for tile_id, tile in sorted(result.tiles.items())},
        "tiles_text": format_tile_set_text(result.tiles),
        "arrangement": result.arrangement.to_jsonable(),
        "encoded": encode_arrangement(result.arrangement),
        "encoded_string": encode_arrangement_string(result.arrangement),
        "verified": verified,
    }


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        level = parse_level(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(level)

    if not 0 <= args.frame_time <= MAX_FRAME_TIME:
        parser.error(f"--frame-time must be between 0 and {MAX_FRAME_TIME:g} seconds")
    if args.max_set_attempts < 1:
        parser.error("--max-set-attempts must be positive")

    if args.tiles:
        try:
            tiles = parse_tile_set(args.tiles)
        except InvalidPuzzleError as exc:
            parser.error(str(exc))
        arrangement = HexSolver().solve(tiles)
        if arrangement is None:
            print("This set of game pieces has no solution:")
            print(format_tile_set(tiles))
            if args.verify and not cross_check(tiles, False):
                LOGGER.error("CP-SAT found an arrangement the solver missed")
            return 1
        result = PuzzleResult(tiles=tiles, arrangement=arrangement, attempts=1, seed=None)
    else:
        config = GeneratorConfig(seed=args.seed, max_set_attempts=args.max_set_attempts)
        try:
            result = PuzzleGenerator(config).generate()
        except GenerationError as exc:
            LOGGER.error("Generation failed: %s", exc)
            return 1

    if args.frame_time > 0:
        animate(result.tiles, args.frame_time)

    validation = ArrangementValidator().validate(result.arrangement, result.tiles)
    verified: Optional[bool] = None
    if args.verify:
        verified = cross_check(result.tiles, True)

    if args.tiles:
        print(format_board(result.arrangement))
        print()
        print(format_tile_set(result.tiles))
    else:
        print_puzzle_result(result)

    if args.output:
        output_text = json.dumps(build_payload(result, verified), indent=2)
        args.output.write_text(output_text, encoding="utf-8")

    if not validation.ok or verified is False:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
