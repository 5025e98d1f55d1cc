import random
import unittest

from hexpuzzle.core.models import tile_set_from_rows
from hexpuzzle.engine.generator import generate_random_set
from hexpuzzle.engine.oracle import cross_check, is_solvable_cp_sat, solve_with_cp_sat
from hexpuzzle.engine.rotation import rotated
from hexpuzzle.engine.solver import HexSolver
from hexpuzzle.engine.validator import ArrangementValidator

from hex_fixtures import IDENTICAL_ROWS, SOLVED_ROWS, solved_tiles


def shuffled_solvable_rows(seed: int):
    """The solved fixture with tile order shuffled and every tile turned at random."""
    rng = random.Random(seed)
    rows = [list(rotated(row, rng.randrange(6))) for row in SOLVED_ROWS]
    rng.shuffle(rows)
    return rows


class OracleTests(unittest.TestCase):
    def test_oracle_solves_fixture(self) -> None:
        tiles = solved_tiles()
        arrangement = solve_with_cp_sat(tiles)
        assert arrangement is not None
        result = ArrangementValidator().validate(arrangement, tiles)
        self.assertTrue(result.ok, result.messages)

    def test_oracle_rejects_identical_tiles(self) -> None:
        self.assertFalse(is_solvable_cp_sat(tile_set_from_rows(IDENTICAL_ROWS)))

    def test_solver_agrees_with_oracle_on_generated_sets(self) -> None:
        solver = HexSolver()
        for seed in range(25):
            tiles = generate_random_set(seed)
            self.assertEqual(solver.is_solvable(tiles), is_solvable_cp_sat(tiles), f"seed={seed}")

    def test_solver_agrees_with_oracle_when_borders_repeat(self) -> None:
        solver = HexSolver()
        uniform = tile_set_from_rows([[1] * 6] * 7)
        self.assertTrue(solver.is_solvable(uniform))
        self.assertTrue(is_solvable_cp_sat(uniform))
        for seed in range(15):
            rng = random.Random(seed)
            tiles = tile_set_from_rows([[rng.randint(1, 3) for _ in range(6)] for _ in range(7)])
            self.assertEqual(solver.is_solvable(tiles), is_solvable_cp_sat(tiles), f"seed={seed}")

    def test_solver_finds_shuffled_and_rotated_fixture(self) -> None:
        solver = HexSolver()
        validator = ArrangementValidator()
        for seed in range(10):
            tiles = tile_set_from_rows(shuffled_solvable_rows(seed))
            arrangement = solver.solve(tiles)
            self.assertIsNotNone(arrangement, f"seed={seed}")
            assert arrangement is not None
            self.assertTrue(validator.validate(arrangement, tiles).ok)
            self.assertTrue(cross_check(tiles, True))

    def test_cross_check_reports_disagreement(self) -> None:
        self.assertFalse(cross_check(tile_set_from_rows(IDENTICAL_ROWS), True))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
