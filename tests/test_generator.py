import unittest
from itertools import combinations

from hexpuzzle.core.exceptions import GenerationError
from hexpuzzle.engine.generator import (
    GeneratorConfig,
    PuzzleGenerator,
    TileSetGenerator,
    generate_random_set,
)
from hexpuzzle.engine.rotation import is_rotation_of, rotated
from hexpuzzle.engine.solver import HexSolver
from hexpuzzle.engine.validator import ArrangementValidator


class CyclingRandom:
    """Stand-in RNG that always deals 1, 2, 3, 4, 5, 6 in order."""

    def __init__(self) -> None:
        self.calls = 0

    def randint(self, low: int, high: int) -> int:
        value = low + self.calls % (high - low + 1)
        self.calls += 1
        return value


class TileSetGeneratorTests(unittest.TestCase):
    def test_generated_sets_have_seven_tiles_with_distinct_borders(self) -> None:
        for seed in range(20):
            tiles = generate_random_set(seed)
            self.assertEqual(sorted(tiles), list(range(7)))
            for tile_id, tile in tiles.items():
                self.assertEqual(tile.id, tile_id)
                self.assertEqual(sorted(tile.borders), [1, 2, 3, 4, 5, 6])

    def test_no_tile_is_a_rotation_of_another(self) -> None:
        for seed in range(20):
            tiles = generate_random_set(seed)
            for first, second in combinations(tiles.values(), 2):
                for steps in range(6):
                    self.assertNotEqual(rotated(first.borders, steps), second.borders)
                self.assertFalse(is_rotation_of(first.borders, second.borders))

    def test_same_seed_gives_same_set(self) -> None:
        self.assertEqual(generate_random_set(42), generate_random_set(42))

    def test_wider_border_range_is_respected(self) -> None:
        config = GeneratorConfig(seed=5, min_border=1, max_border=9)
        tiles = TileSetGenerator(config).generate_random_set()
        for tile in tiles.values():
            self.assertTrue(tile.has_distinct_borders())
            self.assertTrue(all(1 <= value <= 9 for value in tile.borders))

    def test_rotation_equivalent_tiles_are_discarded_until_cap(self) -> None:
        config = GeneratorConfig(max_tile_attempts=7)
        generator = TileSetGenerator(config, rng=CyclingRandom())
        with self.assertRaises(GenerationError):
            generator.generate_random_set()

    def test_border_range_too_small_is_rejected(self) -> None:
        with self.assertRaises(GenerationError):
            TileSetGenerator(GeneratorConfig(min_border=1, max_border=5))

    def test_two_digit_borders_are_rejected(self) -> None:
        with self.assertRaises(GenerationError):
            TileSetGenerator(GeneratorConfig(min_border=5, max_border=12))


class PuzzleGeneratorTests(unittest.TestCase):
    def test_generate_returns_solvable_set(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=11)).generate()
        self.assertGreaterEqual(result.attempts, 1)
        self.assertEqual(result.seed, 11)
        self.assertTrue(HexSolver().is_solvable(result.tiles))
        validation = ArrangementValidator().validate(result.arrangement, result.tiles)
        self.assertTrue(validation.ok, validation.messages)

    def test_generate_is_reproducible(self) -> None:
        first = PuzzleGenerator(GeneratorConfig(seed=3)).generate()
        second = PuzzleGenerator(GeneratorConfig(seed=3)).generate()
        self.assertEqual(first.tiles, second.tiles)
        self.assertEqual(first.attempts, second.attempts)

    def test_generate_gives_up_after_set_limit(self) -> None:
        class NeverSolves(HexSolver):
            def solve(self, tiles):
                return None

        generator = PuzzleGenerator(GeneratorConfig(seed=1, max_set_attempts=3), solver=NeverSolves())
        with self.assertRaises(GenerationError):
            generator.generate()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
