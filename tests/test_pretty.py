import io
import unittest

from hexpuzzle.core.exceptions import InvalidPuzzleError
from hexpuzzle.engine.board import BoardState
from hexpuzzle.engine.generator import PuzzleResult
from hexpuzzle.utils.pretty import (
    BOARD_TEMPLATE,
    PLACEHOLDERS,
    FrameRenderer,
    RenderConfig,
    fill_template_line,
    format_board,
    format_tile_set,
    print_puzzle_result,
)

from hex_fixtures import SOLVED_ROWS, fill_board, solved_tiles


class TemplateTests(unittest.TestCase):
    def test_template_uses_one_placeholder_per_encoded_number(self) -> None:
        used = [char for line in BOARD_TEMPLATE for char in line if char in PLACEHOLDERS]
        self.assertEqual(len(used), 49)
        self.assertEqual(sorted(used), sorted(PLACEHOLDERS[:49]))

    def test_fill_template_line_maps_lower_then_upper_case(self) -> None:
        encoded = list(range(10)) * 6
        self.assertEqual(fill_template_line("a/b", encoded), "0/1")
        self.assertEqual(fill_template_line("A_", encoded), "6_")

    def test_missing_numbers_render_blank(self) -> None:
        self.assertEqual(fill_template_line("_h_", [0, 1, 2]), "_ _")


class FormatBoardTests(unittest.TestCase):
    def test_full_board_places_numbers_on_their_edges(self) -> None:
        lines = format_board(fill_board(SOLVED_ROWS, 7).to_arrangement()).split("\n")
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], "            __2__")
        self.assertEqual(lines[6], "  __1__    \\5 0 3/    __4__")

    def test_empty_board_has_no_numbers(self) -> None:
        rendered = format_board(BoardState().filled())
        self.assertFalse(any(char.isdigit() for char in rendered))

    def test_partial_board_shows_only_filled_slots(self) -> None:
        rendered = format_board(fill_board(SOLVED_ROWS, 1).filled())
        digits = sorted(char for char in rendered if char.isdigit())
        self.assertEqual(digits, sorted("0123456"))

    def test_two_digit_border_is_not_drawn(self) -> None:
        with self.assertRaises(InvalidPuzzleError):
            format_board(fill_board([[1, 2, 3, 4, 5, 12]], 1).filled())

    def test_format_tile_set_lists_borders(self) -> None:
        text = format_tile_set(solved_tiles())
        lines = text.split("\n")
        self.assertEqual(len(lines), 7)
        self.assertEqual(lines[1], "1: 2 4 6 1 3 5")


class OutputTests(unittest.TestCase):
    def test_print_puzzle_result_reports_attempts(self) -> None:
        tiles = solved_tiles()
        arrangement = fill_board(SOLVED_ROWS, 7).to_arrangement()
        stream = io.StringIO()
        print_puzzle_result(PuzzleResult(tiles, arrangement, attempts=4, seed=9), stream=stream)
        output = stream.getvalue()
        self.assertIn("went through 4 possible sets", output)
        self.assertIn("Set number 4 is actually solvable.", output)
        self.assertIn("Seed: 9", output)

    def test_frame_renderer_clears_draws_and_sleeps(self) -> None:
        stream = io.StringIO()
        pauses = []
        renderer = FrameRenderer(RenderConfig(frame_time=0.5), stream=stream, sleep=pauses.append)
        renderer(fill_board(SOLVED_ROWS, 3))
        renderer(fill_board(SOLVED_ROWS, 4))
        self.assertEqual(renderer.frames, 2)
        self.assertEqual(pauses, [0.5, 0.5])
        self.assertEqual(stream.getvalue().count("\x1b[2J"), 2)

    def test_frame_renderer_skips_sleep_for_zero_frame_time(self) -> None:
        pauses = []
        renderer = FrameRenderer(
            RenderConfig(frame_time=0.0, clear_screen=False), stream=io.StringIO(), sleep=pauses.append
        )
        renderer(fill_board(SOLVED_ROWS, 1))
        self.assertEqual(pauses, [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
