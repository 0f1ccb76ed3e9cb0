"""Test suite for rocket rendering."""
import math
import unittest

from rocketgen.assembly import NumpyRandomSource, Rocket
from rocketgen.assembly.renderer import render, render_lines, rocket_width
from rocketgen.parts import DEFAULT_CATALOG, Part, Tip


class TestRenderer(unittest.TestCase):
    """Test cases for centring parts of different widths."""

    def setUp(self):
        self.sections = [
            DEFAULT_CATALOG.get(name)
            for name in ("tip_antenna", "nose_tall", "wide_finned", "engine_wide", "exhaust_plume")
        ]

    def test_rocket_width_covers_every_row(self):
        # The second row of the finned body is the widest
        self.assertEqual(rocket_width(self.sections), 9)
        self.assertEqual(rocket_width([]), 0)

    def test_render_centres_rows(self):
        self.assertEqual(render(self.sections), (
            "    │\n"
            "    ║\n"
            "   /'\\\n"
            "  /   \\\n"
            " /│ ^ │\\\n"
            "/_│ | │_\\\n"
            "   \\_/\n"
            "   ( )\n"
        ))

    def test_mixed_widths(self):
        sections = [DEFAULT_CATALOG.get("narrow_finned"), DEFAULT_CATALOG.get("narrow_plain"),
                    DEFAULT_CATALOG.get("exhaust_dot")]
        # Widths 5, 3 and 1: padding 0, 1 and 2
        self.assertEqual(render_lines(sections), ["/│ │\\", " │ │", "  ·"])

    def test_odd_difference_rounds_padding_up(self):
        sections = [Part("cap", 1, 0, "()", Tip(), 1), DEFAULT_CATALOG.get("narrow_plain")]
        self.assertEqual(render_lines(sections), [" ()", "│ │"])

    def test_render_ends_with_line_break(self):
        output = render(self.sections)
        self.assertTrue(output.endswith("\n"))
        self.assertEqual(output.count("\n"), sum(p.height for p in self.sections))

    def test_empty_rocket(self):
        self.assertEqual(render([]), "")

    def test_pad_right_rows_match_rocket_width(self):
        for seed in range(20):
            rocket = Rocket.generate(3 + seed * 2, random_source=NumpyRandomSource(seed))
            width = rocket.width
            for row in render_lines(rocket.sections, pad_right=True):
                self.assertEqual(len(row), width, msg=repr(row))

    def test_left_padding_formula(self):
        rocket = Rocket.generate(30, random_source=NumpyRandomSource(11))
        rows = render_lines(rocket.sections)
        lines = [line for part in rocket.sections for line in part.lines]
        self.assertEqual(len(rows), len(lines))
        for row, line in zip(rows, lines):
            padding = math.ceil((rocket.width - len(line)) / 2)
            self.assertEqual(row, " " * padding + line)

    def test_rendering_is_idempotent(self):
        rocket = Rocket.generate(15, random_source=NumpyRandomSource(5))
        self.assertEqual(rocket.render(), rocket.render())
        self.assertEqual(str(rocket), rocket.render())


if __name__ == "__main__":
    unittest.main(verbosity=2)
