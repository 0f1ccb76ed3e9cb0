"""Test suite for part definitions and the part catalog."""
import unittest

from rocketgen.parts import (
    DEFAULT_CATALOG,
    PARTS_BIN,
    Body,
    Engine,
    Exhaust,
    Part,
    PartCatalog,
    Tip,
    Transition
)


class TestCategory(unittest.TestCase):
    """Test cases for the category tagged values."""

    def test_payload_participates_in_equality(self):
        self.assertEqual(Transition(0), Transition(0))
        self.assertNotEqual(Transition(0), Transition(1))
        self.assertNotEqual(Engine(1), Exhaust(1))
        self.assertEqual(Tip(), Tip())
        self.assertNotEqual(Tip(), Body())

    def test_str(self):
        self.assertEqual(str(Transition(3)), "Transition(3)")
        self.assertEqual(str(Body()), "Body")


class TestPart(unittest.TestCase):
    """Test cases for the Part record."""

    def test_lines_and_width(self):
        part = DEFAULT_CATALOG.get("wide_finned")
        self.assertEqual(part.lines, ("/│ ^ │\\", "/_│ | │_\\"))
        self.assertEqual(part.width, 9)
        self.assertEqual(str(part), part.shape)

    def test_single_row_width_counts_characters(self):
        # Box-drawing characters are multi-byte in UTF-8 but one column wide
        self.assertEqual(DEFAULT_CATALOG.get("nose_flat").width, 3)
        self.assertEqual(DEFAULT_CATALOG.get("exhaust_dot").width, 1)

    def test_parts_are_immutable(self):
        part = DEFAULT_CATALOG.get("narrow_plain")
        with self.assertRaises(AttributeError):
            part.height = 5


class TestPartCatalog(unittest.TestCase):
    """Test cases for catalog construction and queries."""

    def test_default_catalog_contents(self):
        self.assertEqual(len(DEFAULT_CATALOG), 23)
        self.assertEqual(list(DEFAULT_CATALOG), list(PARTS_BIN))
        widths = {part.connector_width for part in DEFAULT_CATALOG}
        self.assertEqual(widths, {0, 1, 3})

    def test_query_preserves_catalog_order(self):
        noses = DEFAULT_CATALOG.query(lambda p: p.category == Transition(0))
        self.assertEqual(
            [p.name for p in noses],
            ["nose_ogive", "nose_flat", "nose_capped", "nose_tall"]
        )

    def test_query_is_pure(self):
        predicate = lambda p: p.category == Body() and p.connector_width == 3
        first = DEFAULT_CATALOG.query(predicate)
        second = DEFAULT_CATALOG.query(predicate)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 4)
        self.assertEqual(len(DEFAULT_CATALOG), 23)

    def test_query_with_no_match(self):
        self.assertEqual(DEFAULT_CATALOG.query(lambda p: p.height > 10), ())

    def test_every_width_has_an_engine(self):
        for width in (1, 3):
            engines = DEFAULT_CATALOG.query(lambda p, w=width: p.category == Engine(w))
            self.assertEqual(len(engines), 1, msg=f"width {width}")

    def test_get_unknown_part(self):
        with self.assertRaises(KeyError):
            DEFAULT_CATALOG.get("warp_drive")

    def test_contains(self):
        self.assertIn(PARTS_BIN[0], DEFAULT_CATALOG)

    def test_rejects_invalid_parts(self):
        invalid = [
            Part("flat", 0, 1, "", Body(), 1),
            Part("weightless", 1, 1, "│ │", Body(), 0),
            Part("negative", 1, -1, "│ │", Body(), 1),
            Part("short", 2, 1, "│ │", Body(), 1),
        ]
        for part in invalid:
            with self.assertRaises(ValueError, msg=part.name):
                PartCatalog([part])

    def test_rejects_duplicate_names(self):
        part = Part("body", 1, 1, "│ │", Body(), 1)
        with self.assertRaises(ValueError):
            PartCatalog([part, part])


if __name__ == "__main__":
    unittest.main(verbosity=2)
