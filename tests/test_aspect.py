import unittest
from decimal import Decimal

from tests._test_path import SRC  # noqa: F401

from imagerules.core.errors import ConfigurationError, InvalidRuleSyntax
from imagerules.core.models import AspectConstraint, ImageDimensions
from imagerules.rules.aspect import evaluate_aspect, image_aspect, parse_aspect_rule


def _passes(params, width, height) -> bool:
    return evaluate_aspect(parse_aspect_rule(params), ImageDimensions(width, height))


class TestParseAspectRule(unittest.TestCase):
    def test_decimal_literal(self):
        self.assertEqual(parse_aspect_rule(["0.75"]), AspectConstraint(ratio=Decimal("0.75")))

    def test_width_height_pair(self):
        c = parse_aspect_rule(["3", "4"])
        self.assertEqual(c.ratio, Decimal("0.75"))
        self.assertFalse(c.orientation_insensitive)

    def test_orientation_marker(self):
        c = parse_aspect_rule(["~3", "4"])
        self.assertTrue(c.orientation_insensitive)
        self.assertEqual(c.ratio, Decimal("0.75"))
        self.assertTrue(parse_aspect_rule(["~1.5"]).orientation_insensitive)

    def test_zero_in_pair_is_configuration_error(self):
        with self.assertRaises(ConfigurationError):
            parse_aspect_rule(["3", "0"])
        with self.assertRaises(ConfigurationError):
            parse_aspect_rule(["0", "4"])

    def test_malformed(self):
        for params in (["abc"], ["NaN"], ["Infinity"], ["3", "x"], ["3.5", "4"], [], ["1", "2", "3"]):
            with self.subTest(params=params):
                with self.assertRaises(InvalidRuleSyntax):
                    parse_aspect_rule(params)


class TestEvaluateAspect(unittest.TestCase):
    def test_pair_matches(self):
        self.assertTrue(_passes(["3", "4"], 300, 400))

    def test_literal_matches(self):
        self.assertTrue(_passes(["0.75"], 300, 400))
        self.assertTrue(_passes(["1.5"], 600, 400))

    def test_repeating_fraction(self):
        self.assertTrue(_passes(["2", "3"], 200, 300))
        self.assertTrue(_passes(["16", "9"], 1920, 1080))
        self.assertFalse(_passes(["16", "9"], 1920, 1081))

    def test_orientation_insensitive_accepts_rotated(self):
        self.assertTrue(_passes(["~3", "4"], 400, 300))
        self.assertTrue(_passes(["~3", "4"], 300, 400))
        self.assertFalse(_passes(["3", "4"], 400, 300))

    def test_orientation_insensitive_literal(self):
        self.assertTrue(_passes(["~0.75"], 400, 300))

    def test_zero_ratio_needing_reciprocal(self):
        with self.assertRaises(ConfigurationError):
            _passes(["~0"], 400, 300)

    def test_zero_height_image_fails(self):
        self.assertIsNone(image_aspect(ImageDimensions(10, 0)))
        self.assertFalse(_passes(["3", "4"], 10, 0))
