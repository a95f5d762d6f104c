import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "gradient"))

from splashgen_gradient import (
    ColorStop,
    Gradient,
    GradientKind,
    ParseFailure,
    ParseFailureReason,
    dominant_color,
    parse_angle,
    parse_gradient,
)


class GradientParserTests(unittest.TestCase):
    def test_linear_with_angle(self):
        g = parse_gradient("linear-gradient(64.28deg, #001833 0%, #004390 100%)")
        self.assertIsInstance(g, Gradient)
        self.assertEqual(g.kind, GradientKind.LINEAR)
        self.assertAlmostEqual(g.angle_degrees, 64.28)
        self.assertEqual(g.stops, (ColorStop("#001833", 0.0), ColorStop("#004390", 1.0)))
        self.assertEqual(g.warnings, ())

    def test_default_angle_is_to_bottom(self):
        g = parse_gradient("linear-gradient(#001833 0%, #004390 100%)")
        self.assertIsInstance(g, Gradient)
        self.assertEqual(g.angle_degrees, 180.0)
        self.assertEqual(len(g.stops), 2)

    def test_caller_default_angle(self):
        g = parse_gradient("linear-gradient(#001833 0%, #004390 100%)", default_angle=90.0)
        self.assertEqual(g.angle_degrees, 90.0)

    def test_direction_keywords(self):
        g = parse_gradient("linear-gradient(to right, #000000 0%, #ffffff 100%)")
        self.assertEqual(g.angle_degrees, 90.0)
        g = parse_gradient("linear-gradient(to left top, #000000 0%, #ffffff 100%)")
        self.assertEqual(g.angle_degrees, 315.0)

    def test_unrecognized_direction_uses_default_with_warning(self):
        g = parse_gradient("linear-gradient(to middle, #000000 0%, #ffffff 100%)")
        self.assertIsInstance(g, Gradient)
        self.assertEqual(g.angle_degrees, 180.0)
        self.assertEqual(len(g.warnings), 1)

    def test_malformed_angle_uses_default_with_warning(self):
        g = parse_gradient("linear-gradient(45degs, #000000 0%, #ffffff 100%)")
        self.assertIsInstance(g, Gradient)
        self.assertEqual(g.angle_degrees, 180.0)
        self.assertEqual(len(g.stops), 2)
        self.assertEqual(len(g.warnings), 1)
        self.assertIn("45degs", g.warnings[0])

    def test_angle_units(self):
        self.assertAlmostEqual(parse_angle("0.25turn"), 90.0)
        self.assertAlmostEqual(parse_angle("100grad"), 90.0)
        self.assertAlmostEqual(parse_angle("3.141592653589793rad"), 180.0)
        self.assertAlmostEqual(parse_angle("45"), 45.0)
        self.assertAlmostEqual(parse_angle("-90deg"), -90.0)
        self.assertIsNone(parse_angle("#abcdef 0%"))

    def test_radial(self):
        g = parse_gradient("radial-gradient(circle, #ABCDEF 0%, #123456 100%)")
        self.assertIsInstance(g, Gradient)
        self.assertEqual(g.kind, GradientKind.RADIAL)
        self.assertIsNone(g.angle_degrees)
        self.assertEqual(g.shape, "circle")
        self.assertEqual(g.stops[0].color, "#abcdef")

    def test_stop_count_matches_occurrences(self):
        text = "linear-gradient(45deg, #111111 0%, #222222 25%, #333333 50%, #444444 100%)"
        g = parse_gradient(text)
        self.assertEqual(len(g.stops), 4)
        self.assertEqual([s.position for s in g.stops], [0.0, 0.25, 0.5, 1.0])

    def test_stops_keep_input_order(self):
        g = parse_gradient("linear-gradient(90deg, #111111 80%, #222222 20%)")
        self.assertEqual([s.position for s in g.stops], [0.8, 0.2])

    def test_single_stop_fails_with_dominant_color(self):
        result = parse_gradient("linear-gradient(45deg, #abcdef 50%)")
        self.assertIsInstance(result, ParseFailure)
        self.assertEqual(result.reason, ParseFailureReason.TOO_FEW_STOPS)
        self.assertEqual(result.dominant_color, "#abcdef")

    def test_not_a_gradient(self):
        result = parse_gradient("not-a-gradient")
        self.assertIsInstance(result, ParseFailure)
        self.assertEqual(result.reason, ParseFailureReason.UNRECOGNIZED)
        self.assertEqual(result.dominant_color, "#000000")
        self.assertEqual(dominant_color("not-a-gradient"), "#000000")

    def test_repeating_gradient_is_not_recognized(self):
        result = parse_gradient("repeating-linear-gradient(45deg, #000000 0%, #ffffff 100%)")
        self.assertIsInstance(result, ParseFailure)
        self.assertEqual(result.reason, ParseFailureReason.UNRECOGNIZED)

    def test_empty(self):
        for value in (None, "", "   "):
            result = parse_gradient(value)
            self.assertIsInstance(result, ParseFailure)
            self.assertEqual(result.reason, ParseFailureReason.EMPTY)

    def test_short_hex_is_ignored(self):
        result = parse_gradient("linear-gradient(45deg, #abc 0%, #def 100%)")
        self.assertIsInstance(result, ParseFailure)
        self.assertEqual(result.reason, ParseFailureReason.TOO_FEW_STOPS)

    def test_alpha_hex_is_kept_without_alpha(self):
        g = parse_gradient("linear-gradient(45deg, #00183380 0%, #004390 100%)")
        self.assertIsInstance(g, Gradient)
        self.assertEqual(g.stops[0].color, "#001833")
        self.assertTrue(any("alpha" in w for w in g.warnings))

    def test_decimal_percent_is_dropped_with_warning(self):
        g = parse_gradient("linear-gradient(45deg, #000000 0%, #777777 50.5%, #ffffff 100%)")
        self.assertEqual(len(g.stops), 2)
        self.assertEqual(len(g.warnings), 1)

    def test_position_over_100_is_clamped(self):
        g = parse_gradient("linear-gradient(45deg, #000000 0%, #ffffff 150%)")
        self.assertEqual(g.stops[-1].position, 1.0)

    def test_dominant_color_picks_first_hex(self):
        self.assertEqual(dominant_color("solid #FF0000 then #00ff00"), "#ff0000")
        self.assertEqual(dominant_color(None, default="#123456"), "#123456")


if __name__ == "__main__":
    unittest.main()
