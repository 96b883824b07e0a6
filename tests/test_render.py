from __future__ import annotations

import unittest
import xml.etree.ElementTree as ET

from podcast_charts.render import (
    DEFAULT_THEME,
    SvgBuilder,
    area_path,
    baseline_area_path,
    fmt_number,
    line_path,
    stylesheet,
    validate_theme_tokens,
)

NS = "{http://www.w3.org/2000/svg}"


class NumberFormattingTests(unittest.TestCase):
    def test_trailing_zeros_and_negative_zero(self) -> None:
        self.assertEqual(fmt_number(338.0), "338")
        self.assertEqual(fmt_number(1.5), "1.5")
        self.assertEqual(fmt_number(12.3456), "12.35")
        self.assertEqual(fmt_number(-0.001), "0")


class PathDataTests(unittest.TestCase):
    def test_empty_and_single_point(self) -> None:
        self.assertEqual(line_path([]), "")
        self.assertEqual(line_path([(1, 2)]), "M1,2Z")

    def test_linear_segments(self) -> None:
        self.assertEqual(line_path([(0, 0), (10, 5)]), "M0,0L10,5")
        self.assertEqual(line_path([(0, 0), (10, 5)], "monotone_x"), "M0,0L10,5")

    def test_monotone_curve_on_collinear_points_stays_straight(self) -> None:
        self.assertEqual(
            line_path([(0, 0), (3, 3), (6, 6)], "monotone_x"),
            "M0,0C1,1,2,2,3,3C4,4,5,5,6,6",
        )

    def test_monotone_curve_flattens_at_local_extrema(self) -> None:
        d = line_path([(0, 0), (3, 6), (6, 0)], "monotone_x")
        # The peak gets a zero tangent, so both control points beside it sit at y=6.
        self.assertIn(",2,6,3,6C4,6,", d)

    def test_area_closes_along_reversed_bottom(self) -> None:
        self.assertEqual(area_path([(0, 0), (10, 0)], [(0, 5), (10, 5)]), "M0,0L10,0L10,5L0,5Z")
        self.assertEqual(baseline_area_path([(0, 0), (10, 0)], 5), "M0,0L10,0L10,5L0,5Z")
        self.assertEqual(area_path([], []), "")

    def test_area_requires_matching_edges(self) -> None:
        with self.assertRaises(ValueError):
            area_path([(0, 0), (1, 1)], [(0, 0)])


class SvgBuilderTests(unittest.TestCase):
    def test_markup_parses_with_accessibility_metadata(self) -> None:
        svg = SvgBuilder(640, 360, aria_label="Trend", title="Title", description="Desc")
        svg.line(0, 1, 2, 3, class_="grid-line", stroke_width=1.5)
        self.assertIsNone(svg.path(""))
        root = ET.fromstring(svg.to_markup())
        self.assertEqual(root.tag, f"{NS}svg")
        self.assertEqual(root.get("viewBox"), "0 0 640 360")
        self.assertEqual(root.get("role"), "img")
        self.assertEqual(root.get("aria-label"), "Trend")
        self.assertEqual(root.find(f"{NS}title").text, "Title")  # type: ignore[union-attr]
        self.assertEqual(root.find(f"{NS}desc").text, "Desc")  # type: ignore[union-attr]
        line = root.find(f"{NS}line")
        assert line is not None
        self.assertEqual(line.get("class"), "grid-line")
        self.assertEqual(line.get("stroke-width"), "1.5")
        self.assertEqual(len(root.findall(f"{NS}path")), 0)

    def test_defs_hold_clip_paths_and_gradients(self) -> None:
        svg = SvgBuilder(100, 50)
        clip = svg.clip_rect("plot-clip", 10, 5, 80, 40)
        fill = svg.linear_gradient("fill", {"0%": "#ffffff", "100%": "#000000"})
        self.assertEqual(clip, "url(#plot-clip)")
        self.assertEqual(fill, "url(#fill)")
        root = ET.fromstring(svg.to_markup())
        defs = root[0]
        self.assertEqual(defs.tag, f"{NS}defs")
        self.assertIsNotNone(defs.find(f"{NS}clipPath/{NS}rect"))
        self.assertEqual(len(defs.findall(f"{NS}linearGradient/{NS}stop")), 2)

    def test_rejects_empty_canvas(self) -> None:
        with self.assertRaises(ValueError):
            SvgBuilder(0, 10)


class ChartThemeTests(unittest.TestCase):
    def test_overrides_merge_with_defaults(self) -> None:
        theme = validate_theme_tokens({"line_primary": " #ff0000 ", "font_size_px": 14})
        self.assertEqual(theme.line_primary, "#ff0000")
        self.assertEqual(theme.font_size_px, 14.0)
        self.assertEqual(theme.grid, DEFAULT_THEME.grid)
        self.assertIn(".line-primary { fill: none; stroke: #ff0000;", stylesheet(theme))

    def test_invalid_tokens_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown theme token"):
            validate_theme_tokens({"sparkle": "#ffffff"})
        with self.assertRaisesRegex(ValueError, "hex"):
            validate_theme_tokens({"dot": "blue"})
        with self.assertRaisesRegex(ValueError, "non-empty"):
            validate_theme_tokens({"font_family": "  "})
        with self.assertRaisesRegex(ValueError, "positive"):
            validate_theme_tokens({"font_size_px": 0})
        with self.assertRaisesRegex(ValueError, "positive"):
            validate_theme_tokens({"font_size_px": True})


if __name__ == "__main__":
    unittest.main()
