from __future__ import annotations

import json
from pathlib import Path
import tempfile
import unittest

from podcast_charts.config import (
    DEFAULT_CHART_CONFIGS,
    SCATTER_MARGIN,
    ChartConfig,
    load_chart_configs,
    parse_chart_configs,
)
from podcast_charts.errors import ChartDataError, ConfigurationError
from podcast_charts.geometry import Margin
from podcast_charts.records import EpisodeMetrics, load_episode_metrics, parse_episode_metrics


class ChartConfigTests(unittest.TestCase):
    def test_defaults_cover_every_chart(self) -> None:
        suite = load_chart_configs(None)
        self.assertEqual(suite.for_chart("completion_rate"), ChartConfig())
        self.assertEqual(suite.for_chart("shares_subscribers").margin, SCATTER_MARGIN)
        with self.assertRaises(KeyError):
            suite.for_chart("pie")

    def test_section_overrides_keep_unset_fields(self) -> None:
        suite = parse_chart_configs(
            {
                "listener_mix": {"width": 800, "max_zoom": 4, "margin": {"left": 80}},
                "theme": {"reference": "#ff8800"},
            }
        )
        config = suite.for_chart("listener_mix")
        self.assertEqual(config.width, 800.0)
        self.assertEqual(config.height, 360.0)
        self.assertEqual(config.max_zoom, 4.0)
        self.assertEqual(config.margin, Margin(top=24, right=24, bottom=42, left=80))
        self.assertEqual(suite.theme.reference, "#ff8800")
        self.assertEqual(suite.for_chart("subscriber_growth"), DEFAULT_CHART_CONFIGS["subscriber_growth"])

    def test_invalid_sections_rejected(self) -> None:
        bad_inputs = [
            {"pie": {"width": 10}},
            {"listener_mix": 3},
            {"listener_mix": {"colour": "red"}},
            {"listener_mix": {"margin": {"middle": 3}}},
            {"listener_mix": {"width": "wide"}},
            {"listener_mix": {"max_zoom": 0.5}},
            {"listener_mix": {"width": 80}},
            {"theme": {"dot": "blue"}},
        ]
        for raw in bad_inputs:
            with self.subTest(raw=raw):
                with self.assertRaises(ConfigurationError):
                    parse_chart_configs(raw)

    def test_load_toml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "charts.toml"
            path.write_text(
                "[completion_rate]\nwidth = 720\nheight = 400\n\n[theme]\nfont_size_px = 13\n",
                encoding="utf-8",
            )
            with self.assertLogs("podcast_charts.config", level="INFO"):
                suite = load_chart_configs(path)
            self.assertEqual(suite.for_chart("completion_rate").geometry().plot_right, 696.0)
            self.assertEqual(suite.theme.font_size_px, 13.0)

            broken = Path(tmp) / "broken.toml"
            broken.write_text("[completion_rate\nwidth = ", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                load_chart_configs(broken)
            with self.assertRaises(FileNotFoundError):
                load_chart_configs(Path(tmp) / "missing.toml")


class EpisodeRecordTests(unittest.TestCase):
    def test_camel_case_keys_and_shares(self) -> None:
        record = EpisodeMetrics.from_mapping(
            {
                "episode": 3,
                "title": "Pilot",
                "completionRate": 0.71,
                "listenersTotal": 2000,
                "newListeners": 500,
                "returningListeners": 1500,
                "socialMediaShares": 120,
                "subscribersGained": 40,
                "cumulativeSubscribers": 900,
            }
        )
        self.assertEqual(record.episode, 3)
        self.assertEqual(record.new_share, 0.25)
        self.assertEqual(record.returning_share, 0.75)
        self.assertEqual(record.rolling_completion, 0.71)
        self.assertEqual(record.cumulative_subscribers, 900.0)

    def test_zero_listeners_give_zero_shares(self) -> None:
        record = EpisodeMetrics.from_mapping({"episode": 1, "completion_rolling": 0.6})
        self.assertEqual(record.new_share, 0.0)
        self.assertEqual(record.returning_share, 0.0)
        self.assertEqual(record.rolling_completion, 0.6)

    def test_invalid_records_rejected(self) -> None:
        bad_inputs = [
            {"title": "no episode"},
            {"episode": 1.5},
            {"episode": True},
            {"episode": 2, "socialMediaShares": "lots"},
            {"episode": 2, "completion_rate": float("nan")},
        ]
        for raw in bad_inputs:
            with self.subTest(raw=raw):
                with self.assertRaises(ChartDataError):
                    EpisodeMetrics.from_mapping(raw)

    def test_parse_sorts_by_episode(self) -> None:
        records = parse_episode_metrics([{"episode": 3}, {"episode": 1}, {"episode": 2}])
        self.assertEqual([r.episode for r in records], [1, 2, 3])
        with self.assertRaises(ChartDataError):
            parse_episode_metrics([{"episode": 1}, "oops"])  # type: ignore[list-item]

    def test_load_json_dataset(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            wrapped = Path(tmp) / "wrapped.json"
            wrapped.write_text(json.dumps({"episodes": [{"episode": 2}, {"episode": 1}]}), encoding="utf-8")
            self.assertEqual([r.episode for r in load_episode_metrics(wrapped)], [1, 2])

            bare = Path(tmp) / "bare.json"
            bare.write_text(json.dumps([{"episode": 5}]), encoding="utf-8")
            self.assertEqual(len(load_episode_metrics(bare)), 1)

            wrong = Path(tmp) / "wrong.json"
            wrong.write_text(json.dumps({"rows": []}), encoding="utf-8")
            with self.assertRaises(ChartDataError):
                load_episode_metrics(wrong)
            with self.assertRaises(FileNotFoundError):
                load_episode_metrics(Path(tmp) / "missing.json")


if __name__ == "__main__":
    unittest.main()
