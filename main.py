from __future__ import annotations

import argparse
import logging
from pathlib import Path

from podcast_charts.charts import CHART_TYPES, CompletionRateChart
from podcast_charts.config import load_chart_configs
from podcast_charts.records import load_episode_metrics

LOGGER = logging.getLogger("podcast_charts")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="podcast-charts")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render the four analytics charts to SVG files.")
    render.add_argument("dataset", type=Path, help="JSON list of episode records (or {\"episodes\": [...]}).")
    render.add_argument("--out-dir", type=Path, default=Path("charts"))
    render.add_argument("--config", type=Path, default=None, help="Optional TOML chart configuration.")
    render.add_argument(
        "--average-completion-rate",
        type=float,
        default=None,
        help="Portfolio average drawn on the completion chart. Default: mean of the dataset.",
    )
    render.add_argument("--only", choices=sorted(CHART_TYPES), action="append", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        written = _render_charts(
            dataset=args.dataset,
            out_dir=args.out_dir,
            config_path=args.config,
            average_completion_rate=args.average_completion_rate,
            only=args.only,
        )
        for path in written:
            print(path)
        return 0
    return 2


def _render_charts(
    *,
    dataset: Path,
    out_dir: Path,
    config_path: Path | None,
    average_completion_rate: float | None,
    only: list[str] | None,
) -> list[Path]:
    records = load_episode_metrics(dataset)
    suite = load_chart_configs(config_path)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, chart_type in CHART_TYPES.items():
        if only and name not in only:
            continue
        config = suite.for_chart(name)
        if chart_type is CompletionRateChart:
            chart = CompletionRateChart(
                records,
                average_completion_rate=average_completion_rate,
                config=config,
                theme=suite.theme,
            )
        else:
            chart = chart_type(records, config=config, theme=suite.theme)
        path = out_dir / f"{name}.svg"
        path.write_text(chart.render(), encoding="utf-8")
        LOGGER.info("wrote %s (%d episodes)", path, len(records))
        written.append(path)
    return written


if __name__ == "__main__":
    raise SystemExit(main())
