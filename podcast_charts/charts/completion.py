from __future__ import annotations

from typing import Sequence

from ..config import COMPLETION_RATE, ChartConfig
from ..geometry import Domain
from ..records import EpisodeMetrics
from ..render.paths import line_path
from ..render.svg import SvgBuilder
from ..render.theme import DEFAULT_THEME, ChartTheme
from .frame import Chart, episode_label, percent_label


class CompletionRateChart(Chart):
    name = COMPLETION_RATE
    title = "Completion Discipline"
    description = (
        "Track how well episodes keep listeners to the end and spot the dips that signal pacing "
        "or segment order issues."
    )
    aria_label = "Episode completion rate trend"

    def __init__(
        self,
        records: Sequence[EpisodeMetrics],
        *,
        average_completion_rate: float | None = None,
        config: ChartConfig | None = None,
        theme: ChartTheme = DEFAULT_THEME,
        insight: str | None = None,
    ) -> None:
        super().__init__(records, config=config, theme=theme, insight=insight)
        if average_completion_rate is None:
            average_completion_rate = sum(r.completion_rate for r in self.records) / len(self.records)
        self.average_completion_rate = float(average_completion_rate)

    def y_domain(self) -> Domain:
        rates = [r.completion_rate for r in self.records]
        return (min(0.45, min(rates) - 0.02), max(0.95, max(rates) + 0.02))

    def draw(self, svg: SvgBuilder) -> None:
        frame = self.frame
        geo = frame.geometry
        x = frame.x_scale()
        y = frame.y_scale(self.y_domain())
        y_ticks = y.ticks(5)

        frame.y_grid(svg, y, y_ticks)
        avg_y = y(self.average_completion_rate)
        svg.line(geo.plot_left, avg_y, geo.plot_right, avg_y, class_="reference-line")

        plot = frame.plot_group(svg, f"{self.name}-clip")
        svg.path(
            line_path([(x(r.episode), y(r.completion_rate)) for r in self.records], "monotone_x"),
            parent=plot,
            class_="line-primary",
        )
        svg.path(
            line_path([(x(r.episode), y(r.rolling_completion)) for r in self.records], "monotone_x"),
            parent=plot,
            class_="line-secondary",
        )
        for r in self.records:
            svg.circle(x(r.episode), y(r.completion_rate), 3, parent=plot, class_="dot")

        frame.x_tick_labels(svg, x, x.ticks(6), episode_label)
        frame.axis_title(svg, "Completion %", geo.plot_left - 12, geo.plot_top)
        frame.y_tick_labels(svg, y, y_ticks, percent_label)
