from __future__ import annotations

from ..config import SUBSCRIBER_GROWTH
from ..geometry import Domain
from ..render.paths import baseline_area_path, line_path
from ..render.svg import SvgBuilder
from .frame import Chart, count_label, episode_label


class SubscriberGrowthChart(Chart):
    name = SUBSCRIBER_GROWTH
    title = "Subscriber Trajectory"
    description = (
        "Cumulative subscriber growth shows which seasons or campaigns produced inflection points "
        "and where momentum slowed."
    )
    aria_label = "Cumulative subscribers over time"

    def y_domain(self) -> Domain:
        return (0.0, max(r.cumulative_subscribers for r in self.records) * 1.05)

    def draw(self, svg: SvgBuilder) -> None:
        frame = self.frame
        geo = frame.geometry
        theme = frame.theme
        x = frame.x_scale()
        y = frame.y_scale(self.y_domain())
        y_ticks = y.ticks(5)

        fill = svg.linear_gradient(
            "subsFill",
            {"0%": theme.area_fill_top, "100%": theme.area_fill_bottom},
        )
        frame.y_grid(svg, y, y_ticks)

        points = [(x(r.episode), y(r.cumulative_subscribers)) for r in self.records]
        plot = frame.plot_group(svg, f"{self.name}-clip")
        svg.path(baseline_area_path(points, y(0.0), "monotone_x"), parent=plot, fill=fill)
        svg.path(line_path(points, "monotone_x"), parent=plot, class_="line-secondary")

        frame.x_tick_labels(svg, x, x.ticks(6), episode_label)
        frame.axis_title(svg, "Total subscribers", geo.plot_left, geo.plot_top - 10, anchor="start")
        frame.y_tick_labels(svg, y, y_ticks, count_label, gap=12)
