from __future__ import annotations

from dataclasses import dataclass
import logging

from ..config import SHARES_SUBSCRIBERS
from ..geometry import Domain
from ..regression import RegressionLine, fit_trend
from ..render.svg import SvgBuilder, fmt_number
from .frame import Chart, count_label, extent

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharePoint:
    x: float
    y: float
    episode: int
    title: str


class ShareSubscriberScatter(Chart):
    """Social shares against subscribers gained, zoomable on both axes, with an OLS trend line."""

    name = SHARES_SUBSCRIBERS
    title = "Social Share Conversion"
    description = "Correlate social push energy with subscriber lift to decide where to double down on promotion."
    aria_label = "Scatter plot of social shares vs subscribers"

    def points(self) -> list[SharePoint]:
        return [
            SharePoint(x=r.social_media_shares, y=r.subscribers_gained, episode=r.episode, title=r.title)
            for r in self.records
        ]

    def base_domains(self) -> tuple[Domain, Domain | None]:
        points = self.points()
        return (extent(p.x for p in points), (0.0, max(p.y for p in points) * 1.1))

    def visible_points(self) -> list[SharePoint]:
        x0, x1 = self.frame.x_scale().domain
        y0, y1 = self.frame.y_scale().domain
        return [p for p in self.points() if x0 <= p.x <= x1 and y0 <= p.y <= y1]

    def trend(self) -> RegressionLine:
        visible = self.visible_points()
        if not visible:
            LOGGER.debug("no points inside the zoomed window; fitting trend over all episodes")
            visible = self.points()
        return fit_trend(visible)

    def draw(self, svg: SvgBuilder) -> None:
        frame = self.frame
        geo = frame.geometry
        x = frame.x_scale()
        y = frame.y_scale()
        y_ticks = y.ticks(5)

        frame.y_grid(svg, y, y_ticks)
        frame.y_tick_labels(svg, y, y_ticks, count_label, gap=16)

        plot = frame.plot_group(svg, f"{self.name}-clip")
        (ax, ay), (bx, by) = self.trend().segment(self.controller.x_domain)
        svg.line(x(ax), y(ay), x(bx), y(by), parent=plot, class_="line-secondary")

        points = self.points()
        top_share = max(points, key=lambda p: p.x)
        for point in points:
            highlight = point.episode == top_share.episode
            dot = svg.circle(
                x(point.x),
                y(point.y),
                6 if highlight else 4,
                parent=plot,
                class_="dot-highlight" if highlight else "dot",
            )
            svg.title(
                dot,
                f"Ep {point.episode}: {point.title}\n"
                f"{fmt_number(point.x)} shares → {fmt_number(point.y)} subscribers",
            )

        frame.x_tick_labels(svg, x, x.ticks(5), count_label, offset=30)
        frame.axis_title(svg, "Social media shares", geo.width / 2, geo.height - 12, anchor="middle")
        frame.axis_title(
            svg,
            "Subscribers gained",
            0,
            0,
            anchor="middle",
            transform=f"translate({fmt_number(geo.plot_left - 42)}, {fmt_number(geo.height / 2)}) rotate(-90)",
        )
