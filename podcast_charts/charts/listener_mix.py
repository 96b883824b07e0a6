from __future__ import annotations

from ..config import LISTENER_MIX
from ..render.paths import area_path
from ..render.svg import SvgBuilder
from .frame import Chart, episode_label, percent_label

SHARE_TICKS = (0.0, 0.25, 0.5, 0.75, 1.0)


class ListenerMixChart(Chart):
    """Stacked share of returning (bottom) and new (top) listeners per episode."""

    name = LISTENER_MIX
    title = "Listener Mix"
    description = (
        "See how the audience blend between new and returning listeners shifts, so you can balance "
        "acquisition campaigns and retention hooks."
    )
    aria_label = "Stacked area showing listener composition"

    def stacked_shares(self) -> list[tuple[float, float, float]]:
        """(episode, returning top, new top) with returning stacked from zero."""
        out = []
        for r in self.records:
            returning = r.returning_share
            out.append((float(r.episode), returning, returning + r.new_share))
        return out

    def draw(self, svg: SvgBuilder) -> None:
        frame = self.frame
        geo = frame.geometry
        x = frame.x_scale()
        y = frame.y_scale((0.0, 1.0))

        for tick in SHARE_TICKS:
            py = y(tick)
            svg.line(geo.plot_left, py, geo.plot_right, py, class_="grid-line")
        frame.y_tick_labels(svg, y, SHARE_TICKS, percent_label, gap=16)

        stacked = self.stacked_shares()
        plot = frame.plot_group(svg, f"{self.name}-clip")
        svg.path(
            area_path(
                [(x(ep), y(top)) for ep, top, _ in stacked],
                [(x(ep), y(0.0)) for ep, _, _ in stacked],
                "monotone_x",
            ),
            parent=plot,
            class_="stack-returning",
        )
        svg.path(
            area_path(
                [(x(ep), y(top)) for ep, _, top in stacked],
                [(x(ep), y(bottom)) for ep, bottom, _ in stacked],
                "monotone_x",
            ),
            parent=plot,
            class_="stack-new",
        )

        frame.x_tick_labels(svg, x, x.ticks(6), episode_label)
        frame.axis_title(svg, "Audience share", geo.plot_left - 10, geo.plot_top)
