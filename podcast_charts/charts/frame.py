from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Callable, ClassVar, Iterable, Sequence
import xml.etree.ElementTree as ET

from ..config import DEFAULT_CHART_CONFIGS, ChartConfig
from ..errors import ChartDataError
from ..geometry import Domain, ViewportGeometry
from ..records import EpisodeMetrics
from ..render.svg import SvgBuilder, fmt_number
from ..render.theme import DEFAULT_THEME, ChartTheme, stylesheet
from ..scales import LinearScale
from ..zoom import ZoomPanController

LOGGER = logging.getLogger(__name__)

OVERLAY_HINT = "Drag to pan, scroll to zoom, double-click to reset"


def extent(values: Iterable[float]) -> Domain:
    items = [float(v) for v in values]
    if not items:
        raise ChartDataError("cannot compute the extent of an empty series")
    return (min(items), max(items))


class ChartFrame:
    """Viewport, margins, grid, axis labels and interaction overlay shared by every chart.

    The zoom controller is injected once; scales are rebuilt from its effective
    domains on every render so zoom state flows straight into the drawing code.
    """

    def __init__(self, controller: ZoomPanController, theme: ChartTheme = DEFAULT_THEME) -> None:
        self.controller = controller
        self.theme = theme

    @property
    def geometry(self) -> ViewportGeometry:
        return self.controller.geometry

    def x_scale(self) -> LinearScale:
        return self.controller.x_scale()

    def y_scale(self, fixed_domain: Domain | None = None) -> LinearScale:
        zoomed = self.controller.y_scale()
        if zoomed is not None:
            return zoomed
        if fixed_domain is None:
            raise ValueError("a fixed y domain is required when the y axis is not zoomable")
        return LinearScale(fixed_domain, self.geometry.y_range())

    def begin(self, *, title: str, description: str, aria_label: str) -> SvgBuilder:
        geo = self.geometry
        svg = SvgBuilder(geo.width, geo.height, aria_label=aria_label, title=title, description=description)
        svg.style(stylesheet(self.theme))
        return svg

    def plot_group(self, svg: SvgBuilder, clip_id: str) -> ET.Element:
        geo = self.geometry
        clip = svg.clip_rect(clip_id, geo.plot_left, geo.plot_top, geo.plot_width, geo.plot_height)
        return svg.group(clip_path=clip)

    def y_grid(self, svg: SvgBuilder, y_scale: LinearScale, ticks: Sequence[float]) -> None:
        geo = self.geometry
        for tick in ticks:
            y = y_scale(tick)
            svg.line(geo.plot_left, y, geo.plot_right, y, class_="grid-line")

    def x_tick_labels(
        self,
        svg: SvgBuilder,
        x_scale: LinearScale,
        ticks: Sequence[float],
        fmt: Callable[[float], str],
        *,
        offset: float = 28.0,
    ) -> None:
        y = self.geometry.plot_bottom + offset
        for tick in ticks:
            svg.text(x_scale(tick), y, fmt(tick), text_anchor="middle", class_="axis-label")

    def y_tick_labels(
        self,
        svg: SvgBuilder,
        y_scale: LinearScale,
        ticks: Sequence[float],
        fmt: Callable[[float], str],
        *,
        gap: float = 14.0,
    ) -> None:
        x = self.geometry.plot_left - gap
        for tick in ticks:
            svg.text(x, y_scale(tick) + 4, fmt(tick), text_anchor="end", class_="axis-label")

    def axis_title(self, svg: SvgBuilder, content: str, x: float, y: float, *, anchor: str = "end", **attrs: object) -> None:
        svg.text(x, y, content, text_anchor=anchor, class_="axis-label", **attrs)

    def overlay(self, svg: SvgBuilder) -> ET.Element:
        geo = self.geometry
        tx = self.controller.transform("x")
        rect = svg.rect(
            geo.plot_left,
            geo.plot_top,
            geo.plot_width,
            geo.plot_height,
            fill="transparent",
            class_="interaction-layer",
            aria_hidden=True,
            data_zoom_k=tx.k,
            data_zoom_tx=tx.t,
        )
        if "y" in self.controller.zoom_axes:
            ty = self.controller.transform("y")
            rect.set("data-zoom-ky", fmt_number(ty.k))
            rect.set("data-zoom-ty", fmt_number(ty.t))
        svg.title(rect, OVERLAY_HINT)
        return rect


class Chart(ABC):
    """Base for the four analytics charts: owns the controller and renders SVG markup."""

    name: ClassVar[str] = ""
    title: ClassVar[str] = ""
    description: ClassVar[str] = ""
    aria_label: ClassVar[str] = ""

    def __init__(
        self,
        records: Sequence[EpisodeMetrics],
        *,
        config: ChartConfig | None = None,
        theme: ChartTheme = DEFAULT_THEME,
        insight: str | None = None,
    ) -> None:
        if not records:
            raise ChartDataError(f"{self.name} chart needs at least one episode")
        self.records = sorted(records, key=lambda r: r.episode)
        self.config = config or DEFAULT_CHART_CONFIGS[self.name]
        self.insight = insight
        x_domain, y_domain = self.base_domains()
        self.controller = ZoomPanController(
            self.config.geometry(),
            x_domain,
            y_domain,
            max_zoom=self.config.max_zoom,
        )
        self.frame = ChartFrame(self.controller, theme)

    def base_domains(self) -> tuple[Domain, Domain | None]:
        return (extent(r.episode for r in self.records), None)

    def render(self) -> str:
        text = self.description if not self.insight else f"{self.description} {self.insight}"
        svg = self.frame.begin(title=self.title, description=text, aria_label=self.aria_label)
        self.draw(svg)
        self.frame.overlay(svg)
        return svg.to_markup()

    @abstractmethod
    def draw(self, svg: SvgBuilder) -> None:
        raise NotImplementedError


def episode_label(tick: float) -> str:
    return f"Ep {round(tick)}"


def percent_label(tick: float) -> str:
    return f"{tick * 100:.0f}%"


def count_label(tick: float) -> str:
    return f"{round(tick):,}"
