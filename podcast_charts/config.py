from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from pathlib import Path
import tomllib
from typing import Any, Mapping

from .errors import ConfigurationError
from .geometry import Margin, ViewportGeometry
from .render.theme import DEFAULT_THEME, ChartTheme, validate_theme_tokens
from .zoom import DEFAULT_MAX_ZOOM

LOGGER = logging.getLogger(__name__)

COMPLETION_RATE = "completion_rate"
LISTENER_MIX = "listener_mix"
SHARES_SUBSCRIBERS = "shares_subscribers"
SUBSCRIBER_GROWTH = "subscriber_growth"
CHART_NAMES = (COMPLETION_RATE, LISTENER_MIX, SHARES_SUBSCRIBERS, SUBSCRIBER_GROWTH)

TIME_SERIES_MARGIN = Margin(top=24, right=24, bottom=42, left=60)
SCATTER_MARGIN = Margin(top=24, right=32, bottom=52, left=68)


@dataclass(frozen=True)
class ChartConfig:
    width: float = 640.0
    height: float = 360.0
    margin: Margin = TIME_SERIES_MARGIN
    max_zoom: float = DEFAULT_MAX_ZOOM

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError("chart width/height must be > 0")
        if not math.isfinite(self.max_zoom) or self.max_zoom < 1:
            raise ConfigurationError("max_zoom must be >= 1")

    def geometry(self) -> ViewportGeometry:
        return ViewportGeometry(width=self.width, height=self.height, margin=self.margin)


DEFAULT_CHART_CONFIGS: dict[str, ChartConfig] = {
    COMPLETION_RATE: ChartConfig(),
    LISTENER_MIX: ChartConfig(),
    SHARES_SUBSCRIBERS: ChartConfig(margin=SCATTER_MARGIN),
    SUBSCRIBER_GROWTH: ChartConfig(),
}


@dataclass(frozen=True)
class ChartSuiteConfig:
    charts: Mapping[str, ChartConfig] = field(default_factory=lambda: dict(DEFAULT_CHART_CONFIGS))
    theme: ChartTheme = DEFAULT_THEME

    def for_chart(self, name: str) -> ChartConfig:
        if name not in CHART_NAMES:
            raise KeyError(f"unknown chart: {name}")
        return self.charts.get(name, DEFAULT_CHART_CONFIGS[name])


def parse_chart_configs(raw: Mapping[str, Any]) -> ChartSuiteConfig:
    charts = dict(DEFAULT_CHART_CONFIGS)
    theme = DEFAULT_THEME
    for section, body in raw.items():
        if not isinstance(body, Mapping):
            raise ConfigurationError(f"config section `{section}` must be a table")
        if section == "theme":
            try:
                theme = validate_theme_tokens(body)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc
            continue
        if section not in CHART_NAMES:
            raise ConfigurationError(f"unknown config section: {section}")
        charts[section] = _parse_chart_section(section, body, charts[section])
    return ChartSuiteConfig(charts=charts, theme=theme)


def load_chart_configs(path: str | Path | None = None) -> ChartSuiteConfig:
    if path is None:
        return ChartSuiteConfig()
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"invalid chart config {config_path}: {exc}") from exc
    suite = parse_chart_configs(raw)
    LOGGER.info("loaded chart config %s (sections: %s)", config_path, ", ".join(sorted(raw)) or "none")
    return suite


def _parse_chart_section(section: str, body: Mapping[str, Any], base: ChartConfig) -> ChartConfig:
    unknown = set(body) - {"width", "height", "max_zoom", "margin"}
    if unknown:
        raise ConfigurationError(f"[{section}] has unknown keys: {', '.join(sorted(unknown))}")
    margin = base.margin
    if "margin" in body:
        raw_margin = body["margin"]
        if not isinstance(raw_margin, Mapping):
            raise ConfigurationError(f"[{section}].margin must be a table")
        bad = set(raw_margin) - {"top", "right", "bottom", "left"}
        if bad:
            raise ConfigurationError(f"[{section}].margin has unknown keys: {', '.join(sorted(bad))}")
        margin = Margin(
            top=_number(section, "margin.top", raw_margin.get("top", margin.top)),
            right=_number(section, "margin.right", raw_margin.get("right", margin.right)),
            bottom=_number(section, "margin.bottom", raw_margin.get("bottom", margin.bottom)),
            left=_number(section, "margin.left", raw_margin.get("left", margin.left)),
        )
    config = ChartConfig(
        width=_number(section, "width", body.get("width", base.width)),
        height=_number(section, "height", body.get("height", base.height)),
        margin=margin,
        max_zoom=_number(section, "max_zoom", body.get("max_zoom", base.max_zoom)),
    )
    config.geometry().require_plot_area()
    return config


def _number(section: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"[{section}].{key} must be a number, got {value!r}")
    return float(value)
