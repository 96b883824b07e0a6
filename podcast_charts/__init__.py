from podcast_charts.charts import (
    CHART_TYPES,
    ChartFrame,
    CompletionRateChart,
    ListenerMixChart,
    ShareSubscriberScatter,
    SubscriberGrowthChart,
)
from podcast_charts.config import ChartConfig, ChartSuiteConfig, load_chart_configs
from podcast_charts.errors import ChartDataError, ConfigurationError
from podcast_charts.events import InputEvent, parse_input_event
from podcast_charts.geometry import Margin, ViewportGeometry
from podcast_charts.records import EpisodeMetrics, load_episode_metrics
from podcast_charts.regression import RegressionLine, fit_trend
from podcast_charts.scales import LinearScale, tick_values, to_pixel, to_value
from podcast_charts.surface import InteractionLayer, InteractionSurface
from podcast_charts.zoom import DEFAULT_MAX_ZOOM, ZoomPanController, ZoomTransform

__all__ = [
    "CHART_TYPES",
    "ChartConfig",
    "ChartDataError",
    "ChartFrame",
    "ChartSuiteConfig",
    "CompletionRateChart",
    "ConfigurationError",
    "DEFAULT_MAX_ZOOM",
    "EpisodeMetrics",
    "InputEvent",
    "InteractionLayer",
    "InteractionSurface",
    "LinearScale",
    "ListenerMixChart",
    "Margin",
    "RegressionLine",
    "ShareSubscriberScatter",
    "SubscriberGrowthChart",
    "ViewportGeometry",
    "ZoomPanController",
    "ZoomTransform",
    "fit_trend",
    "load_chart_configs",
    "load_episode_metrics",
    "parse_input_event",
    "tick_values",
    "to_pixel",
    "to_value",
]
