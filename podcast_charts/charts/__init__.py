"""The four podcast analytics charts and the frame they share."""

from .completion import CompletionRateChart
from .frame import Chart, ChartFrame, extent
from .listener_mix import ListenerMixChart
from .share_scatter import SharePoint, ShareSubscriberScatter
from .subscriber_growth import SubscriberGrowthChart

CHART_TYPES: dict[str, type[Chart]] = {
    CompletionRateChart.name: CompletionRateChart,
    ListenerMixChart.name: ListenerMixChart,
    ShareSubscriberScatter.name: ShareSubscriberScatter,
    SubscriberGrowthChart.name: SubscriberGrowthChart,
}

__all__ = [
    "CHART_TYPES",
    "Chart",
    "ChartFrame",
    "CompletionRateChart",
    "ListenerMixChart",
    "SharePoint",
    "ShareSubscriberScatter",
    "SubscriberGrowthChart",
    "extent",
]
